"""Structured logging and profiling for coordinate queries, built on telelog.

A telelog config is described as a mapping of ``with_<option>`` names to
values, either from a named preset or from ``TEXT_COORDS_*`` environment
variables, and built in one place. Profiling is always on.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

from .settings import env, env_flag

tl = cast(Any, telelog)

DEFAULT_LOGGER_NAME = env("LOGGER", "text_coords") or "text_coords"

PRESETS: Dict[str, Dict[str, Any]] = {
    "development": {
        "min_level": "DEBUG",
        "console_output": True,
        "colored_output": True,
        "json_format": False,
    },
    "production": {
        "min_level": "INFO",
        "console_output": False,
        "buffering": True,
        "file_output": "text_coords.log",
    },
    "performance": {
        "min_level": "DEBUG",
        "console_output": False,
        "buffering": True,
        "json_format": True,
        "file_output": "text_coords-performance.log",
    },
}
_PRESET_ALIASES = {"performance_analysis": "performance"}

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None


def preset_options(preset: str) -> Dict[str, Any]:
    key = preset.lower()
    key = _PRESET_ALIASES.get(key, key)
    if key not in PRESETS:
        raise ValueError(f"Unknown preset '{preset}'.")
    options = dict(PRESETS[key])
    if "file_output" in options:
        options["file_output"] = env("LOG_FILE") or options["file_output"]
    return options


def env_options() -> Dict[str, Any]:
    """Options described by the ``TEXT_COORDS_*`` logging variables."""

    console = not env_flag("DISABLE_CONSOLE", False)
    options: Dict[str, Any] = {
        "min_level": (env("LOG_LEVEL") or "INFO").upper(),
        "console_output": console,
    }
    if console:
        options["colored_output"] = not env_flag("NO_COLOR", False)
    if env_flag("LOG_JSON", False):
        options["json_format"] = True
    if env("LOG_FILE"):
        options["file_output"] = env("LOG_FILE")
    if env_flag("LOG_BUFFERED", False):
        options["buffering"] = True
        options["buffer_size"] = int(env("LOG_BUFFER_SIZE") or "2048")
    return options


def build_config(options: Dict[str, Any]) -> Any:
    config = tl.Config()
    for option, value in options.items():
        getattr(config, f"with_{option}")(value)
    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog config and drop cached loggers.

    ``config`` adopts an explicit ``tl.Config``; ``preset`` names one of
    ``PRESETS``. With neither, the environment decides.
    """

    global _CONFIG
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = build_config(preset_options(preset))
    elif config is None:
        config = build_config(env_options())
    else:
        config.with_profiling(True)

    _CONFIG = config
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for ``name``."""

    global _CONFIG
    if _CONFIG is None:
        _CONFIG = build_config(env_options())
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGERS:
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _CONFIG)
    return _LOGGERS[logger_name]


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _level_method(logger: Any, level: Any) -> Tuple[Any, bool]:
    name = str(level).lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        return structured, True
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return plain, False


def _emit(logger: Any, level: Any, message: str, payload: Dict[str, Any]) -> None:
    method, structured = _level_method(logger, level)
    if structured:
        method(message, [(str(key), _as_text(value)) for key, value in payload.items()])
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str | Any = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    logger: Any
    span_name: str
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _as_text(value)

    def fail(self, reason: str) -> None:
        payload = {"span": self.span_name, **self.metadata, "reason": reason}
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block with ``metadata`` pushed onto the logger context."""

    log = get_logger(logger_name)
    handle = SpanHandle(logger=log, span_name=name)
    for key, value in (metadata or {}).items():
        handle.add_metadata(key, value)
    context = list(handle.metadata)
    for key in context:
        log.add_context(key, handle.metadata[key])

    try:
        with log.profile(name):
            yield handle
    except Exception as exc:
        handle.fail(str(exc))
        raise
    finally:
        for key in context:
            log.remove_context(key)


configure()
logger = get_logger()

__all__ = [
    "PRESETS",
    "SpanHandle",
    "build_config",
    "configure",
    "env_options",
    "get_logger",
    "logger",
    "preset_options",
    "record_event",
    "span",
]
