"""Environment-driven settings shared by the text and telemetry layers."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Optional

ENV_PREFIX = "TEXT_COORDS_"


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class CoordSettings:
    """Knobs that change how visual columns are measured.

    ``unicode_version`` is handed to ``wcwidth`` so hosts can pin the width
    tables to whatever their terminal implements; ``"auto"`` lets wcwidth pick.
    """

    unicode_version: str = "auto"


def load_settings() -> CoordSettings:
    """Build settings from ``TEXT_COORDS_*`` environment variables."""

    return CoordSettings(unicode_version=env("UNICODE_VERSION") or "auto")


_ACTIVE: Optional[CoordSettings] = None


def get_settings() -> CoordSettings:
    global _ACTIVE
    if _ACTIVE is None:
        _ACTIVE = load_settings()
    return _ACTIVE


def configure_settings(
    settings: Optional[CoordSettings] = None, **overrides: Any
) -> CoordSettings:
    """Install ``settings`` (or the environment defaults) plus ``overrides``."""

    global _ACTIVE
    base = settings if settings is not None else load_settings()
    _ACTIVE = replace(base, **overrides) if overrides else base
    return _ACTIVE


__all__ = [
    "ENV_PREFIX",
    "CoordSettings",
    "configure_settings",
    "env",
    "env_flag",
    "get_settings",
    "load_settings",
]
