"""Process-wide settings and telemetry."""

from .settings import CoordSettings, configure_settings, get_settings, load_settings

__all__ = [
    "CoordSettings",
    "configure_settings",
    "get_settings",
    "load_settings",
]
