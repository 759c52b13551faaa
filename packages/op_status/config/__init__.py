"""Public API for op-status configuration."""

from .loader import load_settings
from .models import DEFAULT_CONFIG_PATH, LoggingSettings, OpStatusSettings

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "LoggingSettings",
    "OpStatusSettings",
    "load_settings",
]
