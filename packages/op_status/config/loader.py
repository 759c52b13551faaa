"""Settings loading with deterministic precedence.

The cascade is always:
1) explicit ``cli_params``
2) environment variables (``OP_STATUS_`` prefix, ``__`` nesting, e.g.
   ``OP_STATUS_LOGGING__LEVEL=DEBUG``)
3) the YAML config file
4) model defaults
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Mapping

from .models import DEFAULT_CONFIG_PATH, OpStatusSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> OpStatusSettings:
    """Resolve settings, reading YAML from ``config_path`` when it exists."""
    resolved = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH

    class _FileBoundSettings(OpStatusSettings):
        _config_path: ClassVar[Path] = resolved

    return _FileBoundSettings(**dict(cli_params or {}))
