"""Configuration loader for copychar.

Returns the built-in defaults unless a JSON file is given, either directly
or through the ``CB_CONFIG`` environment variable. Uses module-level caching
so a file is only parsed once per process.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from copychar.config.models import CopyCharConfig
from copychar.domain.errors import ConfigurationError

CONFIG_ENV_VAR = "CB_CONFIG"

# Module-level cache
_config_cache: dict[str, CopyCharConfig] = {}
_DEFAULT_KEY = "<defaults>"


def load_config(path: Optional[Path] = None) -> CopyCharConfig:
    """Load and validate copychar config.

    Parameters
    ----------
    path : Path | None
        Path to a JSON config file. If ``None``, the built-in defaults are
        returned and no file is read.

    Returns
    -------
    CopyCharConfig
        Validated configuration instance.

    Raises
    ------
    FileNotFoundError
        If the specified path does not exist.
    pydantic.ValidationError
        If the JSON content does not match the expected schema.
    """
    cache_key = str(path.resolve()) if path else _DEFAULT_KEY

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if path is None:
        config = CopyCharConfig()
    else:
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        raw = json.loads(path.read_text(encoding="utf-8"))
        config = CopyCharConfig.model_validate(raw)

    _config_cache[cache_key] = config
    return config


def get_config(environ: Optional[Mapping[str, str]] = None) -> CopyCharConfig:
    """Get the active configuration (cached).

    This is the main entry point used by the rest of the application.

    Raises
    ------
    ConfigurationError
        If ``CB_CONFIG`` names a missing, malformed or invalid file.
    """
    env = os.environ if environ is None else environ
    override = env.get(CONFIG_ENV_VAR)
    if not override:
        return load_config()
    try:
        return load_config(Path(override))
    except (OSError, ValueError) as exc:
        # ValueError covers both JSONDecodeError and pydantic.ValidationError
        raise ConfigurationError(f"Invalid {CONFIG_ENV_VAR} file {override}: {exc}") from exc


def clear_cache() -> None:
    """Clear the config cache: useful for testing."""
    _config_cache.clear()
