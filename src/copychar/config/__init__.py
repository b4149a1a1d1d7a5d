"""copychar configuration package."""

from copychar.config.loader import get_config, load_config
from copychar.config.models import CopyCharConfig

__all__ = ["CopyCharConfig", "get_config", "load_config"]
