"""CLI sub-apps (config, etc.)."""

from toc_extract.tools.config import config_app

__all__ = ["config_app"]
