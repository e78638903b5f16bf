"""Build HTML pages from markdown files."""

from .core import SiteBuilder
from .config import BuildConfig, load_config
from .cli import mdpress as cli

__all__ = ["SiteBuilder", "BuildConfig", "load_config", "cli"]
