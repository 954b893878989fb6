# Path: config/__init__.py
# Purpose: Package initializer for configuration module.
# Layer: config.
# Details: Exposes settings models and the logging setup helper.

from .logging import configure_logging
from .settings import AppSettings, DataSourceSettings, WindowSettings

__all__ = ["AppSettings", "DataSourceSettings", "WindowSettings", "configure_logging"]
