# Path: core/datasource/__init__.py
# Purpose: Package initializer for user data sources.
# Layer: core/datasource.
# Details: Exposes the DataSource interface, concrete sources, and a settings-driven factory.

from config.settings import DataSourceSettings

from .base import DataSource, FetchError
from .file_source import JsonFileUserSource
from .http_source import HttpUserSource, fetch_bytes


def build_source(settings: DataSourceSettings) -> DataSource:
    """Return the file source when a path is configured, otherwise the HTTP source."""

    if settings.path is not None:
        return JsonFileUserSource(settings.path)
    return HttpUserSource(settings.url, timeout=settings.timeout)


__all__ = ["DataSource", "FetchError", "HttpUserSource", "JsonFileUserSource", "build_source", "fetch_bytes"]
