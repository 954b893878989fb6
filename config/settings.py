# Path: config/settings.py
# Purpose: Provide typed application configuration models.
# Layer: config.
# Details: Centralizes settings for the data source, result window, caching, and logging.

import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

DEFAULT_USERS_URL = (
    "https://gist.githubusercontent.com/claudebaxter/03ba51b04fe8a04f398bcbd1a0e7d45c/raw/"
    "36af91bea6013d7029b2b27a952b63c4591de16c/gistfile1.json"
)


class WindowSettings(BaseModel):
    """Settings controlling how many results are revealed and when more are disclosed."""

    initial_window: int = Field(default=25, ge=0, description="Number of results revealed after a query change.")
    increment: int = Field(default=25, ge=1, description="Number of results added on each near-bottom signal.")
    proximity_threshold: int = Field(
        default=50, ge=0, description="Distance from the trailing edge that counts as near the bottom."
    )


class DataSourceSettings(BaseModel):
    """Settings describing where user records are loaded from."""

    url: str = Field(default=DEFAULT_USERS_URL, description="Remote JSON array of user records.")
    path: Optional[Path] = Field(default=None, description="Local JSON file used instead of the URL when set.")
    timeout: float = Field(default=10.0, gt=0, description="HTTP timeout in seconds.")


class AppSettings(BaseModel):
    """Top-level application settings shared across services and interfaces."""

    window: WindowSettings = Field(default_factory=WindowSettings)
    data_source: DataSourceSettings = Field(default_factory=DataSourceSettings)
    memoize: bool = Field(default=True, description="Cache pipeline results per registry snapshot and query.")
    gui_enabled: bool = Field(default=True, description="Flag indicating if the GUI should be initialized.")
    api_enabled: bool = Field(default=False, description="Flag indicating if the HTTP API should be initialized.")
    log_level: str = Field(default="INFO", description="Verbosity level for application logs.")

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "AppSettings":
        """Instantiate settings from USERDIR_* environment variables when available."""

        env = os.environ if environ is None else environ

        data_source: Dict[str, Any] = {}
        if env.get("USERDIR_DATA_URL"):
            data_source["url"] = env["USERDIR_DATA_URL"]
        if env.get("USERDIR_DATA_PATH"):
            data_source["path"] = Path(env["USERDIR_DATA_PATH"])
        if env.get("USERDIR_TIMEOUT"):
            data_source["timeout"] = env["USERDIR_TIMEOUT"]

        window: Dict[str, Any] = {}
        for key, field_name in (
            ("USERDIR_INITIAL_WINDOW", "initial_window"),
            ("USERDIR_INCREMENT", "increment"),
            ("USERDIR_PROXIMITY_THRESHOLD", "proximity_threshold"),
        ):
            if env.get(key):
                window[field_name] = env[key]

        payload: Dict[str, Any] = {
            "window": WindowSettings(**window),
            "data_source": DataSourceSettings(**data_source),
        }
        if env.get("USERDIR_LOG_LEVEL"):
            payload["log_level"] = env["USERDIR_LOG_LEVEL"].upper()
        return cls(**payload)


__all__ = ["AppSettings", "DataSourceSettings", "WindowSettings", "DEFAULT_USERS_URL"]
