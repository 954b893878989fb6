# Path: core/datasource/file_source.py
# Purpose: Load user records from a JSON file on disk.
# Layer: core/datasource.
# Details: Mirrors the HTTP payload format so demos and tests can run offline.

from __future__ import annotations

import json
from pathlib import Path
from typing import List

from core.models.domain import RawUser
from .base import DataSource, FetchError


class JsonFileUserSource(DataSource):
    """DataSource reading a JSON array of user objects from a file."""

    name = "file"

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load_all(self) -> List[RawUser]:
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise FetchError(f"Cannot read {self.path}: {exc}") from exc
        except ValueError as exc:
            raise FetchError(f"{self.path} is not valid JSON") from exc
        return self._parse_users(payload)
