# Path: core/datasource/base.py
# Purpose: Define the DataSource interface and the error it raises.
# Layer: core/datasource.
# Details: Sources own schema handling; FetchError is the only failure that leaves a source.

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List

from core.models.domain import RawUser


class FetchError(Exception):
    """Raised when user records cannot be loaded or decoded."""


class DataSource(ABC):
    """Abstract base class for user record providers."""

    name: str

    @abstractmethod
    def load_all(self) -> List[RawUser]:
        """Return every user record, raising FetchError on failure."""

    @staticmethod
    def _parse_users(payload: Any) -> List[RawUser]:
        """Turn a decoded JSON array into records."""

        if not isinstance(payload, list):
            raise FetchError(f"Expected a JSON array of users, got {type(payload).__name__}")
        users: List[RawUser] = []
        for index, item in enumerate(payload):
            if not isinstance(item, dict):
                raise FetchError(f"User record {index} is not an object")
            try:
                users.append(RawUser.from_dict(item))
            except (KeyError, TypeError, ValueError) as exc:
                raise FetchError(f"User record {index} is malformed: {exc!r}") from exc
        return users
