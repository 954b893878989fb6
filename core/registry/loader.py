# Path: core/registry/loader.py
# Purpose: Apply data source results to the registry with last-write-wins semantics.
# Layer: core/registry.
# Details: Fetch failures are logged and leave the previous snapshot in place.

from __future__ import annotations

import logging
from typing import Iterable

from core.datasource.base import DataSource, FetchError
from core.models.domain import RawUser
from .user_registry import UserRegistry

logger = logging.getLogger(__name__)


class RegistryLoader:
    """Coordinate loads from a DataSource into a UserRegistry.

    Each load takes a ticket from ``begin``. A result is applied only if no newer
    ticket has completed already, so a superseded load becomes a no-op.
    """

    def __init__(self, source: DataSource, registry: UserRegistry) -> None:
        self.source = source
        self.registry = registry
        self._last_issued = 0
        self._last_applied = 0

    def begin(self) -> int:
        """Issue a ticket for a new load."""

        self._last_issued += 1
        return self._last_issued

    def complete(self, ticket: int, users: Iterable[RawUser]) -> bool:
        """Apply ``users`` for ``ticket`` unless a newer load already landed."""

        if ticket <= self._last_applied:
            logger.debug("Dropping stale load %s (last applied %s)", ticket, self._last_applied)
            return False
        self.registry.load(users)
        self._last_applied = ticket
        logger.info("Loaded %d users (load %s)", len(self.registry), ticket)
        return True

    def fail(self, ticket: int, error: FetchError) -> None:
        """Record a failed load; the registry keeps its previous snapshot."""

        logger.warning("Load %s failed, keeping %d cached users: %s", ticket, len(self.registry), error)

    def load(self) -> bool:
        """Fetch from the source and apply the result.

        External calls:
        - core/datasource/base.py::DataSource.load_all - fetches the raw user records.
        """

        ticket = self.begin()
        try:
            users = self.source.load_all()
        except FetchError as exc:
            self.fail(ticket, exc)
            return False
        return self.complete(ticket, users)
