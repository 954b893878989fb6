# Path: core/registry/user_registry.py
# Purpose: Hold the last loaded snapshot of user records with id-indexed lookup.
# Layer: core/registry.
# Details: Each load replaces the snapshot wholesale; the generation counter identifies snapshots for caching.

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from core.models.domain import RawUser


class UserRegistry:
    """In-memory snapshot of raw users keyed by id.

    The registry never patches its contents: ``load`` builds a new index and swaps it in,
    so readers never observe a partially loaded snapshot.
    """

    def __init__(self) -> None:
        self._users: Tuple[RawUser, ...] = ()
        self._by_id: Dict[str, RawUser] = {}
        self._generation = 0

    def load(self, users: Iterable[RawUser]) -> None:
        """Replace the entire snapshot with ``users``."""

        snapshot = tuple(users)
        # Later duplicates win the lookup, all records stay in all().
        by_id = {user.id: user for user in snapshot}
        self._users = snapshot
        self._by_id = by_id
        self._generation += 1

    def get(self, user_id: str) -> Optional[RawUser]:
        return self._by_id.get(user_id)

    def all(self) -> Tuple[RawUser, ...]:
        """Return every record in load order."""

        return self._users

    @property
    def generation(self) -> int:
        """Number of completed loads; 0 while the registry is still empty."""

        return self._generation

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._by_id
