# Path: core/search/filters.py
# Purpose: Decide whether a user matches a free-text query.
# Layer: core/search.
# Details: Matches the user's name and id plus the names of directly listed friends.

from __future__ import annotations

from typing import Iterable, Tuple

from core.models.domain import RawUser
from core.registry.user_registry import UserRegistry


def normalize_query(query: str | None) -> str:
    """Trim and case-fold a raw query string."""

    return (query or "").strip().casefold()


def _friend_matches(user: RawUser, needle: str, registry: UserRegistry) -> bool:
    for friend_id in user.friends:
        friend = registry.get(friend_id)
        if friend is not None and needle in friend.name.casefold():
            return True
    return False


def matches(user: RawUser, query: str, registry: UserRegistry) -> bool:
    """Return True if ``query`` occurs in the user's name, id, or a friend's name.

    An empty or whitespace-only query matches every user. Friends of friends are not searched.
    """

    needle = normalize_query(query)
    if not needle:
        return True
    return (
        needle in user.name.casefold()
        or needle in user.id.casefold()
        or _friend_matches(user, needle, registry)
    )


def filter_users(users: Iterable[RawUser], query: str, registry: UserRegistry) -> Tuple[RawUser, ...]:
    """Keep the users matching ``query`` in their original order."""

    if not normalize_query(query):
        return tuple(users)
    return tuple(user for user in users if matches(user, query, registry))
