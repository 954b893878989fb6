# Path: core/enrichment/enricher.py
# Purpose: Derive display fields for a user from its friends.
# Layer: core/enrichment.
# Details: Dangling friend ids are expected data; they become placeholders and never raise.

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from core.models.domain import EnrichedUser, RawUser
from core.registry.user_registry import UserRegistry

UNKNOWN_FRIEND = "Unknown Friend"


def resolve_friend_names(user: RawUser, registry: UserRegistry) -> Tuple[str, ...]:
    """Map each friend id to its name, keeping order and duplicates."""

    names: List[str] = []
    for friend_id in user.friends:
        friend = registry.get(friend_id)
        names.append(friend.name if friend is not None else UNKNOWN_FRIEND)
    return tuple(names)


def highest_ranking_friend(user: RawUser, registry: UserRegistry) -> Optional[str]:
    """Return the id of the resolvable friend with the greatest rank.

    Ties keep the earliest friend in ``user.friends``.
    """

    best_id: Optional[str] = None
    best_rank = float("-inf")
    for friend_id in user.friends:
        friend = registry.get(friend_id)
        if friend is None:
            continue
        if friend.rank > best_rank:
            best_id = friend_id
            best_rank = friend.rank
    return best_id


def enrich(user: RawUser, registry: UserRegistry) -> EnrichedUser:
    """Attach resolved friend names and the top-ranked friend to ``user``."""

    return EnrichedUser(
        user=user,
        friend_names=resolve_friend_names(user, registry),
        highest_ranking_friend=highest_ranking_friend(user, registry),
    )


def enrich_all(users: Iterable[RawUser], registry: UserRegistry) -> Tuple[EnrichedUser, ...]:
    return tuple(enrich(user, registry) for user in users)
