# Path: core/models/domain.py
# Purpose: Define domain models shared across loading, enrichment, search, and windowing.
# Layer: core/models.
# Details: Immutable dataclasses keep derived results safe to cache and to hand to GUI/API layers.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class RawUser:
    """User record as received from the data source."""

    id: str
    rank: int
    name: str
    email: str = ""
    image: str = ""
    friends: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RawUser":
        """Build a record from a decoded JSON object.

        Only type coercion is applied; a missing ``id``, ``rank`` or ``name`` raises KeyError,
        while a null ``name`` becomes an empty string.
        """

        return cls(
            id=str(payload["id"]),
            rank=int(payload["rank"]),
            name="" if payload["name"] is None else str(payload["name"]),
            email=str(payload.get("email") or ""),
            image=str(payload.get("image") or ""),
            friends=tuple(str(friend_id) for friend_id in payload.get("friends") or ()),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "rank": self.rank,
            "name": self.name,
            "email": self.email,
            "image": self.image,
            "friends": list(self.friends),
        }


@dataclass(frozen=True)
class EnrichedUser:
    """Raw user plus the display fields derived from its friends."""

    user: RawUser
    friend_names: Tuple[str, ...] = ()
    highest_ranking_friend: Optional[str] = None

    @property
    def id(self) -> str:
        return self.user.id

    @property
    def rank(self) -> int:
        return self.user.rank

    @property
    def name(self) -> str:
        return self.user.name

    @property
    def email(self) -> str:
        return self.user.email

    @property
    def image(self) -> str:
        return self.user.image

    @property
    def friends(self) -> Tuple[str, ...]:
        return self.user.friends

    def to_dict(self) -> Dict[str, Any]:
        payload = self.user.to_dict()
        payload["friendNames"] = list(self.friend_names)
        payload["highestRankingFriend"] = self.highest_ranking_friend
        return payload


@dataclass(frozen=True)
class RevealedPage:
    """Prefix of the filtered, enriched results currently revealed to the presentation layer."""

    users: Tuple[EnrichedUser, ...]
    visible_count: int
    total: int

    @property
    def has_more(self) -> bool:
        return self.visible_count < self.total

    def to_dict(self) -> Dict[str, Any]:
        return {
            "users": [user.to_dict() for user in self.users],
            "visibleCount": self.visible_count,
            "total": self.total,
            "hasMore": self.has_more,
        }
