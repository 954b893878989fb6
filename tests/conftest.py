from typing import Iterable, List

import pytest

from core.models.domain import RawUser
from core.registry.user_registry import UserRegistry


def make_user(user_id: str, rank: int = 0, name: str | None = None, friends: Iterable[str] = ()) -> RawUser:
    return RawUser(
        id=user_id,
        rank=rank,
        name=name if name is not None else f"User {user_id}",
        email=f"{user_id}@example.com",
        image=f"https://example.com/{user_id}.png",
        friends=tuple(friends),
    )


def registry_of(users: List[RawUser]) -> UserRegistry:
    registry = UserRegistry()
    registry.load(users)
    return registry


@pytest.fixture
def alice_bob_registry() -> UserRegistry:
    return registry_of(
        [
            make_user("1", rank=10, name="Alice", friends=["2"]),
            make_user("2", rank=3, name="Bob"),
        ]
    )


@pytest.fixture
def sixty_users_registry() -> UserRegistry:
    return registry_of([make_user(str(index), rank=index) for index in range(60)])
