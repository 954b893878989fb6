import pytest

from core.models.domain import RawUser
from core.search import filter_users, matches, normalize_query

from conftest import make_user, registry_of


@pytest.fixture
def registry():
    return registry_of(
        [
            make_user("u-1", name="Alice Smith"),
            make_user("u-2", name="Bob", friends=["u-1"]),
            make_user("u-3", name="Carol", friends=["u-2", "ghost"]),
        ]
    )


@pytest.mark.parametrize("query", ["", "   ", "\t\n"])
def test_blank_query_matches_everyone(registry, query):
    assert all(matches(user, query, registry) for user in registry.all())


def test_matches_name_case_insensitively(registry):
    alice = registry.get("u-1")
    assert matches(alice, "ALICE", registry) == matches(alice, "alice", registry) is True


def test_matches_id_and_trims_whitespace(registry):
    assert matches(registry.get("u-3"), "  U-3 ", registry)


def test_matches_friend_name_one_hop(registry):
    bob = registry.get("u-2")
    assert matches(bob, "alic", registry)


def test_does_not_match_friends_of_friends(registry):
    # Carol -> Bob -> Alice
    assert not matches(registry.get("u-3"), "alice", registry)


def test_dangling_friends_never_match(registry):
    assert not matches(registry.get("u-3"), "ghost", registry)
    assert not matches(registry.get("u-3"), "unknown", registry)


def test_filter_users_preserves_order(registry):
    result = filter_users(registry.all(), "b", registry)
    assert [user.id for user in result] == ["u-2", "u-3"]


def test_normalize_query():
    assert normalize_query("  Straße ") == "strasse"
    assert normalize_query(None) == ""


def test_null_name_does_not_match_none_text():
    user = RawUser.from_dict({"id": "7", "rank": 1, "name": None})
    registry = registry_of([user])

    assert not matches(user, "none", registry)
