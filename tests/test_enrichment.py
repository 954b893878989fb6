from core.enrichment import UNKNOWN_FRIEND, enrich, enrich_all

from conftest import make_user, registry_of


def test_user_without_friends():
    user = make_user("1")
    enriched = enrich(user, registry_of([user]))

    assert enriched.friend_names == ()
    assert enriched.highest_ranking_friend is None
    assert enriched.user is user


def test_friend_names_follow_friend_order_with_placeholders_and_duplicates():
    bob = make_user("2", rank=1, name="Bob")
    carol = make_user("3", rank=2, name="Carol")
    user = make_user("1", friends=["3", "ghost", "2", "3"])
    enriched = enrich(user, registry_of([user, bob, carol]))

    assert enriched.friend_names == ("Carol", UNKNOWN_FRIEND, "Bob", "Carol")
    assert len(enriched.friend_names) == len(user.friends)


def test_highest_rank_wins():
    low = make_user("low", rank=1)
    high = make_user("high", rank=9)
    user = make_user("1", friends=["low", "high"])

    assert enrich(user, registry_of([user, low, high])).highest_ranking_friend == "high"


def test_tie_keeps_first_friend():
    a = make_user("A", rank=5)
    b = make_user("B", rank=5)
    user = make_user("1", friends=["A", "B"])

    assert enrich(user, registry_of([user, a, b])).highest_ranking_friend == "A"


def test_negative_ranks_still_produce_a_winner():
    a = make_user("A", rank=-10)
    b = make_user("B", rank=-3)
    user = make_user("1", friends=["A", "B"])

    assert enrich(user, registry_of([user, a, b])).highest_ranking_friend == "B"


def test_dangling_only_friends():
    user = make_user("1", friends=["ghost"])
    enriched = enrich(user, registry_of([user]))

    assert enriched.friend_names == (UNKNOWN_FRIEND,)
    assert enriched.highest_ranking_friend is None


def test_dangling_ids_never_win_ranking():
    real = make_user("real", rank=1)
    user = make_user("1", friends=["ghost", "real"])

    assert enrich(user, registry_of([user, real])).highest_ranking_friend == "real"


def test_cycles_are_harmless():
    a = make_user("a", rank=1, name="A", friends=["b"])
    b = make_user("b", rank=2, name="B", friends=["a"])
    registry = registry_of([a, b])

    enriched = enrich_all(registry.all(), registry)
    assert [user.friend_names for user in enriched] == [("B",), ("A",)]
    assert [user.highest_ranking_friend for user in enriched] == ["b", "a"]


def test_enrichment_is_deterministic(alice_bob_registry):
    first = enrich_all(alice_bob_registry.all(), alice_bob_registry)
    second = enrich_all(alice_bob_registry.all(), alice_bob_registry)
    assert first == second


def test_to_dict_uses_wire_field_names(alice_bob_registry):
    payload = enrich(alice_bob_registry.get("1"), alice_bob_registry).to_dict()

    assert payload["friends"] == ["2"]
    assert payload["friendNames"] == ["Bob"]
    assert payload["highestRankingFriend"] == "2"
