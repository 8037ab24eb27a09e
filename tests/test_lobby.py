import itertools

import pytest

from lobby.registry import GameRegistry, GameListing


@pytest.fixture
def registry():
    counter = itertools.count(1)
    return GameRegistry(id_factory=lambda: f"game{next(counter)}")


def test_create_game_seats_creator(registry):
    game_id = registry.create_game("alice")
    assert game_id == "game1"
    assert registry.list_games() == [GameListing(id="game1", player_count=1)]


def test_join_game(registry):
    game_id = registry.create_game("alice")
    assert registry.join_game(game_id, "bob")
    assert registry.get_game(game_id).players == ["alice", "bob"]
    assert registry.list_games()[0].player_count == 2


def test_cannot_join_full_game(registry):
    game_id = registry.create_game("alice")
    registry.join_game(game_id, "bob")
    assert not registry.join_game(game_id, "carol")
    assert registry.list_games()[0].player_count == 2


def test_cannot_join_twice_or_unknown_game(registry):
    game_id = registry.create_game("alice")
    assert not registry.join_game(game_id, "alice")
    assert not registry.join_game("nope", "bob")


def test_leave_game_closes_empty_game(registry):
    game_id = registry.create_game("alice")
    registry.join_game(game_id, "bob")

    assert registry.leave_game(game_id, "alice")
    assert registry.list_games() == [GameListing(id=game_id, player_count=1)]

    assert registry.leave_game(game_id, "bob")
    assert registry.list_games() == []
    assert registry.get_game(game_id) is None


def test_leave_unknown(registry):
    game_id = registry.create_game("alice")
    assert not registry.leave_game(game_id, "bob")
    assert not registry.leave_game("nope", "alice")


def test_listeners_get_every_change(registry):
    received = []
    registry.subscribe(received.append)
    assert received == [[]]

    game_id = registry.create_game("alice")
    registry.join_game(game_id, "bob")
    registry.leave_game(game_id, "bob")

    assert [[g.player_count for g in games] for games in received] == [[], [1], [2], [1]]


def test_failed_join_does_not_broadcast(registry):
    game_id = registry.create_game("alice")
    received = []
    registry.subscribe(received.append)
    registry.join_game("nope", "bob")
    assert len(received) == 1


def test_unsubscribe(registry):
    received = []
    registry.subscribe(received.append)
    registry.unsubscribe(received.append)
    registry.create_game("alice")
    assert len(received) == 1


def test_duplicate_ids_are_skipped():
    ids = iter(["a", "a", "b"])
    registry = GameRegistry(id_factory=lambda: next(ids))
    assert registry.create_game("alice") == "a"
    assert registry.create_game("bob") == "b"


def test_default_ids_are_unique():
    registry = GameRegistry()
    ids = {registry.create_game(f"player{i}") for i in range(20)}
    assert len(ids) == 20


def test_listing_payload():
    assert GameListing(id="x", player_count=2).to_dict() == {"id": "x", "players": 2}
