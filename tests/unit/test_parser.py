import pytest

from adventure import parser
from adventure.world_model import Item, Prop, compare


def test_parse_splits_and_lowercases_verb():
    parsed = parser.parse("  TAKE   Coin  from Chest ")
    assert parsed.verb == "take"
    assert parsed.args == ["Coin", "from", "Chest"]
    assert parsed.argument == "Coin from Chest"


def test_parse_empty_line():
    assert parser.parse("   ").verb == ""
    assert parser.parse("").args == []


def test_compare_index_or_name():
    assert compare("2", 2, "Coin")
    assert compare("coin", 1, "Coin")
    assert compare("COIN", 1, "Coin")
    assert not compare("co", 1, "Coin")
    assert not compare("1", 2, "Coin")


@pytest.mark.parametrize(
    ("direction", "expected"),
    [
        ("north", "south"),
        ("south", "north"),
        ("east", "west"),
        ("west", "east"),
        ("up", "down"),
        ("down", "up"),
        ("North", "south"),
        ("inside", None),
        (None, None),
    ],
)
def test_opposite_direction(direction, expected):
    assert parser.opposite_direction(direction) == expected


def test_split_from():
    assert parser.split_from(["rusty", "key", "from", "old", "chest"]) == ("rusty key", "old chest")
    assert parser.split_from(["coin"]) == ("coin", None)
    assert parser.split_from(["coin", "FROM"]) == ("coin", "")


def test_loose_item_matches_before_prop(hall_game):
    target = parser.resolve_target(hall_game.world, hall_game.session.state, ["chest"])
    assert isinstance(target.entity, Item)
    assert target.entity.id == "toy"
    assert target.container is hall_game.session.state.area.items


def test_prop_matched_when_no_item_does(hall_game):
    target = parser.resolve_target(hall_game.world, hall_game.session.state, ["shelf"])
    assert isinstance(target.entity, Prop)
    assert target.prop.name == "Shelf"
    assert target.container is None


def test_index_matches_area_items_first(hall_game):
    state = hall_game.session.state
    assert parser.resolve_target(hall_game.world, state, ["1"]).item.id == "coin"
    assert parser.resolve_target(hall_game.world, state, ["2"]).item.id == "toy"
    assert parser.resolve_target(hall_game.world, state, ["3"]) is None


def test_from_prop_matches_only_inside_prop(hall_game):
    state = hall_game.session.state
    chest = state.area.find_prop("chest")
    target = parser.resolve_target(hall_game.world, state, ["letter", "from", "chest"])
    assert target.item.id == "letter"
    assert target.container is chest
    by_index = parser.resolve_target(hall_game.world, state, ["2", "from", "1"])
    assert by_index.item.id == "key"
    assert parser.resolve_target(hall_game.world, state, ["coin", "from", "chest"]) is None
    assert parser.resolve_target(hall_game.world, state, ["letter", "from", "shelf"]) is None
    assert parser.resolve_target(hall_game.world, state, ["letter", "from", "table"]) is None


def test_from_bag_uses_player_container(hall_game):
    state = hall_game.session.state
    assert parser.resolve_target(hall_game.world, state, ["coin", "from", "bag"]) is None
    state.items.add("coin", 2)
    target = parser.resolve_target(hall_game.world, state, ["coin", "from", "bag"])
    assert target.item.id == "coin"
    assert target.container is state.items


def test_malformed_from_clause(hall_game):
    state = hall_game.session.state
    assert parser.resolve_target(hall_game.world, state, ["from", "chest"]) is None
    assert parser.resolve_target(hall_game.world, state, ["letter", "from"]) is None


def test_find_prop_by_index_or_name(hall_game):
    area = hall_game.session.state.area
    assert area.find_prop("1").name == "Chest"
    assert area.find_prop("SHELF").name == "Shelf"
    assert area.find_prop("3") is None
