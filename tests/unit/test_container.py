import pytest

from adventure.world_model import Container, Prop


def test_add_merges_amounts():
    c = Container()
    c.add("coin", 2)
    c.add("coin")
    assert c.amount("coin") == 3
    assert c.listing() == [("coin", 3)]


@pytest.mark.parametrize("amount", [0, -1])
def test_add_non_positive_is_noop(amount):
    c = Container()
    c.add("coin", amount)
    assert "coin" not in c
    assert len(c) == 0


def test_remove_oversubscribed_returns_present_amount():
    c = Container()
    c.add("coin", 3)
    assert c.remove("coin", 100) == 3
    assert "coin" not in c
    assert c.entries == {}


def test_remove_partial_keeps_positive_entry():
    c = Container()
    c.add("coin", 3)
    assert c.remove("coin", 2) == 2
    assert c.amount("coin") == 1


def test_remove_missing_or_non_positive():
    c = Container()
    c.add("coin", 1)
    assert c.remove("gem") == 0
    assert c.remove("coin", 0) == 0
    assert c.amount("coin") == 1


def test_move_transfers_actual_loss():
    src = Container()
    dst = Container()
    src.add("coin", 3)
    dst.add("coin", 1)
    assert src.move("coin", dst, 5) == 3
    assert "coin" not in src
    assert dst.amount("coin") == 4
    assert src.move("coin", dst) == 0
    assert dst.amount("coin") == 4


def test_amounts_stay_positive_over_mixed_operations():
    a = Container()
    b = Container()
    a.add("coin", 4)
    a.add("gem", 1)
    ops = [
        lambda: a.move("coin", b, 3),
        lambda: b.remove("coin", 1),
        lambda: a.move("gem", b, 2),
        lambda: b.move("coin", a, 10),
        lambda: a.remove("coin", 2),
        lambda: b.add("gem", 0),
    ]
    for op in ops:
        op()
        assert all(v > 0 for v in a.entries.values())
        assert all(v > 0 for v in b.entries.values())
    assert a.entries == {"coin": 1}
    assert b.entries == {"gem": 1}


def test_listing_keeps_insertion_order_and_readds_at_end():
    c = Container()
    c.add("a")
    c.add("b")
    c.remove("a")
    c.add("a")
    assert [item_id for item_id, _ in c.listing()] == ["b", "a"]


def test_prop_is_a_container():
    prop = Prop(name="Chest", description="A chest.")
    prop.add("coin", 2)
    assert prop.amount("coin") == 2
    assert isinstance(prop, Container)
