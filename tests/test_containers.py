import pytest

from homun.containers import (
    PriorityQueue,
    count_if,
    dict_from_pairs,
    dict_zip,
    flatten,
    index_of,
    remove_at,
    set_remove,
    unique,
)


# ── PriorityQueue ──────────────────────────────────────────


def test_heap_new_is_empty():
    h = PriorityQueue()
    assert h.is_empty()
    assert len(h) == 0


def test_heap_push_increases_len():
    h = PriorityQueue()
    h.push(10, "a")
    assert len(h) == 1
    h.push(5, "b")
    assert len(h) == 2


def test_heap_is_empty_after_push():
    h = PriorityQueue()
    h.push(1, "x")
    assert not h.is_empty()


def test_heap_pop_empty_returns_none():
    assert PriorityQueue().pop() is None


def test_heap_pop_single_item():
    h = PriorityQueue()
    h.push(42, "only")
    assert h.pop() == (42, "only")
    assert h.is_empty()


def test_heap_min_order_two_items():
    h = PriorityQueue()
    h.push(10, "high")
    h.push(2, "low")
    assert h.pop() == (2, "low")


def test_heap_min_order_many_items():
    h = PriorityQueue()
    for p, name in [(5, "five"), (1, "one"), (3, "three"), (2, "two"), (4, "four")]:
        h.push(p, name)
    pops = []
    while (entry := h.pop()) is not None:
        pops.append(entry[0])
    assert pops == [1, 2, 3, 4, 5]


def test_heap_pop_decreases_len():
    h = PriorityQueue()
    h.push(1, "a")
    h.push(2, "b")
    h.pop()
    assert len(h) == 1
    h.pop()
    assert len(h) == 0
    assert h.is_empty()


def test_heap_negative_priorities():
    h = PriorityQueue()
    h.push(-5, "neg5")
    h.push(0, "zero")
    h.push(-1, "neg1")
    assert [h.pop()[0] for _ in range(3)] == [-5, -1, 0]


def test_heap_zero_priority():
    h = PriorityQueue()
    h.push(0, "origin")
    assert h.pop() == (0, "origin")


def test_heap_same_priority_all_returned():
    h = PriorityQueue()
    for name in ["alpha", "beta", "gamma"]:
        h.push(1, name)
    items = []
    while (entry := h.pop()) is not None:
        assert entry[0] == 1
        items.append(entry[1])
    assert sorted(items) == ["alpha", "beta", "gamma"]


def test_heap_same_priority_largest_item_first():
    h = PriorityQueue()
    for name in ["alpha", "gamma", "beta"]:
        h.push(1, name)
    assert [h.pop()[1] for _ in range(3)] == ["gamma", "beta", "alpha"]


def test_heap_astar_simulation():
    frontier = PriorityQueue()
    frontier.push(10, "A")
    frontier.push(7, "B")
    frontier.push(15, "C")
    frontier.push(3, "D")
    assert frontier.pop() == (3, "D")
    frontier.push(5, "E")
    assert frontier.pop() == (5, "E")


# ── dict builders ──────────────────────────────────────────


def test_from_pairs_empty():
    assert dict_from_pairs([]) == {}


def test_from_pairs_single():
    assert dict_from_pairs([("a", 1)]) == {"a": 1}


def test_from_pairs_multiple():
    d = dict_from_pairs([("a", 1), ("b", 2), ("c", 3)])
    assert d == {"a": 1, "b": 2, "c": 3}


def test_from_pairs_duplicate_key_last_wins():
    d = dict_from_pairs([("x", 10), ("x", 20)])
    assert d == {"x": 20}


def test_from_pairs_int_keys():
    d = dict_from_pairs([(0, "zero"), (1, "one")])
    assert d[0] == "zero"
    assert d[1] == "one"


def test_from_pairs_sugiyama_pattern():
    ordering = ["A", "B", "C"]
    position = dict_from_pairs((node, pos) for pos, node in enumerate(ordering))
    assert position == {"A": 0, "B": 1, "C": 2}


def test_zip_empty():
    assert dict_zip([], []) == {}


def test_zip_equal_lengths():
    assert dict_zip(["x", "y", "z"], [10, 20, 30]) == {"x": 10, "y": 20, "z": 30}


def test_zip_more_keys_than_values():
    d = dict_zip(["a", "b", "c"], [1, 2])
    assert len(d) == 2
    assert "a" in d and "b" in d
    assert "c" not in d


def test_zip_more_values_than_keys():
    assert dict_zip(["a"], [1, 2, 3]) == {"a": 1}


def test_zip_single_pair():
    assert dict_zip(["only"], [42])["only"] == 42


# ── set_remove ─────────────────────────────────────────────


def test_set_remove_existing_returns_true():
    s = {"a"}
    assert set_remove(s, "a") is True
    assert s == set()


def test_set_remove_missing_returns_false():
    s = set()
    assert set_remove(s, "ghost") is False
    assert s == set()


def test_set_int_elements():
    s = {1, 2}
    assert set_remove(s, 1) is True
    assert s == {2}


# ── list helpers ───────────────────────────────────────────


def test_unique_keeps_first_seen_order():
    assert unique([3, 1, 3, 2, 1]) == [3, 1, 2]


def test_unique_empty():
    assert unique([]) == []


def test_index_of_found():
    assert index_of(["a", "b", "c", "b"], "b") == 1


def test_index_of_missing():
    assert index_of([1, 2, 3], 9) == -1


def test_remove_at_positive():
    items = [10, 20, 30]
    assert remove_at(items, 1) == 20
    assert items == [10, 30]


def test_remove_at_negative_counts_from_end():
    items = [10, 20, 30]
    assert remove_at(items, -1) == 30
    assert items == [10, 20]


def test_remove_at_negative_clamps_to_front():
    items = [10, 20, 30]
    assert remove_at(items, -10) == 10
    assert items == [20, 30]


def test_remove_at_out_of_range():
    with pytest.raises(IndexError):
        remove_at([1, 2], 2)


def test_flatten():
    assert flatten([[1, 2], [], [3]]) == [1, 2, 3]


def test_count_if():
    assert count_if([1, 2, 3, 4, 5], lambda x: x % 2 == 1) == 3