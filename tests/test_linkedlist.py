import io

import pytest

from lazydijkstra.linkedlist import LinkedList

ITEMS = ["a", "b", "c", "d", "e", "f"]


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert str(lst) == "[]"


def test_construct_round_trip():
    lst = LinkedList(ITEMS)
    assert list(lst) == ITEMS
    assert len(lst) == len(ITEMS)


def test_add_end_and_add_first():
    lst = LinkedList()
    lst.add_end("b")
    lst.add_first("a")
    lst.add_end("c")
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


@pytest.mark.parametrize("position", range(len(ITEMS)))
def test_pop_every_position(position):
    lst = LinkedList(ITEMS)
    assert lst.pop(position) == ITEMS[position]
    expected = ITEMS[:position] + ITEMS[position + 1:]
    assert list(lst) == expected
    assert len(lst) == len(expected)


@pytest.mark.parametrize("position", [-1, len(ITEMS), 100])
def test_pop_out_of_range(position):
    lst = LinkedList(ITEMS)
    with pytest.raises(IndexError):
        lst.pop(position)
    assert list(lst) == ITEMS


def test_remove_first_drains_in_order():
    lst = LinkedList(ITEMS)
    drained = [lst.remove_first() for _ in range(len(ITEMS))]
    assert drained == ITEMS
    assert len(lst) == 0
    with pytest.raises(IndexError):
        lst.remove_first()


@pytest.mark.parametrize("i, j", [(0, 5), (1, 4), (2, 2), (5, 0), (3, 4)])
def test_swap(i, j):
    lst = LinkedList(ITEMS)
    lst.swap(i, j)
    expected = list(ITEMS)
    expected[i], expected[j] = expected[j], expected[i]
    assert list(lst) == expected


@pytest.mark.parametrize("i, j", [(0, 6), (6, 0), (-1, 2)])
def test_swap_out_of_range(i, j):
    lst = LinkedList(ITEMS)
    with pytest.raises(IndexError):
        lst.swap(i, j)
    assert list(lst) == ITEMS


@pytest.mark.parametrize("position", range(len(ITEMS)))
def test_change_returns_old(position):
    lst = LinkedList(ITEMS)
    assert lst.change(position, "z") == ITEMS[position]
    expected = list(ITEMS)
    expected[position] = "z"
    assert list(lst) == expected


def test_change_out_of_range():
    lst = LinkedList(ITEMS)
    with pytest.raises(IndexError):
        lst.change(len(ITEMS), "z")
    with pytest.raises(IndexError):
        lst.change(-1, "z")


def test_str_separates_with_spaces():
    assert str(LinkedList(["x", "y", "z"])) == "[x y z]"


def test_output_writes_line():
    buffer = io.StringIO()
    LinkedList(["one", "two"]).output(buffer)
    assert buffer.getvalue() == "[one two]\n"


def test_output_empty_to_stdout(capsys):
    LinkedList().output()
    assert capsys.readouterr().out == "[]\n"


def test_mixed_operations_keep_links_consistent():
    lst = LinkedList([1, 2, 3])
    lst.add_first(0)
    lst.add_end(4)
    lst.pop(2)
    lst.swap(0, 3)
    assert list(lst) == [4, 1, 3, 0]
    assert len(lst) == 4
    assert [lst.remove_first() for _ in range(4)] == [4, 1, 3, 0]