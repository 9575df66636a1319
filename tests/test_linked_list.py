import pytest

from dsapractice.linked_list import LinkedList


def test_traversal_order():
    values = [5, 6, 10]
    linked = LinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)


def test_empty_list():
    linked = LinkedList()
    assert list(linked) == []
    assert len(linked) == 0


def test_insert_at_first():
    linked = LinkedList([1, 2, 3, 4, 5])
    linked.insert_at_first(99)
    assert list(linked) == [99, 1, 2, 3, 4, 5]


def test_insert_at_end():
    linked = LinkedList([1, 2, 3, 4, 5])
    linked.insert_at_end(99)
    assert list(linked) == [1, 2, 3, 4, 5, 99]
    linked.insert_at_end(100)
    assert list(linked)[-1] == 100


def test_insert_at_index_source_example():
    linked = LinkedList([10, 11, 13, 14, 15])
    linked.insert_at_index(36565, 3)
    assert list(linked) == [10, 11, 13, 36565, 14, 15]


@pytest.mark.parametrize("index", [0, 2, 5])
def test_insert_at_index_matches_list_insert(index):
    values = [10, 11, 13, 14, 15]
    linked = LinkedList(values)
    linked.insert_at_index(7, index)
    expected = list(values)
    expected.insert(index, 7)
    assert list(linked) == expected
    assert len(linked) == len(expected)


@pytest.mark.parametrize("index", [-1, 6])
def test_insert_at_index_out_of_range(index):
    with pytest.raises(IndexError):
        LinkedList([1, 2, 3, 4, 5]).insert_at_index(0, index)


def test_delete_at_first():
    linked = LinkedList([1, 2, 3])
    assert linked.delete_at_first() == 1
    assert list(linked) == [2, 3]


def test_delete_at_index():
    values = [1, 2, 3, 4, 5, 6]
    linked = LinkedList(values)
    assert linked.delete_at_index(2) == values[2]
    assert list(linked) == [1, 2, 4, 5, 6]


def test_delete_at_last_then_append():
    linked = LinkedList([1, 2, 3])
    assert linked.delete_at_last() == 3
    linked.insert_at_end(9)
    assert list(linked) == [1, 2, 9]


def test_delete_until_empty():
    linked = LinkedList([1, 2])
    linked.delete_at_last()
    linked.delete_at_last()
    assert len(linked) == 0
    with pytest.raises(IndexError):
        linked.delete_at_last()
    with pytest.raises(IndexError):
        linked.delete_at_first()


def test_delete_at_index_out_of_range():
    with pytest.raises(IndexError):
        LinkedList([1, 2]).delete_at_index(2)


def test_delete_by_value():
    linked = LinkedList([4, 8, 15, 16])
    linked.delete_by_value(15)
    assert list(linked) == [4, 8, 16]
    linked.delete_by_value(4)
    assert list(linked) == [8, 16]
    linked.delete_by_value(16)
    linked.insert_at_end(42)
    assert list(linked) == [8, 42]


def test_delete_by_value_missing():
    linked = LinkedList([1, 2, 3])
    with pytest.raises(ValueError):
        linked.delete_by_value(7)
    assert list(linked) == [1, 2, 3]