import pytest

from dsakit.doubly_linked import DoublyLinkedList


def test_source_example_string():
    dll = DoublyLinkedList()
    for value in [1, 2, 3, 4, 5]:
        dll.append(value)
    assert str(dll) == "1 --> 2 --> 3 --> 4 --> 5 --> NULL"
    dll.push_front(0)
    assert str(dll) == "0 --> 1 --> 2 --> 3 --> 4 --> 5 --> NULL"


def test_empty_list():
    dll = DoublyLinkedList()
    assert str(dll) == "NULL"
    assert len(dll) == 0
    assert list(reversed(dll)) == []


@pytest.mark.parametrize("values", [[1], [3, 1, 2], list(range(10))])
def test_reverse_traversal_mirrors_forward(values):
    dll = DoublyLinkedList(values)
    assert list(dll) == values
    assert list(reversed(dll)) == values[::-1]
    assert len(dll) == len(values)


def test_push_front_then_append_both_directions():
    dll = DoublyLinkedList()
    dll.push_front(2)
    dll.push_front(1)
    dll.append(3)
    assert list(dll) == [1, 2, 3]
    assert list(reversed(dll)) == [3, 2, 1]


def test_push_front_on_empty_sets_tail():
    dll = DoublyLinkedList()
    dll.push_front(7)
    dll.append(8)
    assert list(reversed(dll)) == [8, 7]