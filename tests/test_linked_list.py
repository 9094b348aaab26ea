import pytest

from rustedos.linked_list import LinkedList

ADDRS = [0x8100_0000, 0x8100_1000, 0x8100_2000]


def _filled():
    linked_list = LinkedList()
    for addr in ADDRS:
        linked_list.push(addr)
    return linked_list


def test_new_list_is_empty():
    linked_list = LinkedList()
    assert linked_list.is_empty()
    assert len(linked_list) == 0


def test_iteration_goes_from_head():
    linked_list = _filled()
    assert list(linked_list) == [ADDRS[2], ADDRS[1], ADDRS[0]]


def test_remove_head_then_pop_rest():
    linked_list = _filled()
    linked_list.remove(ADDRS[2])
    assert linked_list.pop() == ADDRS[1]
    assert linked_list.pop() == ADDRS[0]
    assert linked_list.is_empty()


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop()


def test_remove_missing_raises():
    linked_list = _filled()
    with pytest.raises(ValueError):
        linked_list.remove(0x1234)
    assert len(linked_list) == 3


def test_remove_middle_keeps_order():
    linked_list = _filled()
    linked_list.remove(ADDRS[1])
    assert list(linked_list) == [ADDRS[2], ADDRS[0]]


def test_remove_drops_every_duplicate():
    linked_list = LinkedList()
    for addr in (8, 16, 8):
        linked_list.push(addr)
    linked_list.remove(8)
    assert list(linked_list) == [16]


def test_contains_and_len():
    linked_list = _filled()
    assert ADDRS[0] in linked_list
    assert 0x42 not in linked_list
    assert len(linked_list) == 3