import pytest

from tamapet.intrusive_list import IntrusiveList, ListElement


class Node(ListElement):
    def __init__(self, name):
        super().__init__()
        self.name = name


def names(lst):
    return [node.name for node in lst]


def test_new_list_is_empty():
    lst = IntrusiveList()
    assert lst.empty()
    assert not lst
    assert len(lst) == 0


def test_push_back_and_front_order():
    lst = IntrusiveList()
    a, b, c = Node("a"), Node("b"), Node("c")
    lst.push_back(a)
    lst.push_back(b)
    lst.push_front(c)
    assert names(lst) == ["c", "a", "b"]
    assert names(reversed(lst)) == ["b", "a", "c"]
    assert lst.front() is c and lst.back() is b
    assert len(lst) == 3


def test_elements_report_linked_state():
    lst = IntrusiveList()
    node = Node("x")
    assert not node.is_linked()
    lst.push_back(node)
    assert node.is_linked()
    node.unlink()
    assert not node.is_linked()
    assert lst.empty()


def test_pop_front_and_back():
    lst = IntrusiveList()
    nodes = [Node(n) for n in "abc"]
    for node in nodes:
        lst.push_back(node)
    assert lst.pop_front() is nodes[0]
    assert lst.pop_back() is nodes[2]
    assert names(lst) == ["b"]


def test_empty_access_raises():
    lst = IntrusiveList()
    for op in (lst.front, lst.back, lst.pop_front, lst.pop_back):
        with pytest.raises(IndexError):
            op()


def test_insert_before_element():
    lst = IntrusiveList()
    a, b, c = Node("a"), Node("b"), Node("c")
    lst.push_back(a)
    lst.push_back(c)
    assert lst.insert(c, b) is b
    assert names(lst) == ["a", "b", "c"]


def test_insert_before_itself_is_noop():
    lst = IntrusiveList()
    a, b = Node("a"), Node("b")
    lst.push_back(a)
    lst.push_back(b)
    lst.insert(b, b)
    assert names(lst) == ["a", "b"]


def test_erase_returns_following():
    lst = IntrusiveList()
    a, b = Node("a"), Node("b")
    lst.push_back(a)
    lst.push_back(b)
    assert lst.erase(a) is b
    assert lst.erase(b) is None
    assert lst.empty()


def test_adding_moves_between_lists():
    first, second = IntrusiveList(), IntrusiveList()
    node = Node("n")
    first.push_back(node)
    second.push_back(node)
    assert first.empty()
    assert names(second) == ["n"]


def test_readding_moves_within_list():
    lst = IntrusiveList()
    a, b = Node("a"), Node("b")
    lst.push_back(a)
    lst.push_back(b)
    lst.push_back(a)
    assert names(lst) == ["b", "a"]


def test_clear_unlinks_everything():
    lst = IntrusiveList()
    nodes = [Node(n) for n in "xyz"]
    for node in nodes:
        lst.push_back(node)
    lst.clear()
    assert lst.empty()
    assert not any(node.is_linked() for node in nodes)


def test_erase_during_iteration():
    lst = IntrusiveList()
    nodes = [Node(n) for n in "abcd"]
    for node in nodes:
        lst.push_back(node)
    for node in lst:
        if node.name in "bd":
            lst.erase(node)
    assert names(lst) == ["a", "c"]