import pytest

from ftkit.linked import LinkedList, Node


def test_construct_from_items_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert lst.head is node
    assert list(lst) == [1, 2, 3]


def test_push_back_appends_and_updates_last():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert lst.last() is node
    assert list(lst) == [1, 2]


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front("x")
    assert lst.last() is node
    lst.push_back("y")
    assert list(lst) == ["x", "y"]


def test_last_returns_final_node():
    lst = LinkedList(["first", "second"])
    last = lst.last()
    assert isinstance(last, Node)
    assert last.content == "second"
    assert last.next is None


def test_nodes_are_linked():
    lst = LinkedList([1, 2])
    assert lst.head.content == 1
    assert lst.head.next.content == 2
    assert lst.head.next is lst.last()


def test_clear_calls_delete_in_order_and_empties():
    deleted = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert lst.last() is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_list_usable_after_clear():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.push_back(3)
    assert list(lst) == [3]


def test_for_each_visits_every_content():
    seen = []
    lst = LinkedList([5, 6, 7])
    lst.for_each(seen.append)
    assert seen == [5, 6, 7]


def test_map_builds_new_list_and_leaves_original():
    lst = LinkedList(["a", "b"])
    mapped = lst.map(str.upper)
    assert list(mapped) == ["A", "B"]
    assert list(lst) == ["a", "b"]
    assert mapped is not lst


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str.upper)) == 0


def test_map_failure_deletes_produced_contents():
    deleted = []

    def f(x):
        if x == 3:
            raise RuntimeError("boom")
        return x * 10

    lst = LinkedList([1, 2, 3, 4])
    with pytest.raises(RuntimeError):
        lst.map(f, deleted.append)
    assert deleted == [10, 20]
    assert list(lst) == [1, 2, 3, 4]


def test_len_matches_iteration():
    lst = LinkedList(range(5))
    lst.push_front(-1)
    assert len(lst) == len(list(lst))