import pytest

from meterdisplay.jsontree import JsonItemType, JsonTreeItem


def _tree():
    root = JsonTreeItem()
    obj = JsonTreeItem({0: "[Root]", 1: "[Object]"}, JsonItemType.OBJECT)
    root.append_child(obj)
    arr = JsonTreeItem({0: "list", 1: "[Array]"}, JsonItemType.ARRAY)
    obj.append_child(arr)
    val = JsonTreeItem({0: "name", 1: "abc"}, JsonItemType.VALUE)
    obj.append_child(val)
    elem = JsonTreeItem({0: "-", 1: 1.5}, JsonItemType.VALUE)
    arr.append_child(elem)
    return root, obj, arr, val, elem


def test_default_item_data():
    item = JsonTreeItem()
    assert item.key == "[Key]"
    assert item.value == "[Value]"
    assert item.type is JsonItemType.NONE
    assert item.parent is None
    assert item.column_count() == 2


def test_value_defaults_to_zero_and_key_to_empty():
    item = JsonTreeItem({}, JsonItemType.VALUE)
    assert item.value == 0
    assert item.key == ""
    assert item.column_count() == 0


def test_key_and_value_setters():
    item = JsonTreeItem()
    item.key = "title"
    item.value = "Home"
    assert item.data(0) == "title"
    assert item.data(1) == "Home"


def test_data_missing_column_is_none():
    item = JsonTreeItem()
    assert item.data(5) is None
    item.set_data(5, "x")
    assert item.data(5) == "x"
    assert item.column_count() == 3


def test_append_sets_parent_and_row():
    root, obj, arr, val, elem = _tree()
    assert obj.parent is root
    assert val.parent is obj
    assert arr.row() == 0
    assert val.row() == 1
    assert root.row() == 0
    assert obj.child_count() == 2


def test_child_out_of_range_returns_none():
    root, obj, *_ = _tree()
    assert obj.child(0) is not None and obj.child(0).key == "list"
    assert obj.child(2) is None
    assert obj.child(-1) is None


def test_insert_child_positions():
    parent = JsonTreeItem()
    a = JsonTreeItem({0: "a"})
    b = JsonTreeItem({0: "b"})
    parent.append_child(a)
    parent.insert_child(0, b)
    assert [c.key for c in parent] == ["b", "a"]
    assert b.parent is parent
    assert a.row() == 1


def test_insert_child_out_of_range():
    parent = JsonTreeItem()
    with pytest.raises(IndexError):
        parent.insert_child(1, JsonTreeItem())
    with pytest.raises(IndexError):
        parent.insert_child(-1, JsonTreeItem())
    assert parent.child_count() == 0


def test_remove_child():
    parent = JsonTreeItem()
    a = JsonTreeItem({0: "a"})
    parent.append_child(a)
    removed = parent.remove_child(0)
    assert removed is a
    assert a.parent is None
    assert parent.child_count() == 0
    with pytest.raises(IndexError):
        parent.remove_child(0)


def test_insert_children_creates_value_nodes():
    parent = JsonTreeItem()
    parent.insert_children(0, 3)
    assert parent.child_count() == 3
    assert all(c.type is JsonItemType.VALUE for c in parent)
    assert all(c.parent is parent for c in parent)
    assert all(c.key == "[Key]" for c in parent)


def test_insert_children_out_of_range():
    parent = JsonTreeItem()
    with pytest.raises(IndexError):
        parent.insert_children(2, 1)


def test_remove_children_range():
    parent = JsonTreeItem()
    for name in "abcde":
        parent.append_child(JsonTreeItem({0: name}))
    parent.remove_children(1, 2)
    assert [c.key for c in parent] == ["a", "d", "e"]
    with pytest.raises(IndexError):
        parent.remove_children(2, 2)
    with pytest.raises(IndexError):
        parent.remove_children(-1, 1)
    assert parent.child_count() == 3


def test_clear_children():
    root, obj, arr, val, elem = _tree()
    obj.clear_children()
    assert obj.child_count() == 0
    assert arr.parent is None


def test_editable_rules():
    root, obj, arr, val, elem = _tree()
    assert root.editable(0) is False
    assert obj.editable(1) is False
    assert val.editable(0) is True
    assert val.editable(1) is True
    assert arr.editable(0) is True
    assert arr.editable(1) is False
    assert elem.editable(0) is False
    assert elem.editable(1) is True


def test_children_tuple_is_snapshot():
    root, obj, *_ = _tree()
    snapshot = obj.children
    obj.clear_children()
    assert len(snapshot) == 2
    assert obj.children == ()