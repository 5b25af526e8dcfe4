"""Tree of JSON nodes, each holding a key column and a value column."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import IntEnum
from typing import Any

KEY_COLUMN = 0
VALUE_COLUMN = 1


class JsonItemType(IntEnum):
    """Kind of JSON node; NONE marks an invalid node."""

    NONE = 0
    OBJECT = 1
    ARRAY = 2
    VALUE = 3


class JsonTreeItem:
    """A node of the JSON tree with per-column data and ordered children."""

    def __init__(
        self,
        data: Mapping[int, Any] | None = None,
        item_type: JsonItemType = JsonItemType.NONE,
        parent: JsonTreeItem | None = None,
    ) -> None:
        if data is None:
            data = {KEY_COLUMN: "[Key]", VALUE_COLUMN: "[Value]"}
        self._data: dict[int, Any] = dict(data)
        self.type = JsonItemType(item_type)
        self.parent = parent
        self._children: list[JsonTreeItem] = []

    def __repr__(self) -> str:
        return (
            f"JsonTreeItem(key={self.key!r}, value={self.value!r}, "
            f"type={self.type.name}, children={len(self._children)})"
        )

    def __iter__(self) -> Iterator[JsonTreeItem]:
        return iter(list(self._children))

    @property
    def children(self) -> tuple[JsonTreeItem, ...]:
        """The children in order."""
        return tuple(self._children)

    def _check_insert_row(self, row: int) -> None:
        if not 0 <= row <= len(self._children):
            raise IndexError(
                f"row {row} out of range for insertion into {len(self._children)} children"
            )

    def insert_child(self, row: int, child: JsonTreeItem) -> None:
        """Insert ``child`` at ``row`` and make this node its parent."""
        self._check_insert_row(row)
        self._children.insert(row, child)
        child.parent = self

    def remove_child(self, row: int) -> JsonTreeItem:
        """Detach and return the child at ``row``."""
        if not 0 <= row < len(self._children):
            raise IndexError(f"no child at row {row}")
        child = self._children.pop(row)
        child.parent = None
        return child

    def insert_children(self, row: int, count: int) -> None:
        """Insert ``count`` new value nodes at ``row``."""
        self._check_insert_row(row)
        for _ in range(count):
            self._children.insert(row, JsonTreeItem(item_type=JsonItemType.VALUE, parent=self))

    def remove_children(self, row: int, count: int) -> None:
        """Remove ``count`` children starting at ``row``."""
        if row < 0 or count < 0 or row + count > len(self._children):
            raise IndexError(
                f"cannot remove {count} children from row {row} of {len(self._children)}"
            )
        removed = self._children[row:row + count]
        del self._children[row:row + count]
        for child in removed:
            child.parent = None

    def append_child(self, child: JsonTreeItem) -> None:
        """Add ``child`` after the last child and make this node its parent."""
        self._children.append(child)
        child.parent = self

    def clear_children(self) -> None:
        """Remove every child."""
        for child in self._children:
            child.parent = None
        self._children.clear()

    def child(self, row: int) -> JsonTreeItem | None:
        """Return the child at ``row``, or None when there is none."""
        if 0 <= row < len(self._children):
            return self._children[row]
        return None

    def child_count(self) -> int:
        """Number of children."""
        return len(self._children)

    def column_count(self) -> int:
        """Number of data columns held by this node."""
        return len(self._data)

    def data(self, column: int) -> Any:
        """Return the data of ``column``, or None if it is not set."""
        return self._data.get(column)

    def set_data(self, column: int, value: Any) -> None:
        """Store ``value`` in ``column``."""
        self._data[column] = value

    def row(self) -> int:
        """Position of this node among its parent's children; 0 for a root."""
        if self.parent is None:
            return 0
        return next(
            (pos for pos, sibling in enumerate(self.parent._children) if sibling is self),
            -1,
        )

    def editable(self, column: int) -> bool:
        """Whether ``column`` of this node may be edited.

        The root and its direct children are fixed, array element keys are
        fixed, and the value of an array or object node is fixed.
        """
        if self.parent is None or self.parent.parent is None:
            return False
        if column == KEY_COLUMN and self.parent.type is JsonItemType.ARRAY:
            return False
        if column == VALUE_COLUMN and self.type in (JsonItemType.ARRAY, JsonItemType.OBJECT):
            return False
        return True

    @property
    def key(self) -> str:
        """The key column as text; empty if unset."""
        value = self._data.get(KEY_COLUMN, "")
        return "" if value is None else str(value)

    @key.setter
    def key(self, key: str) -> None:
        self._data[KEY_COLUMN] = key

    @property
    def value(self) -> Any:
        """The value column; 0 if unset."""
        return self._data.get(VALUE_COLUMN, 0)

    @value.setter
    def value(self, value: Any) -> None:
        self._data[VALUE_COLUMN] = value