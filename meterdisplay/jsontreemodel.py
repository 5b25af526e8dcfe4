"""Item model over a JSON language tree.

The model owns an invisible root node. Loading a document places a single
``[Root]`` node under it, and the document's content goes below that. Object
keys are visited in sorted order. Value nodes are indexed by hierarchical
position and object nodes by the screen their key names.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from os import PathLike
from pathlib import Path
from typing import Any

from .jsontree import VALUE_COLUMN, JsonItemType, JsonTreeItem
from .jsontreeindex import JsonTreeIndex

ROOT_KEY = "[Root]"
OBJECT_MARK = "[Object]"
ARRAY_MARK = "[Array]"
ARRAY_ELEMENT_KEY = "-"


class ItemRole(IntEnum):
    """Roles under which item data is requested."""

    DISPLAY = 0
    EDIT = 2


class ItemFlag(IntFlag):
    """Capabilities of an item."""

    NO_ITEM_FLAGS = 0
    SELECTABLE = 1
    EDITABLE = 2
    ENABLED = 32


@dataclass(frozen=True)
class ModelIndex:
    """Position of an item in the model; the default value is invalid."""

    row: int = -1
    column: int = -1
    item: JsonTreeItem | None = None

    @property
    def is_valid(self) -> bool:
        """Whether the index refers to an item."""
        return self.row >= 0 and self.column >= 0 and self.item is not None


_INVALID = ModelIndex()


class JsonTreeModel:
    """Hierarchical model of a JSON document with key and value columns."""

    def __init__(self) -> None:
        self._root = JsonTreeItem()
        self._index = JsonTreeIndex()

    @property
    def root(self) -> JsonTreeItem:
        """The invisible root node."""
        return self._root

    @property
    def item_index(self) -> JsonTreeIndex:
        """Position and screen indexes of the loaded document."""
        return self._index

    def _item(self, index: ModelIndex | None) -> JsonTreeItem:
        if index is not None and index.is_valid:
            return index.item  # type: ignore[return-value]
        return self._root

    def _has_index(self, row: int, column: int, parent: ModelIndex | None) -> bool:
        return 0 <= row < self.row_count(parent) and 0 <= column < self.column_count(parent)

    def index(self, row: int, column: int, parent: ModelIndex | None = None) -> ModelIndex:
        """Index of the child at ``row``/``column`` under ``parent``; invalid if none."""
        if not self._has_index(row, column, parent):
            return _INVALID
        child = self._item(parent).child(row)
        if child is None:
            return _INVALID
        return ModelIndex(row, column, child)

    def parent(self, index: ModelIndex) -> ModelIndex:
        """Index of the parent of ``index``; invalid for top-level items."""
        if not index.is_valid:
            return _INVALID
        parent_item = self._item(index).parent
        if parent_item is None or parent_item is self._root:
            return _INVALID
        return ModelIndex(parent_item.row(), 0, parent_item)

    def row_count(self, parent: ModelIndex | None = None) -> int:
        """Number of children under ``parent``."""
        return self._item(parent).child_count()

    def column_count(self, parent: ModelIndex | None = None) -> int:
        """Number of data columns of ``parent``."""
        return self._item(parent).column_count()

    def data(self, index: ModelIndex, role: int = ItemRole.DISPLAY) -> Any:
        """Datum of ``index`` for the display or edit role; None otherwise."""
        if not index.is_valid:
            return None
        if role not in (ItemRole.DISPLAY, ItemRole.EDIT):
            return None
        return self._item(index).data(index.column)

    def flags(self, index: ModelIndex) -> ItemFlag:
        """Capabilities of the item at ``index``."""
        if not index.is_valid:
            return ItemFlag.NO_ITEM_FLAGS
        base = ItemFlag.SELECTABLE | ItemFlag.ENABLED
        if self._item(index).editable(index.column):
            return base | ItemFlag.EDITABLE
        return base

    def set_data(self, index: ModelIndex, value: Any, role: int = ItemRole.EDIT) -> bool:
        """Store ``value`` at ``index``; only the edit role is accepted."""
        if role != ItemRole.EDIT:
            return False
        self._item(index).set_data(index.column, value)
        return True

    def insert_rows(self, row: int, count: int, parent: ModelIndex | None = None) -> None:
        """Insert ``count`` empty value rows at ``row`` under ``parent``."""
        self._item(parent).insert_children(row, count)

    def remove_rows(self, row: int, count: int, parent: ModelIndex | None = None) -> None:
        """Remove ``count`` rows starting at ``row`` under ``parent``."""
        self._item(parent).remove_children(row, count)

    def load_json(self, filepath: str | PathLike[str]) -> None:
        """Replace the tree with the document stored at ``filepath``."""
        if not str(filepath):
            raise ValueError("no JSON file path given")
        self.load_json_text(Path(filepath).read_text(encoding="utf-8"))

    def load_json_text(self, text: str) -> None:
        """Replace the tree with the JSON document in ``text``.

        Raises ValueError if the text is not JSON, or is not a non-empty
        object or array.
        """
        document = json.loads(text)
        if not isinstance(document, (dict, list)):
            raise ValueError("JSON document must be an object or an array")
        if not document:
            raise ValueError("JSON document is empty")

        self._root.clear_children()
        self._index.clear()
        if isinstance(document, dict):
            self._parse_object(ROOT_KEY, document, self._root)
        else:
            self._parse_array(ROOT_KEY, document, self._root)

    def get_item(self, key: str) -> JsonTreeItem:
        """Value node indexed under position ``key``."""
        try:
            return self._index.items[key]
        except KeyError:
            raise KeyError(f"no item at position {key!r}") from None

    def set_value(self, key: str, value: Any) -> None:
        """Set the value column of the node indexed under ``key``."""
        self.get_item(key).set_data(VALUE_COLUMN, value)

    def _parse_object(self, key: str, obj: dict[str, Any], parent: JsonTreeItem) -> None:
        node = JsonTreeItem({0: key, 1: OBJECT_MARK}, JsonItemType.OBJECT, parent)
        parent.append_child(node)
        self._index.insert_screen_item(key, node)
        for position, item_key in enumerate(sorted(obj), start=1):
            with self._index.descend(position):
                self._parse_value(item_key, obj[item_key], node)

    def _parse_array(self, key: str, array: list[Any], parent: JsonTreeItem) -> None:
        node = JsonTreeItem({0: key, 1: ARRAY_MARK}, JsonItemType.ARRAY, parent)
        parent.append_child(node)
        for position, element in enumerate(array, start=1):
            with self._index.descend(position):
                self._parse_value(ARRAY_ELEMENT_KEY, element, node)

    def _parse_value(self, key: str, value: Any, parent: JsonTreeItem) -> None:
        if isinstance(value, dict):
            self._parse_object(key, value, parent)
            return
        if isinstance(value, list):
            self._parse_array(key, value, parent)
            return
        if isinstance(value, bool) or value is None or isinstance(value, str):
            converted = value
        else:
            converted = float(value)
        node = JsonTreeItem({0: key, 1: converted}, JsonItemType.VALUE, parent)
        parent.append_child(node)
        self._index.insert_item(node)