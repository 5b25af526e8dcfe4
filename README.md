# meterdisplay

Language tables for the screens of a metering display. A JSON language document
is parsed into a tree of nodes, every text string in it is given a position such
as `"3,1,2"`, and per-language CSV files map those positions to translated text.

## Modules

- `meterdisplay.jsontree`: `JsonTreeItem`, a node with a key column (0) and a
  value column (1), a `JsonItemType` (`NONE`, `OBJECT`, `ARRAY`, `VALUE`) and
  ordered children. `insert_child`, `remove_child`, `insert_children`,
  `remove_children` raise `IndexError` for rows out of range; `child` returns
  `None` for a missing row. `editable(column)` is false for the root and its
  direct children, for the key of an array element, and for the value of an
  object or array node.
- `meterdisplay.jsontreeindex`: `JsonTreeIndex`, the lookup from position strings
  to value nodes and from `Screen` members to object nodes. `Screen` members carry
  the object key that names the screen (`Screen.LEFTMENU.value == "leftMenu"`);
  `screen_for_name` returns `Screen.NONESCREEN` for an unknown key.
- `meterdisplay.jsontreemodel`: `JsonTreeModel`, a row/column model over the
  tree with `ModelIndex`, `ItemRole` and `ItemFlag`. `load_json(path)` and
  `load_json_text(text)` replace the tree; the document goes under a single
  `[Root]` node, object keys are visited in sorted order, and positions are
  1-based. A document that is not JSON, or not a non-empty object or array,
  raises `ValueError`. `get_item(position)` raises `KeyError` for an unknown
  position; `set_value(position, value)` sets a node's value column.
- `meterdisplay.translations`: the `Language` enumeration and its native names
  (`language_display_name`), `write_csv` and `read_csv` for the language files,
  `replace_item_data` to put translations into a model, and `item_strings` /
  `item_name` to fetch a screen's texts with a fallback.
- `meterdisplay.languageitem`: `LanguageItem`, a frozen record of a language's
  name, font family, visibility, checked state and index.
- `meterdisplay.definitions`: `VersionKind`, `UpgradeTarget` and `UIC_VERSION`.

## Language files

A language file is semicolon separated. Three header lines give the number of
strings, the target language name and the column titles; each following line is
`position;source text;target text;`. The English file repeats the source text as
its translation; other languages leave that column empty. `read_csv` raises
`ValueError` for a data line with no translation column. `replace_item_data`
writes a position in place of an empty translation, so untranslated strings show
up on screen by their position.

## Example

```python
from meterdisplay.jsontreeindex import Screen
from meterdisplay.jsontreemodel import JsonTreeModel
from meterdisplay.translations import (
    Language, item_strings, read_csv, replace_item_data, write_csv,
)

model = JsonTreeModel()
model.load_json("language.json")
write_csv(model, Language.FRENCH, "FRENCH.csv")
replace_item_data(model, read_csv("FRENCH.csv"))
labels = item_strings(model, Screen.LEFTMENU, ["Recipes", "Production"])
```

## What it does not do

The package keeps language tables in memory and reads and writes their files.
It does not talk to a welder or any other controller, has no message framing or
checksums, does not remember which language was last selected, offers no list
model of the available languages, and draws no screens.

## Install

```
pip install .
pip install .[test]
```

## Tests

```
pytest
```