"""Language CSV files and the translated strings of a JSON language tree.

A language file starts with three header lines: the number of strings, the
target language name and the column titles. Each following line is
``index;source text;target text;``, where the index is the hierarchical
position of a value node in the JSON tree.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import IntEnum
from os import PathLike
from pathlib import Path
from typing import Any

from .jsontree import JsonItemType
from .jsontreeindex import Screen
from .jsontreemodel import JsonTreeModel

TARGET_LANGUAGE_INDICATOR = "Target Language"
_SEPARATOR = ";"


class Language(IntEnum):
    """Supported display languages, in the order of their CSV files."""

    ENGLISH = 0
    FRENCH = 1
    GERMAN = 2
    SPANISH = 3
    KOREAN = 4
    SIMPLIFIEDCHINESE = 5
    ITALIAN = 6
    JAPANESE = 7
    DANISH = 8
    SLOVAKIAN = 9
    POLISH = 10


_DISPLAY_NAMES = {
    Language.ENGLISH: "English",
    Language.FRENCH: "Français",
    Language.GERMAN: "Deutsche",
    Language.SPANISH: "Español",
    Language.KOREAN: "한국어",
    Language.SIMPLIFIEDCHINESE: "中文(简化的)",
    Language.ITALIAN: "Italiano",
    Language.JAPANESE: "日本语",
    Language.DANISH: "dansk",
    Language.SLOVAKIAN: "Slovenský",
    Language.POLISH: "Polskie",
}


def _as_language(language: int) -> Language | None:
    try:
        return Language(language)
    except ValueError:
        return None


def language_display_name(language: int) -> str:
    """Native name of ``language``; English for an unknown index."""
    known = _as_language(language)
    return _DISPLAY_NAMES[known] if known is not None else _DISPLAY_NAMES[Language.ENGLISH]


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def write_csv(model: JsonTreeModel, language: int, path: str | PathLike[str]) -> None:
    """Write the language file of ``language`` for the strings of ``model``.

    The English file repeats each source text as its translation; other
    languages leave the translation column empty.
    """
    name = language_display_name(language)
    is_english = _as_language(language) is Language.ENGLISH
    items = model.item_index.items
    lines = [
        f"Size:;{len(items)};\n",
        f"{TARGET_LANGUAGE_INDICATOR}:;{name};\n",
        f"Index;English(Source);{name}(Target)\n",
    ]
    for key, item in items.items():
        text = _to_text(item.value)
        if is_english:
            lines.append(f"{key};{text};{text};\n")
        else:
            lines.append(f"{key};{text};\n")
    with open(path, "w", encoding="utf-8", newline="") as stream:
        stream.writelines(lines)


def read_csv(path: str | PathLike[str]) -> dict[str, str]:
    """Return the translations of a language file, keyed by position.

    Raises ValueError for a data line without a translation column.
    """
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    texts: dict[str, str] = {}
    for number, line in enumerate(lines[3:], start=4):
        fields = line.split(_SEPARATOR)
        if len(fields) < 3:
            raise ValueError(f"line {number} has no translation column: {line!r}")
        texts[fields[0]] = fields[2]
    return texts


def replace_item_data(model: JsonTreeModel, texts: Mapping[str, str]) -> None:
    """Put the translations of ``texts`` into ``model``.

    An empty translation is replaced by its position, so that untranslated
    strings can be spotted on screen.
    """
    indexed = model.item_index.items
    for key in sorted(texts):
        if key in indexed:
            model.set_value(key, texts[key] or key)


def item_strings(model: JsonTreeModel, screen: Screen, default: Sequence[str]) -> list[str]:
    """Strings of the arrays under ``screen``; ``default`` if there are none."""
    node = model.item_index.screens.get(screen)
    strings: list[str] = []
    if node is not None:
        for child in node:
            if child.type is JsonItemType.ARRAY:
                strings.extend(_to_text(element.value) for element in child)
    return strings if strings else list(default)


def item_name(model: JsonTreeModel, screen: Screen, default: str) -> str:
    """Last plain value under ``screen``; ``default`` if there is none."""
    node = model.item_index.screens.get(screen)
    name = ""
    if node is not None:
        for child in node:
            if child.type is JsonItemType.VALUE:
                name = _to_text(child.value)
    return name or default