"""Description of one selectable display language."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LanguageItem:
    """A language entry: its name, font and selection state."""

    name: str
    font_family: str
    visible: bool
    checked: bool
    index: int