import dataclasses

import pytest

from meterdisplay.languageitem import LanguageItem


def test_fields_hold_given_values():
    item = LanguageItem("English", "Open Sans", True, False, 0)
    assert item.name == "English"
    assert item.font_family == "Open Sans"
    assert item.visible is True
    assert item.checked is False
    assert item.index == 0


def test_items_are_immutable():
    item = LanguageItem("English", "Open Sans", True, False, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.name = "Other"
    assert item.name == "English"


def test_equality_by_value():
    a = LanguageItem("Italiano", "Open Sans", True, False, 6)
    b = LanguageItem("Italiano", "Open Sans", True, False, 6)
    c = dataclasses.replace(a, index=7)
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert c.index == 7