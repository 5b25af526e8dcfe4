"""Lookup tables over a parsed JSON language tree.

Value nodes are indexed by their hierarchical position, a comma separated
list of 1-based positions such as ``"3,1,2"``. Object nodes whose key names
a screen are indexed by that screen.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

from .jsontree import JsonTreeItem


class Screen(Enum):
    """Screens whose text strings live in the language tree.

    Each value is the object key that names the screen in the JSON file.
    """

    LEFTMENU = "leftMenu"
    RIGHTMENU = "rightMenu"
    RECIPES = "Recipes"
    RECIPES_LAB = "RecipesLab"
    RECIPES_LAB_SETTING = "RecipeSettings"
    RECIPES_LAB_WELDMODE = "RecipeWeldMode"
    RECIPES_LAB_WELDPROCESS = "RecipeWeldProcess"
    RECIPES_LAB_WELDPROCESS_PRETRIGGER = "Pretrigger"
    RECIPES_LAB_WELDPROCESS_AFTERBURST = "Afterburst"
    RECIPES_LAB_PARAMETERA2Z = "ParametersAZ"
    RECIPES_LAB_LIMITS = "Limits"
    RECIPES_LAB_LIMITS_SETUP = "Setup"
    RECIPES_LAB_LIMITS_CONTROL = "Control"
    RECIPES_LAB_LIMITS_SUSPECT_REJECT = "SuspectReject"
    RECIPES_LAB_STACKRECIPE = "StackRecipe"
    RECIPES_LAB_RESULTVIEW = "ResultView"
    RECIPES_LAB_GRAPHSETTING = "GraphSettings"
    PRODUCTION = "Production"
    ANALYTICS = "Analytics"
    ANALYTICS_RESULT_GRAPH_VIEW = "graphView"
    ANALYTICS_RESULT_GRAPH_RIGHT_SETTING = "graphRightSetting"
    ANALYTICS_RESULT_GRAPH_HEADER_SETTING = "graphHeaderSetting"
    ANALYTICS_RESULT_GRAPH_AXIS = "graphAxis"
    SYSTEM = "System"
    SYSTEM_INFO = "Information"
    SYSTEM_SOFTWARE_UPGRADE = "SoftwareUpgrade"
    SYSTEM_SOFTWARE_UPGRADE_WELDER = "InsertUSBtoWelder"
    SYSTEM_SOFTWARE_UPGRADE_RASPPI = "InsertUSBtoRaspPi"
    ACTUATORSETUP = "Actuator Setup"
    DIAGNOSTICS = "Diagnostics"
    IMPORTEXPORT = "Import/ Export"
    LOGOUT = "Logout"
    SELECTLANGUAGE = "selectLanguage"
    WELDMODE_VALUE_LOWERSTRING = "LowerWeldModeValue"
    LOGIN = "Login"
    NUMPAD = "NumericKeypad"
    ALARM = "alarm"
    ALARM_GENERAL = "alarmGeneral"
    ALARM_NAME = "alarmName"
    ALARM_DESCRIPTION = "alarmDescription"
    NONESCREEN = ""


def screen_for_name(name: str) -> Screen:
    """Return the screen named by an object key; NONESCREEN if unknown."""
    try:
        return Screen(name)
    except ValueError:
        return Screen.NONESCREEN


class JsonTreeIndex:
    """Position and screen indexes filled while a JSON tree is parsed."""

    def __init__(self) -> None:
        self._items: dict[str, JsonTreeItem] = {}
        self._screens: dict[Screen, JsonTreeItem] = {}
        self._stack: list[int] = []

    @property
    def path(self) -> str:
        """The current hierarchical position as a comma separated string."""
        return ",".join(str(position) for position in self._stack)

    @property
    def items(self) -> dict[str, JsonTreeItem]:
        """Indexed value nodes, ordered by their position string."""
        return dict(sorted(self._items.items()))

    @property
    def screens(self) -> dict[Screen, JsonTreeItem]:
        """Indexed screen nodes."""
        return dict(self._screens)

    @contextmanager
    def descend(self, position: int) -> Iterator[None]:
        """Enter the child at 1-based ``position`` for the duration of the block."""
        self._stack.append(position)
        try:
            yield
        finally:
            self._stack.pop()

    def insert_item(self, item: JsonTreeItem) -> str:
        """Index ``item`` under the current position and return that position."""
        key = self.path
        self._items[key] = item
        return key

    def insert_screen_item(self, screen_name: str, item: JsonTreeItem) -> Screen:
        """Index ``item`` under the screen named ``screen_name`` and return it."""
        screen = screen_for_name(screen_name)
        self._screens[screen] = item
        return screen

    def clear(self) -> None:
        """Forget every indexed node and reset the position."""
        self._stack.clear()
        self._items.clear()
        self._screens.clear()