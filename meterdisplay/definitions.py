"""Shared enumerations: version slots and software upgrade targets."""

from __future__ import annotations

from enum import IntEnum

UIC_VERSION = (0, 0, 1, 4)
"""Major, minor, build and auto-build numbers of the UI controller."""


class VersionKind(IntEnum):
    """Component whose software version is reported."""

    UIC = 0
    SC = 1
    AC = 2
    PC = 3


class UpgradeTarget(IntEnum):
    """Software package selected for upgrade."""

    NONE = -1
    WELDER_SOFTWARE = 0
    UICONTROLLER_SOFTWARE = 1