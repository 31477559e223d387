## Copyright (C) 2024  swic Contributors
##
## This program is free software; you can redistribute it and/or modify
## it under the terms of the GNU General Public License as published by
## the Free Software Foundation; either version 2 of the License, or
## (at your option) any later version.
##
## This program is distributed in the hope that it will be useful,
## but WITHOUT ANY WARRANTY; without even the implied warranty of
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
## GNU General Public License for more details.
##
## You should have received a copy of the GNU General Public License along
## with this program; if not, write to the Free Software Foundation, Inc.,
## 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA.
from __future__ import annotations

import dataclasses

from typing import Generic
from typing import Iterable
from typing import Optional
from typing import Tuple
from typing import TypeVar

from .exceptions import InvalidStateError

T = TypeVar("T")

WILDCARD = "*"

# libinput calibration matrix, a 2x3 affine transform in row order
CalibrationMatrix = Tuple[float, float, float, float, float, float]


class OptionalSetting(Generic[T]):
    """A setting value that a device may or may not have, plus an enabled flag.

    The three states are: absent (no value), present but disabled, and present
    and enabled. Only the last one is ever sent to sway or written to a config.
    Disabling a setting keeps its value, so enabling it again restores it.
    """

    __slots__ = ("_value", "has_value", "enabled")

    def __init__(self, value=None, has_value=False, enabled=True):
        self._value = value
        self.has_value = has_value or value is not None
        self.enabled = enabled

    @classmethod
    def config_only(cls, value=None) -> OptionalSetting:
        """Settings that sway cannot report start disabled; the user has to opt in."""
        return cls(value, enabled=False)

    @property
    def value(self) -> Optional[T]:
        return self._value

    @value.setter
    def value(self, value: T):
        self._value = value
        self.has_value = True

    @property
    def active(self) -> bool:
        return self.has_value and self.enabled

    def clear(self):
        self._value = None
        self.has_value = False

    def value_or(self, default: T) -> T:
        return self._value if self.has_value else default

    def __bool__(self):
        return self.has_value

    def __eq__(self, other):
        return (
            isinstance(other, OptionalSetting)
            and self.has_value == other.has_value
            and self.enabled == other.enabled
            and self._value == other._value
        )

    def __repr__(self):
        if not self.has_value:
            return f"OptionalSetting(<absent>, enabled={self.enabled})"
        return f"OptionalSetting({self._value!r}, enabled={self.enabled})"


class SelectableSet:
    """An ordered list of string options with at most one of them selected.

    Options are compared by exact, case-sensitive match. The same option may
    appear more than once; selecting it picks the first occurrence.
    """

    __slots__ = ("options", "selected")

    def __init__(self, options: Iterable[str], selected: Optional[int] = 0):
        self.options = list(options)
        if not self.options:
            raise ValueError("a selectable set needs at least one option")
        self.selected = selected

    def select(self, name: str) -> bool:
        """Select the option matching name, leaving the selection alone if there is none."""
        for index, option in enumerate(self.options):
            if option == name:
                self.selected = index
                return True
        return False

    def current(self) -> str:
        if self.selected is None or not 0 <= self.selected < len(self.options):
            raise InvalidStateError(f"no option selected or corrupted index ({self.selected}) in {self.options}")
        return self.options[self.selected]

    def __getitem__(self, index: int) -> str:
        if not 0 <= index < len(self.options):
            raise IndexError(f"option index {index} is out of range")
        return self.options[index]

    def __iter__(self):
        yield from self.options

    def __len__(self):
        return len(self.options)

    def __contains__(self, name):
        return name in self.options

    def __str__(self):
        return self.current()

    def __eq__(self, other):
        return isinstance(other, SelectableSet) and self.options == other.options and self.selected == other.selected

    def __repr__(self):
        return f"SelectableSet({self.options!r}, selected={self.selected!r})"


@dataclasses.dataclass
class Region:
    """Rectangle in layout coordinates that a pointer or tablet is mapped to."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __iter__(self):
        yield from (self.x, self.y, self.width, self.height)


TOOLS = ("pen", "eraser", "brush", "pencil", "airbrush", WILDCARD)
TOOL_MODES = ("absolute", "relative")


@dataclasses.dataclass
class ToolMode:
    tool: SelectableSet = dataclasses.field(default_factory=lambda: SelectableSet(TOOLS, selected=TOOLS.index(WILDCARD)))
    mode: SelectableSet = dataclasses.field(default_factory=lambda: SelectableSet(TOOL_MODES))
