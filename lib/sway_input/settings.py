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

"""Names of the input settings sway knows about (see `man 5 sway-input`).

Some settings are spelled differently when read with `swaymsg -t get_inputs`
and when written with `swaymsg input ...` or in the sway config, so every
setting has a query name and a command name.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

from .exceptions import NotFoundError

ENABLED = "enabled"
DISABLED = "disabled"


class Kind(IntEnum):
    TOGGLE = 0x01
    CHOICE = 0x02
    INTEGER = 0x04
    FLOAT = 0x08
    MATRIX = 0x10
    REGION = 0x20
    TOOL_MODE = 0x40


class Setting(IntEnum):
    REPEAT_DELAY = 0
    REPEAT_RATE = 1
    SCROLL_FACTOR = 2
    TOOL_MODE = 3
    MAP_TO_OUTPUT = 4
    MAP_TO_REGION = 5
    SEND_EVENTS = 6
    TAP_TO_CLICK = 7
    TAP_AND_DRAG = 8
    TAP_DRAG_LOCK = 9
    TAP_BUTTON_MAP = 10
    LEFT_HANDED = 11
    NATURAL_SCROLL = 12
    MIDDLE_EMULATION = 13
    CALIBRATION_MATRIX = 14
    SCROLL_METHOD = 15
    SCROLL_BUTTON = 16
    DWT = 17
    DWTP = 18
    CLICK_METHOD = 19
    ACCEL_PROFILE = 20
    ACCEL_SPEED = 21
    # config file only, sway has no query for these
    XKB_CAPSLOCK = 22
    XKB_NUMLOCK = 23

    @property
    def query_name(self) -> Optional[str]:
        return _QUERY_NAMES.get(self)

    @property
    def command_name(self) -> str:
        return _COMMAND_NAMES.get(self, self.name.lower())

    @property
    def kind(self) -> Kind:
        return _KINDS[self]

    @property
    def attribute(self) -> str:
        """Name of the field holding this setting in the device model."""
        return self.name.lower()

    @classmethod
    def from_name(cls, name: str, query: bool = True) -> Setting:
        table = _BY_QUERY_NAME if query else _BY_COMMAND_NAME
        try:
            return table[name]
        except KeyError:
            raise NotFoundError(f"unknown {'query' if query else 'command'} setting name {name!r}") from None

    def __str__(self):
        return self.command_name


_QUERY_NAMES = {
    Setting.REPEAT_DELAY: "repeat_delay",
    Setting.REPEAT_RATE: "repeat_rate",
    Setting.SCROLL_FACTOR: "scroll_factor",
    Setting.TOOL_MODE: "tool_mode",
    Setting.MAP_TO_OUTPUT: "map_to_output",
    Setting.MAP_TO_REGION: "map_to_region",
    Setting.SEND_EVENTS: "send_events",
    Setting.TAP_TO_CLICK: "tap",
    Setting.TAP_AND_DRAG: "tap_drag",
    Setting.TAP_DRAG_LOCK: "tap_drag_lock",
    Setting.TAP_BUTTON_MAP: "tap_button_map",
    Setting.LEFT_HANDED: "left_handed",
    Setting.NATURAL_SCROLL: "natural_scroll",
    Setting.MIDDLE_EMULATION: "middle_emulation",
    Setting.CALIBRATION_MATRIX: "calibration_matrix",
    Setting.SCROLL_METHOD: "scroll_method",
    Setting.SCROLL_BUTTON: "scroll_button",
    Setting.DWT: "dwt",
    Setting.DWTP: "dwtp",
    Setting.CLICK_METHOD: "click_method",
    Setting.ACCEL_PROFILE: "accel_profile",
    Setting.ACCEL_SPEED: "accel_speed",
}

# only the spellings that differ from the query names
_COMMAND_NAMES = dict(_QUERY_NAMES)
_COMMAND_NAMES.update(
    {
        Setting.SEND_EVENTS: "events",
        Setting.TAP_AND_DRAG: "drag",
        Setting.TAP_DRAG_LOCK: "drag_lock",
        Setting.ACCEL_SPEED: "pointer_accel",
    }
)

_BY_QUERY_NAME = {name: setting for setting, name in _QUERY_NAMES.items()}
_BY_COMMAND_NAME = {setting.command_name: setting for setting in Setting}

_KINDS = {
    Setting.REPEAT_DELAY: Kind.INTEGER,
    Setting.REPEAT_RATE: Kind.INTEGER,
    Setting.SCROLL_FACTOR: Kind.FLOAT,
    Setting.TOOL_MODE: Kind.TOOL_MODE,
    Setting.MAP_TO_OUTPUT: Kind.CHOICE,
    Setting.MAP_TO_REGION: Kind.REGION,
    Setting.SEND_EVENTS: Kind.TOGGLE,
    Setting.TAP_TO_CLICK: Kind.TOGGLE,
    Setting.TAP_AND_DRAG: Kind.TOGGLE,
    Setting.TAP_DRAG_LOCK: Kind.TOGGLE,
    Setting.TAP_BUTTON_MAP: Kind.CHOICE,
    Setting.LEFT_HANDED: Kind.TOGGLE,
    Setting.NATURAL_SCROLL: Kind.TOGGLE,
    Setting.MIDDLE_EMULATION: Kind.TOGGLE,
    Setting.CALIBRATION_MATRIX: Kind.MATRIX,
    Setting.SCROLL_METHOD: Kind.CHOICE,
    Setting.SCROLL_BUTTON: Kind.INTEGER,
    Setting.DWT: Kind.TOGGLE,
    Setting.DWTP: Kind.TOGGLE,
    Setting.CLICK_METHOD: Kind.CHOICE,
    Setting.ACCEL_PROFILE: Kind.CHOICE,
    Setting.ACCEL_SPEED: Kind.FLOAT,
    Setting.XKB_CAPSLOCK: Kind.TOGGLE,
    Setting.XKB_NUMLOCK: Kind.TOGGLE,
}

# order in which settings are pushed to sway and written to the config,
# send_events always goes first and is not part of it
APPLY_ORDER = (
    Setting.SCROLL_FACTOR,
    Setting.REPEAT_DELAY,
    Setting.REPEAT_RATE,
    Setting.TOOL_MODE,
    Setting.MAP_TO_OUTPUT,
    Setting.MAP_TO_REGION,
    Setting.TAP_TO_CLICK,
    Setting.TAP_AND_DRAG,
    Setting.TAP_DRAG_LOCK,
    Setting.TAP_BUTTON_MAP,
    Setting.LEFT_HANDED,
    Setting.NATURAL_SCROLL,
    Setting.MIDDLE_EMULATION,
    Setting.CALIBRATION_MATRIX,
    Setting.SCROLL_METHOD,
    Setting.SCROLL_BUTTON,
    Setting.DWT,
    Setting.DWTP,
    Setting.CLICK_METHOD,
    Setting.ACCEL_PROFILE,
    Setting.ACCEL_SPEED,
)

CONFIG_ONLY = (Setting.XKB_CAPSLOCK, Setting.XKB_NUMLOCK)

TAP_BUTTON_MAPS = ("lrm", "lmr")
SCROLL_METHODS = ("none", "two_finger", "edge", "on_button_down")
CLICK_METHODS = ("none", "button_areas", "clickfinger")
ACCEL_PROFILES = ("adaptive", "flat")


def bool_to_string(value: bool) -> str:
    return ENABLED if value else DISABLED


def string_to_bool(value: str) -> bool:
    return value == ENABLED
