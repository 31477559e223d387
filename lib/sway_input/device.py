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

from enum import Enum
from typing import Optional
from typing import Union

from .common import CalibrationMatrix
from .common import OptionalSetting
from .common import Region
from .common import SelectableSet
from .common import ToolMode
from .exceptions import NotFoundError
from .settings import Setting


class DeviceType(Enum):
    KEYBOARD = "keyboard"
    POINTER = "pointer"
    TOUCHPAD = "touchpad"
    TABLET_TOOL = "tablet_tool"
    TABLET_PAD = "tablet_pad"
    GESTURE = "gesture"
    SWITCH = "switch"
    UNKNOWN = "unknown"

    @classmethod
    def from_name(cls, name: str) -> DeviceType:
        try:
            return cls(name)
        except ValueError:
            raise NotFoundError(f"unknown device type {name!r}") from None

    def __str__(self):
        return self.value


# device types that are never offered for configuration
SKIPPED_TYPES = frozenset((DeviceType.UNKNOWN, DeviceType.SWITCH, DeviceType.GESTURE))
POINTER_TYPES = frozenset((DeviceType.POINTER, DeviceType.TOUCHPAD))
TABLET_TYPES = frozenset((DeviceType.TABLET_TOOL, DeviceType.TABLET_PAD))


def _setting(enabled=True):
    return dataclasses.field(default_factory=lambda: OptionalSetting(enabled=enabled))


def _config_only():
    return dataclasses.field(default_factory=OptionalSetting.config_only)


@dataclasses.dataclass
class LibinputSettings:
    """Settings sway reports under the `libinput` key, shared by all device types."""

    send_events: bool = True
    tap_to_click: OptionalSetting[bool] = _setting()
    tap_and_drag: OptionalSetting[bool] = _setting()
    tap_drag_lock: OptionalSetting[bool] = _setting()
    tap_button_map: OptionalSetting[SelectableSet] = _setting()
    left_handed: OptionalSetting[bool] = _setting()
    natural_scroll: OptionalSetting[bool] = _setting()
    middle_emulation: OptionalSetting[bool] = _setting()
    calibration_matrix: OptionalSetting[CalibrationMatrix] = _setting()
    scroll_method: OptionalSetting[SelectableSet] = _setting()
    scroll_button: OptionalSetting[int] = _setting()
    dwt: OptionalSetting[bool] = _setting()
    dwtp: OptionalSetting[bool] = _setting()
    click_method: OptionalSetting[SelectableSet] = _setting()
    accel_profile: OptionalSetting[SelectableSet] = _setting()
    accel_speed: OptionalSetting[float] = _setting()


@dataclasses.dataclass
class KeyboardSettings:
    repeat_delay: OptionalSetting[int] = _setting()
    repeat_rate: OptionalSetting[int] = _setting()
    xkb_capslock: OptionalSetting[bool] = _config_only()
    xkb_numlock: OptionalSetting[bool] = _config_only()


@dataclasses.dataclass
class PointerSettings:
    """Pointers and touchpads."""

    scroll_factor: OptionalSetting[float] = _setting()
    map_to_output: OptionalSetting[SelectableSet] = _config_only()
    map_to_region: OptionalSetting[Region] = _config_only()


@dataclasses.dataclass
class TabletSettings:
    """Tablet tools and pads. sway cannot report the tool mode, so it is config only."""

    tool_mode: OptionalSetting[ToolMode] = _config_only()
    map_to_output: OptionalSetting[SelectableSet] = _config_only()
    map_to_region: OptionalSetting[Region] = _config_only()


TypeSettings = Union[KeyboardSettings, PointerSettings, TabletSettings, None]


def settings_for(kind: DeviceType) -> TypeSettings:
    if kind == DeviceType.KEYBOARD:
        return KeyboardSettings()
    if kind in POINTER_TYPES:
        return PointerSettings()
    if kind in TABLET_TYPES:
        return TabletSettings()
    return None


@dataclasses.dataclass
class Device:
    """A libinput device as seen by sway, with every setting it can have."""

    identifier: str
    name: str
    kind: DeviceType
    libinput: LibinputSettings = dataclasses.field(default_factory=LibinputSettings)
    settings: TypeSettings = None

    def __post_init__(self):
        if self.settings is None:
            self.settings = settings_for(self.kind)

    def get_setting(self, setting: Setting) -> Optional[OptionalSetting]:
        """The optional setting for this device, or None if it does not apply to its type.

        send_events is not optional and is read directly from `libinput`.
        """
        assert setting != Setting.SEND_EVENTS
        for block in (self.settings, self.libinput):
            if block is not None and hasattr(block, setting.attribute):
                return getattr(block, setting.attribute)
        return None

    def available_settings(self):
        """Settings that apply to this device type."""
        return [s for s in Setting if s == Setting.SEND_EVENTS or self.get_setting(s) is not None]

    def __str__(self):
        return f"<Device({self.kind}: {self.name} [{self.identifier}])>"
