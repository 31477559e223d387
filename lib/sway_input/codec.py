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

"""Conversion between sway's JSON device descriptions, `swaymsg input`
arguments and sway config file blocks.

Decoding follows the layout sway uses in `ipc-json.c`: keyboard repeat
settings and the scroll factor sit at the top level of a device description,
everything else lives in the nested `libinput` object.
"""

from __future__ import annotations

import logging

from typing import List
from typing import Optional
from typing import Tuple

from . import settings
from .common import Region
from .common import SelectableSet
from .common import ToolMode
from .device import SKIPPED_TYPES
from .device import TABLET_TYPES
from .device import Device
from .device import DeviceType
from .exceptions import DiscoveryError
from .exceptions import NotFoundError
from .settings import Kind
from .settings import Setting

logger = logging.getLogger(__name__)

INDENT = "    "

_TOP_LEVEL = (Setting.REPEAT_DELAY, Setting.REPEAT_RATE, Setting.SCROLL_FACTOR)

_LIBINPUT = (
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

CHOICES = {
    Setting.TAP_BUTTON_MAP: settings.TAP_BUTTON_MAPS,
    Setting.SCROLL_METHOD: settings.SCROLL_METHODS,
    Setting.CLICK_METHOD: settings.CLICK_METHODS,
    Setting.ACCEL_PROFILE: settings.ACCEL_PROFILES,
}


#
# encoding
#


def to_string(value) -> str:
    """Render a setting value the way `swaymsg input` and the sway config expect it."""
    # bool before int, bool is a subclass of int
    if isinstance(value, bool):
        return settings.bool_to_string(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        # same six digit rendering for every float, independent of the locale
        return f"{value:f}"
    if isinstance(value, SelectableSet):
        return value.current()
    if isinstance(value, tuple):
        return " ".join(f"{float(v):f}" for v in value)
    if isinstance(value, Region):
        return " ".join(str(int(v)) for v in value)
    if isinstance(value, ToolMode):
        return f"{value.tool.current()} {value.mode.current()}"
    raise TypeError(f"cannot convert {type(value).__name__} value {value!r} to a sway setting")


def command_argument(setting: Setting, value: str) -> str:
    """The `<setting> <value>` part of an input command or config line."""
    return f"{setting.command_name} {value}"


def setting_arguments(device: Device, include_config_only: bool = False) -> List[Tuple[Setting, str]]:
    """Every setting to push or write for device, send_events first, then the fixed setting order.

    A setting is included only when it has a value and is enabled.
    """
    arguments = [(Setting.SEND_EVENTS, to_string(device.libinput.send_events))]
    order = settings.APPLY_ORDER + settings.CONFIG_ONLY if include_config_only else settings.APPLY_ORDER
    for setting in order:
        option = device.get_setting(setting)
        if option is not None and option.active:
            arguments.append((setting, to_string(option.value)))
    return arguments


def config_block(device: Device, match_type: bool = False) -> str:
    """An `input` block for the sway config, matching the device by identifier or by type."""
    if match_type:
        header = f"input type:{device.kind} {{"
    else:
        header = f"input {device.identifier} {{"
    lines = [header]
    for setting, value in setting_arguments(device, include_config_only=True):
        lines.append(INDENT + command_argument(setting, value))
    lines.append("}")
    return "\n".join(lines)


#
# decoding
#


def _decode_value(setting: Setting, raw):
    kind = setting.kind
    if kind == Kind.TOGGLE:
        if raw not in (settings.ENABLED, settings.DISABLED):
            raise ValueError(f"{setting.query_name}: expected enabled/disabled, got {raw!r}")
        return settings.string_to_bool(raw)
    if kind == Kind.CHOICE:
        choice = SelectableSet(CHOICES[setting])
        if not choice.select(raw):
            logger.warning("%s: unknown value %r, using %s", setting.query_name, raw, choice.current())
        return choice
    if kind == Kind.INTEGER:
        return int(raw)
    if kind == Kind.FLOAT:
        return float(raw)
    if kind == Kind.MATRIX:
        matrix = tuple(float(v) for v in raw)
        if len(matrix) != 6:
            raise ValueError(f"{setting.query_name}: expected 6 values, got {len(matrix)}")
        return matrix
    raise ValueError(f"{setting.query_name}: cannot decode settings of kind {kind.name}")


def device_type(name: str) -> DeviceType:
    try:
        return DeviceType.from_name(name)
    except NotFoundError:
        logger.info("unknown device type %r", name)
        return DeviceType.UNKNOWN


def decode_device(document: dict) -> Optional[Device]:
    """Build a Device from one entry of `swaymsg -t get_inputs --raw`.

    Returns None for device types that are never configured. Settings missing
    from the description are left without a value.
    """
    try:
        kind = device_type(document["type"])
        if kind in SKIPPED_TYPES:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("skipping %s device %r", kind, document.get("name"))
            return None

        device = Device(identifier=str(document["identifier"]), name=str(document["name"]), kind=kind)

        for setting in _TOP_LEVEL:
            option = device.get_setting(setting)
            if option is not None and setting.query_name in document:
                option.value = _decode_value(setting, document[setting.query_name])

        if kind in TABLET_TYPES:
            # sway does not report the tool mode, assume the default
            device.settings.tool_mode.value = ToolMode()

        libinput = document.get("libinput", {})
        if Setting.SEND_EVENTS.query_name in libinput:
            device.libinput.send_events = settings.string_to_bool(libinput[Setting.SEND_EVENTS.query_name])
        for setting in _LIBINPUT:
            if setting.query_name in libinput:
                getattr(device.libinput, setting.attribute).value = _decode_value(setting, libinput[setting.query_name])
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise DiscoveryError(f"malformed input device description: {e!r}") from e

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("decoded %s", device)
    return device
