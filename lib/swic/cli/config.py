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

import copy
import logging
import select
import sys

from sway_input import codec
from sway_input import region_picker
from sway_input.common import Region
from sway_input.common import ToolMode
from sway_input.exceptions import NotFoundError
from sway_input.exceptions import SwayInputError
from sway_input.settings import CONFIG_ONLY
from sway_input.settings import Kind
from sway_input.settings import Setting

from swic import configuration
from swic.cli import show

logger = logging.getLogger(__name__)

ACCEL_SPEED_RANGE = (-1.0, 1.0)


def _print_setting(device, setting):
    print("#", setting.command_name, f"({setting.kind.name.lower()})")
    if setting.kind == Kind.TOGGLE:
        print("#   possible values: on/true/t/yes/y/1/enabled or off/false/f/no/n/0/disabled or Toggle/~")
    elif setting.kind == Kind.CHOICE:
        option = device.get_setting(setting)
        if option.has_value:
            print("#   possible values: one of [", ", ".join(option.value), "]")
    elif setting.kind == Kind.REGION:
        print("#   possible values: <x> <y> <width> <height>, or pick")
    elif setting.kind == Kind.TOOL_MODE:
        print("#   possible values: <tool> <absolute|relative>")
    print(setting.command_name, "=", show.setting_text(device, setting))


def select_toggle(value, current):
    value = value.lower()
    if value in ("toggle", "~"):
        return not current
    try:
        return bool(int(value))
    except ValueError:
        pass
    if value in ("true", "yes", "on", "t", "y", "enabled"):
        return True
    if value in ("false", "no", "off", "f", "n", "disabled"):
        return False
    raise SwayInputError(f"don't know how to interpret '{value}' as boolean")


def select_choice(value, choices):
    """Select an option by name, or by its position counting from 1."""
    if choices.select(value):
        return choices
    try:
        position = int(value)
    except ValueError:
        position = None
    if position is not None and 1 <= position <= len(choices):
        choices.selected = position - 1
        return choices
    raise SwayInputError(f"possible values are [{', '.join(choices)}]")


def _numbers(values, convert, count, what):
    if len(values) != count:
        raise SwayInputError(f"expected {count} values for {what}, got {len(values)}")
    try:
        return [convert(v) for v in values]
    except ValueError as exc:
        raise SwayInputError(f"can't interpret '{' '.join(values)}' as {what}") from exc


def parse_value(device, setting, values):
    """Turn command line words into a value for setting, based on the device's current value."""
    kind = setting.kind
    if setting == Setting.SEND_EVENTS:
        current = device.libinput.send_events
    else:
        option = device.get_setting(setting)
        current = option.value if option.has_value else None

    if kind == Kind.TOGGLE:
        (value,) = _numbers(values, str, 1, "boolean")
        return select_toggle(value, bool(current))
    if kind == Kind.CHOICE:
        if current is None:
            raise SwayInputError(f"{setting} is not available for {device.name}")
        (value,) = _numbers(values, str, 1, "choice")
        return select_choice(value, current)
    if kind == Kind.INTEGER:
        (value,) = _numbers(values, int, 1, "integer")
        return value
    if kind == Kind.FLOAT:
        (value,) = _numbers(values, float, 1, "number")
        if setting == Setting.ACCEL_SPEED and not ACCEL_SPEED_RANGE[0] <= value <= ACCEL_SPEED_RANGE[1]:
            raise SwayInputError(f"{setting}: value '{value}' out of bounds {ACCEL_SPEED_RANGE}")
        return value
    if kind == Kind.MATRIX:
        return tuple(_numbers(values, float, 6, "calibration matrix"))
    if kind == Kind.REGION:
        if values == ["pick"]:
            region = region_picker.pick_region()
            if region is None:
                raise SwayInputError("region selection cancelled")
            return region
        return Region(*_numbers(values, int, 4, "region"))
    if kind == Kind.TOOL_MODE:
        tool, mode = _numbers(values, str, 2, "tool mode")
        tool_mode = copy.deepcopy(current) if current is not None else ToolMode()
        if not tool_mode.tool.select(tool):
            raise SwayInputError(f"possible tools are [{', '.join(tool_mode.tool)}]")
        if not tool_mode.mode.select(mode):
            raise SwayInputError(f"possible modes are [{', '.join(tool_mode.mode)}]")
        return tool_mode
    raise SwayInputError(f"don't know how to set {setting}")


def _confirm(timeout):
    """Ask to keep the changes, true only if the user says yes before the timeout."""
    print(f"Keep these settings? Reverting in {timeout:g} seconds [y/N] ", end="", flush=True)
    ready, _, _ = select.select([sys.stdin], [], [], timeout)
    if not ready:
        print("")
        return False
    return sys.stdin.readline().strip().lower() in ("y", "yes")


def run(registry, args, find_device):
    assert registry
    assert args.device

    index = find_device(registry, args.device)
    device = registry[index]

    if not args.setting:
        print(device.name, f"[{device.identifier}]")
        for setting in device.available_settings():
            print("")
            _print_setting(device, setting)
        return

    try:
        setting = Setting.from_name(args.setting.lower(), query=False)
    except NotFoundError:
        setting = None
    if setting is None or (setting != Setting.SEND_EVENTS and device.get_setting(setting) is None):
        raise SwayInputError(f"no setting '{args.setting}' for {device.name}")

    if not args.value and not args.enable and not args.disable:
        _print_setting(device, setting)
        return

    if args.value:
        value = parse_value(device, setting, args.value)
        if setting == Setting.SEND_EVENTS:
            device.libinput.send_events = value
        else:
            # giving a value also enables the setting
            option = device.get_setting(setting)
            option.value = value
            option.enabled = True
    if args.enable or args.disable:
        if setting == Setting.SEND_EVENTS:
            raise SwayInputError(f"{setting} cannot be disabled, set it to off instead")
        device.get_setting(setting).enabled = args.enable
    print(setting.command_name, "=", show.setting_text(device, setting))

    if setting in CONFIG_ONLY:
        print(f"{setting} can only be set in the sway config:")
        print(codec.config_block(device))
        return

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("apply %s to %s", setting, device)
    failed = registry.apply_changes(index)
    if failed:
        print("failed to apply:", ", ".join(str(s) for s in failed))

    if configuration.get(configuration.SAFE_MODE) and not _confirm(configuration.get(configuration.REVERT_TIMEOUT)):
        failed = registry.revert_changes(index, changed=(setting,))
        if failed:
            print("failed to revert:", ", ".join(str(s) for s in failed))
        else:
            print("reverted", device.name)
        return

    # keep what sway reported before the first change, for `revert`
    configuration.record_change(device.identifier, registry.document(index), setting.command_name)
