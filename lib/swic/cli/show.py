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

from sway_input import codec
from sway_input.settings import CONFIG_ONLY
from sway_input.settings import Setting

from swic import NAME
from swic import __version__


def setting_text(device, setting):
    """One line describing a setting: its value, or why it is not sent to sway."""
    if setting == Setting.SEND_EVENTS:
        return codec.to_string(device.libinput.send_events)
    option = device.get_setting(setting)
    if not option.has_value:
        return "(not set)" if setting in CONFIG_ONLY else "(not available)"
    text = codec.to_string(option.value)
    return text if option.enabled else f"{text} (disabled)"


def _print_device(index, device, verbose=True):
    print(f"{index}: {device.name}")
    print("     Identifier :", device.identifier)
    print("     Type       :", device.kind)
    if not verbose:
        return
    for setting in device.available_settings():
        print(f"     {setting.command_name:<19}:", setting_text(device, setting))


def run(registry, args, find_device):
    assert registry
    assert args.device

    if args.device == "all":
        print(f"{NAME} version {__version__}")
        print("")
        for index, device in enumerate(registry):
            _print_device(index, device, verbose=False)
        return

    index = find_device(registry, args.device)
    _print_device(index, registry[index])
