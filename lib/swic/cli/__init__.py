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

import argparse
import logging
import sys

from importlib import import_module
from traceback import extract_tb
from traceback import format_exc

from sway_input.exceptions import SwayInputError
from sway_input.registry import DeviceRegistry
from sway_input.swaymsg import SwayMsg

from swic import NAME

logger = logging.getLogger(__name__)

_DEVICE_HELP = "device index, identifier, or a substring of the device's name"


def _create_parser():
    parser = argparse.ArgumentParser(
        prog=NAME.lower(), add_help=False, epilog=f"For details on individual actions, run `{NAME.lower()} <action> --help`."
    )
    subparsers = parser.add_subparsers(title="actions", help="optional action to perform")

    sp = subparsers.add_parser("show", help="show input devices and their settings")
    sp.add_argument("device", nargs="?", default="all", help=_DEVICE_HELP + ', or "all" (the default)')
    sp.set_defaults(action="show")

    sp = subparsers.add_parser(
        "config",
        help="read/change device settings",
        epilog="Changes are applied to the running sway session only, use `generate` to make them permanent.",
    )
    sp.add_argument("device", help=_DEVICE_HELP)
    sp.add_argument("setting", nargs="?", help="setting name as used in the sway config; leave empty to list settings")
    sp.add_argument("value", nargs="*", help="new value; 'pick' selects map_to_region with slurp")
    group = sp.add_mutually_exclusive_group()
    group.add_argument("--enable", action="store_true", help="include the setting again when applying")
    group.add_argument("--disable", action="store_true", help="leave the setting out, keeping its value")
    sp.set_defaults(action="config")

    sp = subparsers.add_parser("generate", help="print sway config input blocks")
    sp.add_argument("device", nargs="?", default="all", help=_DEVICE_HELP + ', or "all" (the default)')
    sp.add_argument("-t", "--type", action="store_true", dest="match_type", help="match devices by type, not identifier")
    sp.set_defaults(action="generate")

    sp = subparsers.add_parser("revert", help="restore the settings a device had before swic first changed it")
    sp.add_argument("device", help=_DEVICE_HELP)
    sp.set_defaults(action="revert")

    return parser, subparsers.choices


_cli_parser, actions = _create_parser()
print_help = _cli_parser.print_help


def find_device(registry, name):
    index = registry.find(name)
    if index is None:
        raise SwayInputError(f"no device found matching '{name}'")
    return index


def run(cli_args=None, swaymsg_path=None):
    if cli_args:
        action = cli_args[0]
        args = _cli_parser.parse_args(cli_args)
    else:
        args = _cli_parser.parse_args()
        if "action" not in args:
            _cli_parser.print_usage(sys.stderr)
            sys.stderr.write(f"{NAME.lower()}: error: too few arguments\n")
            sys.exit(2)
        action = args.action
    assert action in actions

    try:
        registry = DeviceRegistry(SwayMsg(swaymsg_path) if swaymsg_path else SwayMsg())
        registry.discover()
        if not len(registry):
            raise SwayInputError("no configurable input devices found")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s on %s", action, registry)

        m = import_module("." + action, package=__name__)
        m.run(registry, args, find_device)
    except AssertionError:
        tb_last = extract_tb(sys.exc_info()[2])[-1]
        sys.exit(f"{NAME.lower()}: assertion failed: {tb_last[0]} line {tb_last[1]}")
    except SwayInputError as e:
        sys.exit(f"{NAME.lower()}: error: {e}")
    except Exception:
        sys.exit(f"{NAME.lower()}: error: {format_exc()}")
