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
import signal
import sys

from swic import NAME
from swic import __version__
from swic import cli
from swic import configuration

logger = logging.getLogger(__name__)


def create_parser():
    arg_parser = argparse.ArgumentParser(
        prog=NAME.lower(), epilog="See `man 5 sway-input` for the meaning of the individual settings."
    )
    arg_parser.add_argument(
        "-d",
        "--debug",
        action="count",
        default=0,
        help="print logging messages, for debugging purposes (may be repeated for extra verbosity)",
    )
    arg_parser.add_argument(
        "--swaymsg",
        action="store",
        dest="swaymsg_path",
        metavar="PATH",
        help="swaymsg executable used to talk to sway; from the configuration if unspecified",
    )
    arg_parser.add_argument(
        "-S",
        "--no-safe-mode",
        action="store_true",
        help="keep changed settings without asking for confirmation",
    )
    arg_parser.add_argument("-V", "--version", action="version", version="%(prog)s " + __version__)
    arg_parser.add_argument("--help-actions", action="store_true", help="describe the command-line actions")
    arg_parser.add_argument(
        "action",
        nargs=argparse.REMAINDER,
        choices=cli.actions,
        help="action to perform, `show` if none is given; append ' --help' to show args",
    )
    return arg_parser


def _setup_logging(debug):
    log_format = "%(asctime)s,%(msecs)03d %(levelname)8s [%(threadName)s] %(name)s: %(message)s"
    log_level = logging.ERROR - 10 * debug
    logging.getLogger("").setLevel(min(log_level, logging.WARNING))
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(log_format))
    stream_handler.setLevel(log_level)
    logging.getLogger("").addHandler(stream_handler)


def _parse_arguments(argv=None):
    arg_parser = create_parser()
    args = arg_parser.parse_args(argv)

    if args.help_actions:
        cli.print_help()
        return

    _setup_logging(args.debug)
    if logger.isEnabledFor(logging.INFO):
        logger.info("version %s", __version__)

    return args


def _handlesig(signl, stack):
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    sys.exit(f"{NAME.lower()}: exit due to keyboard interrupt")


def main(argv=None):
    args = _parse_arguments(argv)
    if not args:
        return

    signal.signal(signal.SIGINT, _handlesig)

    if args.no_safe_mode:
        configuration.update(configuration.SAFE_MODE, False, persist=False)
    swaymsg_path = args.swaymsg_path or configuration.get(configuration.SWAYMSG_PATH)
    return cli.run(args.action or ["show"], swaymsg_path)


if __name__ == "__main__":
    main()
