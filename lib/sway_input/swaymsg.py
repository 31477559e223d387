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

"""Thin wrapper over the `swaymsg` executable.

All calls block until swaymsg exits.
"""

from __future__ import annotations

import json
import logging
import subprocess

from typing import List

from .exceptions import DiscoveryError
from .settings import Setting

logger = logging.getLogger(__name__)

DEFAULT_PATH = "swaymsg"


class SwayMsg:
    __slots__ = ("path",)

    def __init__(self, path: str = DEFAULT_PATH):
        self.path = path

    def _query(self, message_type: str) -> List[dict]:
        args = [self.path, "-t", message_type, "--raw"]
        try:
            result = subprocess.run(args, capture_output=True, text=True, check=True)
        except (OSError, subprocess.CalledProcessError) as e:
            raise DiscoveryError(f"failed to call {' '.join(args)}: {e}") from e
        try:
            reply = json.loads(result.stdout)
        except ValueError as e:
            raise DiscoveryError(f"{' '.join(args)} returned invalid JSON: {e}") from e
        if not isinstance(reply, list):
            raise DiscoveryError(f"{' '.join(args)} returned {type(reply).__name__}, expected a list")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s => %d entries", message_type, len(reply))
        return reply

    def get_inputs(self) -> List[dict]:
        return self._query("get_inputs")

    def get_outputs(self) -> List[dict]:
        return self._query("get_outputs")

    def set_input(self, identifier: str, setting: Setting, value: str) -> bool:
        """Run `swaymsg input <identifier> <setting> <value>`, true if swaymsg exited successfully."""
        args = [self.path, "input", identifier, f"{setting.command_name} {value}"]
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("run %s", args)
        try:
            result = subprocess.run(args, capture_output=True, text=True)
        except OSError as e:
            logger.error("failed to call %s: %s", self.path, e)
            return False
        if result.returncode != 0:
            logger.warning(
                "%s %s on %s failed (%d): %s",
                setting.command_name,
                value,
                identifier,
                result.returncode,
                (result.stdout + result.stderr).strip(),
            )
            return False
        return True

    def __repr__(self):
        return f"SwayMsg({self.path!r})"
