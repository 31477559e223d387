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

import logging
import subprocess

from typing import Optional

from .common import Region
from .exceptions import RegionPickerError

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "slurp"
REGION_FORMAT = "%x %y %w %h"


def pick_region(command: str = DEFAULT_COMMAND) -> Optional[Region]:
    """Let the user draw a rectangle with slurp. Returns None if the selection was cancelled."""
    try:
        result = subprocess.run([command, "-f", REGION_FORMAT], capture_output=True, text=True)
    except OSError as e:
        raise RegionPickerError(f"cannot run {command}: {e}") from e

    output = result.stdout.strip()
    if result.returncode != 0:
        # slurp exits with an error and a "selection cancelled" message on escape
        logger.info("%s: %s", command, (output or result.stderr).strip())
        return None

    try:
        x, y, width, height = (int(v) for v in output.split())
    except ValueError as e:
        raise RegionPickerError(f"{command} printed {output!r}, expected '<x> <y> <w> <h>'") from e
    return Region(x, y, width, height)
