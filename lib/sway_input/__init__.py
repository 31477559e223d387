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
"""Read and change the settings of libinput devices managed by the sway compositor.

Talks to sway through the swaymsg executable: device and output descriptions
are read with `swaymsg -t get_inputs/get_outputs --raw`, settings are changed
one at a time with `swaymsg input <identifier> <setting> <value>`, and the
same settings can be rendered as an `input` block for the sway config file.

References:
man 5 sway-input
sway/ipc-json.c
"""

from .common import OptionalSetting  # noqa: F401
from .common import Region  # noqa: F401
from .common import SelectableSet  # noqa: F401
from .common import ToolMode  # noqa: F401
from .device import Device  # noqa: F401
from .device import DeviceType  # noqa: F401
from .registry import DeviceRegistry  # noqa: F401
from .settings import Setting  # noqa: F401
