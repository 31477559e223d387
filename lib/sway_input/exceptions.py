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

"""Exceptions that may be raised by this API."""


class SwayInputError(Exception):
    """Base class for all errors raised by sway_input."""

    pass


class DiscoveryError(SwayInputError):
    """Raised when swaymsg cannot be run, or when it replies with something
    that is not the JSON document we asked for."""

    pass


class NoSuchDeviceError(SwayInputError, IndexError):
    """Raised when a device index is outside of the discovered device list."""

    def __init__(self, index, count, reason=None):
        super().__init__(reason or f"no device at index {index} (have {count})")
        self.index = index
        self.count = count


class InvalidStateError(SwayInputError):
    """Raised when a selectable setting is rendered without a selected option.
    Indicates a record that was built without choosing a default."""

    pass


class NotFoundError(SwayInputError, LookupError):
    """Raised when a name does not match any known device type or setting."""

    pass


class RegionPickerError(SwayInputError):
    """Raised when the region picker is missing or prints something unexpected."""

    pass
