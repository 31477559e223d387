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

import copy
import logging

from typing import List
from typing import Optional

from . import codec
from .common import WILDCARD
from .common import Region
from .common import SelectableSet
from .device import Device
from .exceptions import DiscoveryError
from .exceptions import NoSuchDeviceError
from .settings import APPLY_ORDER
from .settings import Setting
from .swaymsg import SwayMsg

logger = logging.getLogger(__name__)


class DeviceRegistry:
    """The configurable input devices known to sway, plus a backup of their discovered state.

    The backup is taken right after discovery and is only replaced through
    set_backup, so changes can be reverted on the live system (revert_changes)
    and in memory (restore_backup). Not thread safe: do not call discover()
    while iterating.
    """

    def __init__(self, ipc=None):
        self.ipc = ipc if ipc is not None else SwayMsg()
        self.devices: List[Device] = []
        self._backup: List[Device] = []
        self._documents: List[dict] = []
        self.outputs: List[str] = []

    def discover(self):
        """Query sway for input devices and outputs, replacing all known devices and the backup."""
        devices = []
        documents = []
        for document in self.ipc.get_inputs():
            try:
                device = codec.decode_device(document)
            except DiscoveryError as e:
                logger.warning("ignoring input device: %s", e)
                continue
            if device is not None:
                devices.append(device)
                documents.append(copy.deepcopy(document))

        outputs = []
        for output in self.ipc.get_outputs():
            try:
                outputs.append(str(output["name"]))
            except (KeyError, TypeError) as e:
                raise DiscoveryError(f"malformed output description: {e!r}") from e

        for device in devices:
            self._set_defaults(device, outputs)

        self.devices = devices
        self.outputs = outputs
        self._backup = copy.deepcopy(devices)
        self._documents = documents
        if logger.isEnabledFor(logging.INFO):
            logger.info("found %d input devices and %d outputs", len(devices), len(outputs))
        return self

    @staticmethod
    def _set_defaults(device: Device, outputs: List[str]):
        # sway cannot report the output mapping, so every device starts with the same values.
        # xkb_capslock and xkb_numlock stay unset, which sway treats as off.
        if device.get_setting(Setting.MAP_TO_OUTPUT) is not None:
            choices = SelectableSet(outputs + [WILDCARD])
            choices.select(WILDCARD)
            device.settings.map_to_output.value = choices
            device.settings.map_to_region.value = Region()

    def _device(self, index: int, use_backup: bool = False) -> Device:
        devices = self._backup if use_backup else self.devices
        if not 0 <= index < len(devices):
            raise NoSuchDeviceError(index, len(devices))
        return devices[index]

    def backup(self, index: int) -> Device:
        """The device as it was discovered. Do not modify it."""
        return self._device(index, use_backup=True)

    def document(self, index: int) -> dict:
        """A copy of the description sway gave for the device when it was discovered."""
        self._device(index)
        return copy.deepcopy(self._documents[index])

    def set_backup(self, index: int, document: dict):
        """Replace the backup of a device with one decoded from an earlier description of the same device."""
        current = self._device(index)
        device = codec.decode_device(document)
        if device is None or device.identifier != current.identifier or device.kind != current.kind:
            raise DiscoveryError(f"description does not match {current}")
        self._set_defaults(device, self.outputs)
        self._backup[index] = device
        self._documents[index] = copy.deepcopy(document)

    def apply_changes(self, index: int, use_backup: bool = False) -> List[Setting]:
        """Push every enabled setting of a device to sway, one swaymsg call per setting.

        Failing commands do not stop the others; the settings whose command
        failed are returned.
        """
        device = self._device(index, use_backup)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("apply %s%s", device, " (backup)" if use_backup else "")
        failed = []
        for setting, value in codec.setting_arguments(device):
            if not self.ipc.set_input(device.identifier, setting, value):
                failed.append(setting)
        if failed:
            logger.warning("%s: failed to apply %s", device.name, ", ".join(str(s) for s in failed))
        return failed

    def revert_changes(self, index: int, changed=()) -> List[Setting]:
        """Push the discovered settings back to sway, keeping the edited record.

        Settings that were left out of the backup still have a value there
        (the output mapping, the tool mode); that value is pushed too when
        the live record uses the setting or when it is listed in changed.
        """
        failed = self.apply_changes(index, use_backup=True)
        device = self._device(index)
        backup = self.backup(index)
        for setting in APPLY_ORDER:
            original = backup.get_setting(setting)
            if original is None or original.active or not original.has_value:
                continue
            current = device.get_setting(setting)
            if setting not in changed and not (current is not None and current.active):
                continue
            value = codec.to_string(original.value)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("reset %s %s on %s", setting, value, device)
            if not self.ipc.set_input(device.identifier, setting, value):
                failed.append(setting)
        if failed:
            logger.warning("%s: failed to revert %s", device.name, ", ".join(str(s) for s in failed))
        return failed

    def restore_backup(self, index: int, changed=()) -> List[Setting]:
        """Push the discovered settings back to sway and drop the edits made to the record."""
        failed = self.revert_changes(index, changed)
        self.devices[index] = copy.deepcopy(self._backup[index])
        return failed

    def generate_config(self, index: int, match_type: bool = False) -> str:
        return codec.config_block(self._device(index), match_type)

    def find(self, name: str) -> Optional[int]:
        """Index of the device matching an index, an identifier or a name substring."""
        try:
            index = int(name)
        except ValueError:
            pass
        else:
            if 0 <= index < len(self.devices):
                return index
        for index, device in enumerate(self.devices):
            if device.identifier == name:
                return index
        lower = name.lower()
        return next((i for i, d in enumerate(self.devices) if lower in d.name.lower()), None)

    def __getitem__(self, index: int) -> Device:
        return self._device(index)

    def __len__(self):
        return len(self.devices)

    def __iter__(self):
        yield from self.devices

    def __str__(self):
        return f"<DeviceRegistry({self.ipc!r}, {len(self.devices)} devices)>"
