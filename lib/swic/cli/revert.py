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


from sway_input.exceptions import DiscoveryError
from sway_input.exceptions import NotFoundError
from sway_input.exceptions import SwayInputError
from sway_input.settings import Setting

from swic import configuration


def run(registry, args, find_device):
    assert registry
    assert args.device

    index = find_device(registry, args.device)
    device = registry[index]
    snapshot = configuration.get_snapshot(device.identifier)
    if snapshot is None:
        raise SwayInputError(f"no changes to {device.name} recorded, nothing to revert")

    try:
        registry.set_backup(index, snapshot["device"])
        changed = [Setting.from_name(name, query=False) for name in snapshot["changed"]]
    except (DiscoveryError, NotFoundError) as e:
        raise SwayInputError(f"cannot use the saved state of {device.name}: {e}") from e

    failed = registry.restore_backup(index, changed)
    if failed:
        print("failed to restore:", ", ".join(str(s) for s in failed))
        return
    configuration.drop_snapshot(device.identifier)
    print("restored", device.name)
