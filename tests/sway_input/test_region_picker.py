import subprocess

import pytest

from sway_input import region_picker
from sway_input.common import Region
from sway_input.exceptions import RegionPickerError


def test_pick_region(mocker):
    run = mocker.patch(
        "subprocess.run", return_value=subprocess.CompletedProcess([], 0, stdout="10 20 640 480\n", stderr="")
    )

    assert region_picker.pick_region() == Region(10, 20, 640, 480)
    run.assert_called_once_with(["slurp", "-f", "%x %y %w %h"], capture_output=True, text=True)


def test_pick_region_cancelled(mocker):
    mocker.patch(
        "subprocess.run", return_value=subprocess.CompletedProcess([], 1, stdout="", stderr="selection cancelled\n")
    )

    assert region_picker.pick_region() is None


def test_pick_region_missing(mocker):
    mocker.patch("subprocess.run", side_effect=FileNotFoundError(2, "No such file or directory"))

    with pytest.raises(RegionPickerError):
        region_picker.pick_region("no-such-picker")


@pytest.mark.parametrize("stdout", ["", "10 20 640", "10,20 640x480", "a b c d"])
def test_pick_region_bad_output(mocker, stdout):
    mocker.patch("subprocess.run", return_value=subprocess.CompletedProcess([], 0, stdout=stdout, stderr=""))

    with pytest.raises(RegionPickerError):
        region_picker.pick_region()
