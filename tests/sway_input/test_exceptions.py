import pytest

from sway_input.exceptions import DiscoveryError
from sway_input.exceptions import InvalidStateError
from sway_input.exceptions import NoSuchDeviceError
from sway_input.exceptions import NotFoundError
from sway_input.exceptions import RegionPickerError
from sway_input.exceptions import SwayInputError


@pytest.mark.parametrize("error", [DiscoveryError, InvalidStateError, NotFoundError, RegionPickerError])
def test_exception_part_of_base(error):
    with pytest.raises(SwayInputError):
        raise error("Is subclass of base exception")


def test_no_such_device_error():
    e = NoSuchDeviceError(4, 4)

    assert isinstance(e, IndexError)
    assert isinstance(e, SwayInputError)
    assert e.index == 4
    assert e.count == 4
    assert str(e) == "no device at index 4 (have 4)"


def test_no_such_device_error_reason():
    expected_reason = "No device"

    e = NoSuchDeviceError(1, 0, expected_reason)

    assert str(e) == expected_reason


def test_not_found_error_is_lookup_error():
    assert isinstance(NotFoundError("x"), LookupError)
