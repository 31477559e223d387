import pytest

from fakes import fake_swaymsg
from fakes import sway_documents

from sway_input.registry import DeviceRegistry


@pytest.fixture
def swaymsg():
    yield fake_swaymsg.FakeSwayMsg(
        inputs=[
            sway_documents.KEYBOARD,
            sway_documents.LID_SWITCH,
            sway_documents.TOUCHPAD,
            sway_documents.POINTER,
            sway_documents.TABLET,
        ],
        outputs=sway_documents.OUTPUTS,
    )


@pytest.fixture
def registry(swaymsg):
    yield DeviceRegistry(swaymsg).discover()
