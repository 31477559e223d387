import pytest

from fakes import fake_swaymsg
from fakes import sway_documents

from sway_input.common import Region
from sway_input.device import DeviceType
from sway_input.exceptions import DiscoveryError
from sway_input.exceptions import NoSuchDeviceError
from sway_input.registry import DeviceRegistry
from sway_input.settings import Setting


def _registry(inputs, outputs=sway_documents.OUTPUTS, failing=()):
    ipc = fake_swaymsg.FakeSwayMsg(inputs=inputs, outputs=outputs, failing=failing)
    return DeviceRegistry(ipc).discover(), ipc


def test_discover(registry):
    assert len(registry) == 4
    assert [device.kind for device in registry] == [
        DeviceType.KEYBOARD,
        DeviceType.TOUCHPAD,
        DeviceType.POINTER,
        DeviceType.TABLET_TOOL,
    ]
    assert registry.outputs == ["eDP-1", "HDMI-1"]


@pytest.mark.parametrize("kind", ["switch", "gesture", "unknown"])
def test_discover_skips(kind):
    registry, _ = _registry([dict(sway_documents.LID_SWITCH, type=kind)])

    assert len(registry) == 0


def test_discover_keyboard():
    registry, _ = _registry([sway_documents.KEYBOARD])

    keyboard = registry[0]

    assert keyboard.settings.repeat_delay.has_value
    assert keyboard.settings.repeat_delay.value == 600
    assert keyboard.settings.repeat_rate.value == 40
    assert not keyboard.settings.xkb_capslock.has_value
    assert not keyboard.settings.xkb_capslock.enabled
    assert keyboard.settings.xkb_numlock.value_or(False) is False


def test_discover_pointer_outputs():
    registry, _ = _registry([sway_documents.POINTER], outputs=[{"name": "eDP-1"}, {"name": "HDMI-1"}])

    pointer = registry[0]

    assert pointer.settings.map_to_output.value.options == ["eDP-1", "HDMI-1", "*"]
    assert pointer.settings.map_to_output.value.current() == "*"
    assert pointer.settings.map_to_output.value.selected == 2
    assert not pointer.settings.map_to_output.enabled
    assert pointer.settings.map_to_region.value == Region(0, 0, 0, 0)
    assert pointer.libinput.natural_scroll.value is True


def test_discover_tablet_defaults(registry):
    tablet = registry[3]

    assert tablet.settings.map_to_output.value.current() == "*"
    assert tablet.settings.map_to_region.value == Region()
    assert tablet.settings.tool_mode.has_value


def test_discover_outputs_not_shared(registry):
    registry[1].settings.map_to_output.value.select("HDMI-1")

    assert registry[2].settings.map_to_output.value.current() == "*"


def test_discover_skips_malformed_device():
    broken = dict(sway_documents.POINTER, scroll_factor="fast")

    registry, _ = _registry([broken, sway_documents.KEYBOARD])

    assert len(registry) == 1
    assert registry[0].kind == DeviceType.KEYBOARD


def test_discover_malformed_output():
    with pytest.raises(DiscoveryError):
        _registry([sway_documents.KEYBOARD], outputs=[{"active": True}])


def test_discover_replaces_devices(registry, swaymsg):
    registry[0].settings.repeat_delay.value = 200
    swaymsg.inputs = [sway_documents.KEYBOARD]

    registry.discover()

    assert len(registry) == 1
    assert registry[0].settings.repeat_delay.value == 600
    assert registry.backup(0).settings.repeat_delay.value == 600


def test_discover_failure_keeps_devices(registry, mocker):
    mocker.patch.object(registry.ipc, "get_inputs", side_effect=DiscoveryError("no sway"))

    with pytest.raises(DiscoveryError):
        registry.discover()

    assert len(registry) == 4


def test_backup_is_a_copy(registry):
    registry[0].settings.repeat_delay.value = 250

    assert registry.backup(0).settings.repeat_delay.value == 600


def test_apply_changes(registry, swaymsg):
    failed = registry.apply_changes(0)

    assert failed == []
    assert swaymsg.commands == [
        ("1:1:AT_Translated_Set_2_keyboard", "events enabled"),
        ("1:1:AT_Translated_Set_2_keyboard", "repeat_delay 600"),
        ("1:1:AT_Translated_Set_2_keyboard", "repeat_rate 40"),
    ]


def test_apply_changes_pointer(registry, swaymsg):
    pointer = registry[2]
    pointer.settings.map_to_output.value.select("HDMI-1")
    pointer.settings.map_to_output.enabled = True

    registry.apply_changes(2)

    assert [command for _, command in swaymsg.commands] == [
        "events enabled",
        "scroll_factor 1.000000",
        "map_to_output HDMI-1",
        "left_handed disabled",
        "natural_scroll enabled",
        "middle_emulation disabled",
        "scroll_method on_button_down",
        "scroll_button 274",
        "accel_profile flat",
        "pointer_accel -0.500000",
    ]


def test_apply_changes_out_of_range(registry, swaymsg):
    with pytest.raises(IndexError):
        registry.apply_changes(len(registry))

    assert swaymsg.commands == []


def test_apply_changes_negative_index(registry, swaymsg):
    with pytest.raises(NoSuchDeviceError):
        registry.apply_changes(-1)

    assert swaymsg.commands == []


def test_apply_changes_reports_failures(registry, swaymsg):
    swaymsg.failing = {Setting.REPEAT_DELAY}

    failed = registry.apply_changes(0)

    assert failed == [Setting.REPEAT_DELAY]
    assert len(swaymsg.commands) == 3


def test_apply_changes_skips_absent_and_disabled(registry, swaymsg):
    keyboard = registry[0]
    keyboard.settings.repeat_rate.enabled = False
    keyboard.libinput.tap_to_click.enabled = True

    registry.apply_changes(0)

    assert [command for _, command in swaymsg.commands] == ["events enabled", "repeat_delay 600"]

    keyboard.settings.repeat_rate.enabled = True
    swaymsg.commands.clear()
    registry.apply_changes(0)

    assert swaymsg.commands[-1] == ("1:1:AT_Translated_Set_2_keyboard", "repeat_rate 40")


def test_revert_changes(registry, swaymsg):
    registry[0].settings.repeat_delay.value = 250

    registry.revert_changes(0)

    assert ("1:1:AT_Translated_Set_2_keyboard", "repeat_delay 600") in swaymsg.commands
    assert registry[0].settings.repeat_delay.value == 250


def test_restore_backup(registry, swaymsg):
    before = [registry.generate_config(index) for index in range(len(registry))]
    for device in registry:
        device.libinput.send_events = False
        device.libinput.left_handed.value = True
    registry[0].settings.repeat_delay.value = 250

    for index in range(len(registry)):
        registry.restore_backup(index)

    assert [registry.generate_config(index) for index in range(len(registry))] == before
    assert ("1:1:AT_Translated_Set_2_keyboard", "repeat_delay 600") in swaymsg.commands


def test_restore_backup_does_not_share_backup(registry):
    registry.restore_backup(0)
    registry[0].settings.repeat_delay.value = 100

    assert registry.backup(0).settings.repeat_delay.value == 600


def test_revert_changes_output_mapping(registry, swaymsg):
    pointer = registry[2]
    pointer.settings.map_to_output.value.select("HDMI-1")
    pointer.settings.map_to_output.enabled = True
    registry.apply_changes(2)
    swaymsg.commands.clear()

    failed = registry.revert_changes(2)

    assert failed == []
    assert "map_to_output HDMI-1" not in [command for _, command in swaymsg.commands]
    assert swaymsg.commands[-1] == ("1133:16495:Logitech_MX_Ergo", "map_to_output *")


def test_revert_changes_tablet_mapping(registry, swaymsg):
    tablet = registry[3]
    tablet.settings.tool_mode.value.tool.select("pen")
    tablet.settings.tool_mode.value.mode.select("relative")
    tablet.settings.tool_mode.enabled = True
    tablet.settings.map_to_region.value = Region(0, 0, 1920, 1080)
    tablet.settings.map_to_region.enabled = True

    registry.revert_changes(3)

    commands = [command for _, command in swaymsg.commands]
    assert "tool_mode * absolute" in commands
    assert "map_to_region 0 0 0 0" in commands
    assert "map_to_output *" not in commands


def test_revert_changes_listed_setting(registry, swaymsg):
    registry[2].settings.map_to_output.enabled = False

    registry.revert_changes(2)
    assert "map_to_output *" not in [command for _, command in swaymsg.commands]

    registry.revert_changes(2, changed=(Setting.MAP_TO_OUTPUT,))
    assert swaymsg.commands[-1] == ("1133:16495:Logitech_MX_Ergo", "map_to_output *")


def test_revert_changes_reports_reset_failures(registry, swaymsg):
    registry[2].settings.map_to_output.enabled = True
    swaymsg.failing = {Setting.MAP_TO_OUTPUT}

    assert registry.revert_changes(2) == [Setting.MAP_TO_OUTPUT]


def test_document_is_a_copy(registry):
    document = registry.document(2)
    document["libinput"]["natural_scroll"] = "disabled"

    assert document["identifier"] == "1133:16495:Logitech_MX_Ergo"
    assert registry.document(2)["libinput"]["natural_scroll"] == "enabled"


def test_document_out_of_range(registry):
    with pytest.raises(NoSuchDeviceError):
        registry.document(4)


def test_set_backup(registry, swaymsg):
    earlier = dict(sway_documents.POINTER, libinput=dict(sway_documents.POINTER["libinput"], natural_scroll="disabled"))

    registry.set_backup(2, earlier)
    registry.restore_backup(2, changed=(Setting.MAP_TO_OUTPUT,))

    commands = [command for _, command in swaymsg.commands]
    assert "natural_scroll disabled" in commands
    assert "map_to_output *" in commands
    assert registry[2].libinput.natural_scroll.value is False
    assert registry[2].settings.map_to_output.value.options == ["eDP-1", "HDMI-1", "*"]
    assert registry.document(2)["libinput"]["natural_scroll"] == "disabled"


@pytest.mark.parametrize(
    "document",
    [
        sway_documents.TABLET,
        dict(sway_documents.POINTER, type="touchpad"),
        dict(sway_documents.POINTER, type="switch"),
    ],
)
def test_set_backup_other_device(registry, document):
    with pytest.raises(DiscoveryError):
        registry.set_backup(2, document)

    assert registry.backup(2).libinput.natural_scroll.value is True


def test_generate_config_idempotent(registry):
    for index in range(len(registry)):
        assert registry.generate_config(index) == registry.generate_config(index)


def test_generate_config_by_type():
    document = {
        "identifier": "2:7:SynPS/2_Synaptics_TouchPad",
        "name": "SynPS/2 Synaptics TouchPad",
        "type": "touchpad",
        "libinput": {"send_events": "enabled", "tap": "enabled"},
    }
    registry, _ = _registry([document])

    config = registry.generate_config(0, match_type=True)

    assert config.split("\n") == ["input type:touchpad {", "    events enabled", "    tap enabled", "}"]


def test_generate_config_tablet(registry):
    tablet = registry[3]
    tablet.settings.tool_mode.enabled = True
    tablet.settings.map_to_region.value = Region(0, 0, 1920, 1080)
    tablet.settings.map_to_region.enabled = True

    assert registry.generate_config(3) == (
        "input 1386:890:Wacom_One_by_Wacom_S_Pen {\n"
        "    events enabled\n"
        "    tool_mode * absolute\n"
        "    map_to_region 0 0 1920 1080\n"
        "    calibration_matrix 1.000000 0.000000 0.000000 0.000000 1.000000 0.000000\n"
        "}"
    )


def test_generate_config_out_of_range(registry):
    with pytest.raises(NoSuchDeviceError):
        registry.generate_config(4)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("0", 0),
        ("3", 3),
        ("1133:16495:Logitech_MX_Ergo", 2),
        ("wacom", 3),
        ("Touchpad", 1),
        ("keyboard", 0),
        ("7", None),
        ("joystick", None),
    ],
)
def test_find(registry, name, expected):
    assert registry.find(name) == expected


def test_str(registry):
    assert "4 devices" in str(registry)


def test_default_ipc():
    registry = DeviceRegistry()

    assert registry.ipc.path == "swaymsg"
    assert len(registry) == 0
