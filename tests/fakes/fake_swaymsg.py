import copy


class FakeSwayMsg:
    """Stands in for SwayMsg, replying with canned documents and recording every input command."""

    def __init__(self, inputs=None, outputs=None, failing=()):
        self.inputs = inputs or []
        self.outputs = outputs or []
        self.failing = set(failing)
        self.commands = []

    def get_inputs(self):
        return copy.deepcopy(self.inputs)

    def get_outputs(self):
        return copy.deepcopy(self.outputs)

    def set_input(self, identifier, setting, value):
        self.commands.append((identifier, f"{setting.command_name} {value}"))
        return setting not in self.failing
