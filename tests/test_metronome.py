import pytest

from midiworks.constants import METRONOME_CHANNEL
from midiworks.metronome import METRONOME_PROGRAM, MetronomeService, program_change


class RecordingOutput:
    def __init__(self):
        self.sent = []

    def send_message(self, message):
        self.sent.append(message)


def test_program_change_layout():
    message = program_change(42, 3)
    assert len(message) == 2
    assert message[0] >> 4 == 0xC
    assert message[0] & 0x0F == 3
    assert message[1] == 42


@pytest.mark.parametrize("program, channel", [(128, 0), (-1, 0), (0, 16), (0, -1)])
def test_program_change_rejects_out_of_range(program, channel):
    with pytest.raises(ValueError):
        program_change(program, channel)


def test_enabled_by_default():
    assert MetronomeService(RecordingOutput()).enabled is True


def test_can_be_disabled():
    service = MetronomeService(RecordingOutput())
    service.enabled = False
    assert service.enabled is False


def test_initialize_selects_woodblock_on_metronome_channel():
    output = RecordingOutput()
    MetronomeService(output).initialize()
    assert output.sent == [program_change(METRONOME_PROGRAM, METRONOME_CHANNEL)]
    assert output.sent[0][1] == 115
    assert output.sent[0][0] & 0x0F == METRONOME_CHANNEL