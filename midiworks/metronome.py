"""Metronome state and sound set-up on the reserved channel."""

from __future__ import annotations

from typing import Protocol

from .constants import METRONOME_CHANNEL, PROGRAM_COUNT, TOTAL_CHANNELS

METRONOME_PROGRAM = 115  # woodblock: a short percussive click

_PROGRAM_CHANGE_STATUS = 0xC0


class MidiOutput(Protocol):
    def send_message(self, message: bytes) -> None: ...


def program_change(program: int, channel: int) -> bytes:
    """Build a MIDI program-change message."""
    if not 0 <= program < PROGRAM_COUNT:
        raise ValueError(f"program out of range: {program}")
    if not 0 <= channel < TOTAL_CHANNELS:
        raise ValueError(f"channel out of range: {channel}")
    return bytes((_PROGRAM_CHANGE_STATUS | channel, program))


class MetronomeService:
    """Tracks whether the metronome clicks and sets up its sound."""

    def __init__(self, output: MidiOutput, enabled: bool = True) -> None:
        self.output = output
        self.enabled = enabled

    def initialize(self) -> None:
        """Select the woodblock sound on the metronome channel."""
        self.output.send_message(program_change(METRONOME_PROGRAM, METRONOME_CHANNEL))