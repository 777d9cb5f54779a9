"""Decoding of raw MIDI bytes into Control Change events."""

from collections.abc import Sequence
from typing import NamedTuple

from midi_mixer.constants import CONTROL_CHANGE


class ControlChangeEvent(NamedTuple):
    """A single Control Change message."""

    channel: int
    control: int
    value: int

    @classmethod
    def empty(cls) -> "ControlChangeEvent":
        """All-zero event used before anything has been received."""
        return cls(0, 0, 0)


def decode(message: bytes | Sequence[int]) -> ControlChangeEvent | None:
    """Decode a raw MIDI message.

    Args:
        message: Raw message bytes as delivered by the MIDI driver

    Returns:
        The event for a Control Change message, None for anything else
        (short messages, notes, program changes, SysEx, ...)
    """
    if len(message) < 3:
        return None

    status = message[0]
    if status & 0xF0 != CONTROL_CHANGE:
        return None

    return ControlChangeEvent(channel=status & 0x0F, control=message[1], value=message[2])
