"""MIDI input handling for MIDI Mixer.

The rtmidi-backed transport lives in :mod:`midi_mixer.midi.transport` and is
imported explicitly where a real port is opened.
"""

from midi_mixer.midi.decoder import ControlChangeEvent, decode
from midi_mixer.midi.state import MidiHandlerState

__all__ = [
    "ControlChangeEvent",
    "decode",
    "MidiHandlerState",
]
