"""Exception hierarchy for MIDI Mixer."""
from midi_mixer.exceptions.base import MidiMixerError, ConfigError
from midi_mixer.exceptions.config import (
    ConfigValidationError,
    FaderNotFoundError,
    ButtonNotFoundError,
    GroupNotFoundError,
    InvalidFaderRangeError,
    YAMLConfigError,
)
from midi_mixer.exceptions.midi import (
    MidiTransportError,
    MidiPortNotFoundError,
    MidiConnectionError,
)
from midi_mixer.exceptions.backend import (
    BackendError,
    SinkNotFoundError,
    BackendConnectionError,
)

__all__ = [
    "MidiMixerError",
    "ConfigError",
    "ConfigValidationError",
    "FaderNotFoundError",
    "ButtonNotFoundError",
    "GroupNotFoundError",
    "InvalidFaderRangeError",
    "YAMLConfigError",
    "MidiTransportError",
    "MidiPortNotFoundError",
    "MidiConnectionError",
    "BackendError",
    "SinkNotFoundError",
    "BackendConnectionError",
]
