"""Audio backend exceptions for MIDI Mixer."""

from midi_mixer.exceptions.base import MidiMixerError


class BackendError(MidiMixerError):
    """Base class for audio backend failures.

    Raised from volume and mute operations. The dispatch loop logs these and
    keeps running.
    """


class SinkNotFoundError(BackendError):
    """Raised when an application or device index no longer exists.

    This is expected when a sink disappears between resolution and action.
    """

    def __init__(self, kind: str, index: int) -> None:
        super().__init__(f"No {kind} with index {index}")
        self.kind = kind
        self.index = index


class BackendConnectionError(BackendError):
    """Raised when the audio server cannot be reached or a call fails."""
