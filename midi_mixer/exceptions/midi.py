"""MIDI transport exceptions for MIDI Mixer."""

from midi_mixer.exceptions.base import MidiMixerError


class MidiTransportError(MidiMixerError):
    """Base class for failures talking to the MIDI driver."""


class MidiPortNotFoundError(MidiTransportError):
    """Raised when no input port matches the configured controller name."""

    def __init__(self, port_name: str, available: list[str] | None = None) -> None:
        message = f"No input port found with name: {port_name}"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(message)
        self.port_name = port_name
        self.available = available or []


class MidiConnectionError(MidiTransportError):
    """Raised when the MIDI driver fails to open or connect a port."""
