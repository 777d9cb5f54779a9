"""Output handlers for MIDI Mixer."""

from midi_mixer.output.protocols import OutputHandler
from midi_mixer.output.console import ConsoleOutputHandler

__all__ = ["OutputHandler", "ConsoleOutputHandler"]
