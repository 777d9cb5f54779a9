"""CLI utility functions for MIDI Mixer."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from midi_mixer.audio.backend import PulseAudioBackend
    from midi_mixer.midi.transport import MidiInputConnection


def _sanitize_path(path: Path) -> Path:
    """Return a normalized, absolute version of ``path``."""

    return path.expanduser().resolve()


def _configure_logging(verbose: bool) -> None:
    """Set the root log level from the ``--verbose`` flag."""

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger(__name__).debug("Verbose logging enabled")
    else:
        logging.getLogger().setLevel(logging.WARNING)


def _open_backend() -> PulseAudioBackend:
    """Connect to the audio server."""

    # pulsectl loads libpulse on import
    from midi_mixer.audio.backend import PulseAudioBackend

    return PulseAudioBackend()


def _open_midi_input() -> MidiInputConnection:
    """Initialize the MIDI driver."""

    from midi_mixer.midi.transport import MidiInputConnection

    return MidiInputConnection()


def _list_midi_ports() -> list[str]:
    """Return the MIDI input port names."""

    from midi_mixer.midi.transport import list_input_ports

    return list_input_ports()
