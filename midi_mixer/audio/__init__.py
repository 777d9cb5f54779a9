"""Audio backend access for MIDI Mixer.

The pulsectl-backed implementation lives in :mod:`midi_mixer.audio.backend`.
"""

from midi_mixer.audio.protocols import AudioBackend, SinkInfo
from midi_mixer.audio.sinks import ControllableSink, SinkKind
from midi_mixer.audio.resolver import SinkResolver, normalize_application_name

__all__ = [
    "AudioBackend",
    "SinkInfo",
    "ControllableSink",
    "SinkKind",
    "SinkResolver",
    "normalize_application_name",
]
