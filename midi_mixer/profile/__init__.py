"""Profile model for MIDI Mixer."""

from midi_mixer.profile.profile import Group, Profile
from midi_mixer.profile.validators import FaderRangeValidator, MappingValidator

__all__ = [
    "Group",
    "Profile",
    "FaderRangeValidator",
    "MappingValidator",
]
