"""MIDI Mixer: drive application and device volume from a MIDI controller."""

from midi_mixer.constants import VERSION

__version__ = VERSION
