"""Base exception classes for MIDI Mixer."""


class MidiMixerError(Exception):
    """Base class for all user-facing MIDI Mixer errors."""


class ConfigError(MidiMixerError):
    """Base class for user-facing configuration errors.

    All configuration-related exceptions inherit from this class to ensure
    consistent error handling and user messaging throughout the application.
    """
