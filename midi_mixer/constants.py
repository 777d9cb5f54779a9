"""Project-wide constants for MIDI Mixer."""

VERSION = "0.1.0"

APP_NAME = "midi_mixer"

# Client names announced to the MIDI driver and the audio server
MIDI_CLIENT_NAME = "MidiMixer Input"
PULSE_CLIENT_NAME = "midi-mixer"

# Used when no configuration is available
DEFAULT_CONTROLLER_NAME = "MIDI Controller"

# MIDI status nibble for Control Change messages
CONTROL_CHANGE = 0xB0

# Seconds the dispatch loop waits before re-checking its stop flag
DISPATCH_WAIT_TIMEOUT = 0.5
