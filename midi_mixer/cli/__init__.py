"""Command-line interface for MIDI Mixer."""
