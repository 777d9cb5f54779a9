"""Entry point for the MIDI Mixer CLI.

This module exposes a Typer-powered command-line interface that loads a
profile, connects the MIDI controller and the audio server, and runs the
dispatch loop.
"""

from midi_mixer.cli.app import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
