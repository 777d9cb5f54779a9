"""CLI command implementations for MIDI Mixer."""

import logging
from contextlib import ExitStack
from pathlib import Path

import typer
from rich.console import Console

from midi_mixer.audio.resolver import SinkResolver
from midi_mixer.cli.utils import (
    _configure_logging,
    _list_midi_ports,
    _open_backend,
    _open_midi_input,
    _sanitize_path,
)
from midi_mixer.config import ConfigGenerator, ConfigLoader, ConfigResolver
from midi_mixer.constants import VERSION
from midi_mixer.exceptions import MidiMixerError
from midi_mixer.midi.state import MidiHandlerState
from midi_mixer.mixer import Mixer
from midi_mixer.output import ConsoleOutputHandler, OutputHandler
from midi_mixer.profile import Profile

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Default to WARNING level
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Handle version flag callback for Typer CLI.

    Args:
        value: Whether the version flag was provided
    """
    if value:
        typer.echo(f"MIDI Mixer v{VERSION}")
        raise typer.Exit()


def _make_output() -> OutputHandler:
    """Create the handler every command reports through."""
    return ConsoleOutputHandler(Console())


def run(
        config: Path | None = typer.Option(
            None, "--config", "-c",
            exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True,
            help="Profile file (default: ./midi_mixer.yaml, then ~/.config/midi_mixer/profile.yaml)",
        ),
        version: bool = typer.Option(
            None, "--version", "-v",
            callback=version_callback,
            is_eager=True,
            is_flag=True,
            help="Show version and exit."
        ),
        verbose: bool = typer.Option(
            False, "--verbose",
            help="Enable verbose debug output"
        ),
) -> None:
    """Connect to the controller and apply the profile until interrupted."""

    _configure_logging(verbose)
    output = _make_output()

    try:
        config_path = ConfigResolver(config).resolve()
        profile = Profile(ConfigLoader.load_or_default(config_path))
        output.info(f"Loaded profile from {config_path or 'built-in defaults'}")

        # Closed in reverse: state, MIDI input, backend
        with ExitStack() as stack:
            backend = stack.enter_context(_open_backend())
            midi_input = stack.enter_context(_open_midi_input())
            state = MidiHandlerState()
            stack.callback(state.close)

            port = midi_input.connect(profile.controller_name, state)
            output.info(f"Listening on [bold]{port}[/bold] (Ctrl-C to stop)")
            mixer = Mixer(profile, SinkResolver(backend), state)
            try:
                mixer.run()
            except KeyboardInterrupt:
                output.info("Stopping")
    except (MidiMixerError, FileNotFoundError) as e:
        output.error(str(e))
        raise typer.Exit(code=1)


def list_sinks() -> None:
    """Print the output devices and applications that can be mapped."""

    output = _make_output()
    try:
        with _open_backend() as backend:
            output.sink_table("Playback Devices", backend.list_devices())
            output.sink_table("Applications", backend.list_applications())
    except MidiMixerError as e:
        output.error(str(e))
        raise typer.Exit(code=1)


def list_ports() -> None:
    """Print the available MIDI input ports."""

    output = _make_output()
    try:
        ports = _list_midi_ports()
    except MidiMixerError as e:
        output.error(str(e))
        raise typer.Exit(code=1)

    if not ports:
        output.warning("No MIDI input ports found")
        return
    for index, name in enumerate(ports):
        output.print(f"[{index}] {name}")


def init_config(
        output_path: Path | None = typer.Argument(
            None, dir_okay=False, help="Where to write the profile (default: ./midi_mixer.yaml)"
        ),
        force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write an example profile to get started with."""

    output = _make_output()
    target = _sanitize_path(output_path) if output_path else ConfigResolver.get_default_path()
    if target.exists() and not force:
        output.error(f"{target} already exists (use --force to overwrite)")
        raise typer.Exit(code=1)

    ConfigGenerator().generate(target)
    output.info(f"Wrote example profile to {target}")


def validate_config(
        config_path: Path = typer.Argument(
            ..., exists=True, dir_okay=False, readable=True, resolve_path=True,
            help="Profile file to check",
        ),
) -> None:
    """Check that a profile parses and all its references resolve."""

    output = _make_output()
    try:
        profile = Profile(ConfigLoader.from_path(config_path).load())
    except MidiMixerError as e:
        output.error(str(e))
        raise typer.Exit(code=1)

    output.info(
        f"[green]OK[/green] {config_path}: {len(profile.groups)} groups, "
        f"{len(profile.mapping)} mapped, controller '{profile.controller_name}'"
    )
