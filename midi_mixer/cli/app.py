"""CLI application definition for MIDI Mixer."""

import typer

from midi_mixer.cli.commands import run, list_sinks, list_ports, init_config, validate_config

app = typer.Typer(
    add_completion=False,
    help="Control application and device volume from a MIDI controller.",
    no_args_is_help=True,
)

# Register commands
app.command(name="run", help="Run the mixer")(run)
app.command(name="list-sinks", help="List output devices and applications")(list_sinks)
app.command(name="list-ports", help="List MIDI input ports")(list_ports)
app.command(name="init-config", help="Generate an example profile")(init_config)
app.command(name="validate-config", help="Validate a profile")(validate_config)
