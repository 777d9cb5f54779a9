"""Console-based output handler for MIDI Mixer."""

from rich.console import Console
from rich.table import Table

from midi_mixer.audio.protocols import SinkInfo


class ConsoleOutputHandler:
    """Rich Console-based output handler."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def print(self, message: str, **kwargs) -> None:
        """Print an informational message."""
        self.console.print(message, **kwargs)

    def info(self, message: str) -> None:
        """Print an informational message."""
        self.print(message)

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self.print(f"[yellow]Warning:[/yellow] {message}")

    def error(self, message: str) -> None:
        """Print an error message."""
        self.print(f"[red]Error:[/red] {message}")

    def sink_table(self, title: str, sinks: list[SinkInfo]) -> None:
        """Print sinks as an index/name/volume table."""
        table = Table(title=title, title_justify="left")
        table.add_column("Index", justify="right")
        table.add_column("Name")
        table.add_column("Volume", justify="right")
        table.add_column("Muted")
        for sink in sinks:
            table.add_row(
                str(sink.index),
                sink.name,
                f"{sink.volume * 100:.0f}%",
                "yes" if sink.muted else "",
            )
        self.console.print(table)
