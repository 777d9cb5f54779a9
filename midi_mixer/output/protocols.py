"""The interface CLI commands report through."""

from typing import Protocol, runtime_checkable

from midi_mixer.audio.protocols import SinkInfo


@runtime_checkable
class OutputHandler(Protocol):
    """User-facing output for the CLI commands.

    Log records go through ``logging``; this is only for what the user asked
    to see (sink listings, startup status, errors that end a command).
    """

    def print(self, message: str, **kwargs) -> None:
        ...

    def info(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        """Report a failure; the caller decides the exit code."""
        ...

    def sink_table(self, title: str, sinks: list[SinkInfo]) -> None:
        """Show sinks with their index, name, volume and mute state."""
        ...
