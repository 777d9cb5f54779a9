"""MIDI input transport over python-rtmidi."""

import logging
from collections.abc import Callable
from typing import Any

import rtmidi

from midi_mixer.constants import MIDI_CLIENT_NAME
from midi_mixer.exceptions import MidiConnectionError, MidiPortNotFoundError
from midi_mixer.midi.decoder import decode
from midi_mixer.midi.state import MidiHandlerState

logger = logging.getLogger(__name__)


def find_port(port_name: str, available: list[str]) -> int:
    """Return the index of the first port whose name contains ``port_name``.

    Matching is case-insensitive, since drivers decorate port names with
    client and port numbers (``"nanoKONTROL2:nanoKONTROL2 _ CTRL 20:0"``).

    Raises:
        MidiPortNotFoundError: If no port matches
    """
    wanted = port_name.strip().casefold()
    if wanted:
        for index, name in enumerate(available):
            if wanted in name.casefold():
                return index
    raise MidiPortNotFoundError(port_name, available)


class MidiInputConnection:
    """A connection to one MIDI input port feeding a :class:`MidiHandlerState`.

    Incoming messages are decoded on the driver's thread; Control Change
    events are recorded on the shared state and everything else is dropped.
    """

    def __init__(
            self,
            client_name: str = MIDI_CLIENT_NAME,
            *,
            midi_in_factory: Callable[..., Any] | None = None,
    ) -> None:
        """Initialize the MIDI driver handle.

        Args:
            client_name: Client name announced to the MIDI system
            midi_in_factory: Callable creating the rtmidi input (for testing)

        Raises:
            MidiConnectionError: If the MIDI driver cannot be initialized
        """
        factory = midi_in_factory or rtmidi.MidiIn
        try:
            self._midi_in = factory(name=client_name)
        except rtmidi.RtMidiError as e:
            raise MidiConnectionError(f"Could not initialize MIDI input: {e}") from e
        self._state: MidiHandlerState | None = None
        self.port_name: str | None = None

    def list_ports(self) -> list[str]:
        """Return the names of all available input ports."""
        return list(self._midi_in.get_ports())

    def connect(self, port_name: str, state: MidiHandlerState) -> str:
        """Open the port matching ``port_name`` and start delivering events.

        Args:
            port_name: Configured controller name (case-insensitive substring)
            state: Shared state the callback records events on

        Returns:
            The full name of the opened port

        Raises:
            MidiPortNotFoundError: If no port matches
            MidiConnectionError: If the port cannot be opened
        """
        ports = self.list_ports()
        index = find_port(port_name, ports)
        self._state = state

        try:
            self._midi_in.open_port(index, name="Midi Input Connection")
        except rtmidi.RtMidiError as e:
            raise MidiConnectionError(f"Could not open MIDI port {ports[index]}: {e}") from e

        self._midi_in.ignore_types(sysex=True, timing=True, active_sense=True)
        self._midi_in.set_callback(self._on_message)
        self.port_name = ports[index]
        logger.info("Connected to MIDI input %s", self.port_name)
        return self.port_name

    def _on_message(self, event: tuple[list[int], float], data: Any = None) -> None:
        """Driver callback: decode and record, nothing else."""
        message, _delta = event
        decoded = decode(message)
        if decoded is not None and self._state is not None:
            self._state.record(decoded)

    def close(self) -> None:
        """Stop callbacks and close the port."""
        self._midi_in.cancel_callback()
        self._midi_in.close_port()
        if self.port_name is not None:
            logger.info("Closed MIDI input %s", self.port_name)
        self.port_name = None

    def __enter__(self) -> "MidiInputConnection":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def list_input_ports() -> list[str]:
    """Return the names of all available MIDI input ports."""
    with MidiInputConnection() as connection:
        return connection.list_ports()
