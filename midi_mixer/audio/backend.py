"""PulseAudio backend built on pulsectl."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import pulsectl

from midi_mixer.audio.protocols import SinkInfo
from midi_mixer.constants import PULSE_CLIENT_NAME
from midi_mixer.exceptions import BackendConnectionError, SinkNotFoundError

logger = logging.getLogger(__name__)

# Stream properties tried in order for an application's display name
APPLICATION_NAME_PROPERTIES = (
    "application.process.binary",
    "application.name",
)


def application_name(sink_input) -> str:
    """Return the display name of a sink input (an application stream)."""
    for prop in APPLICATION_NAME_PROPERTIES:
        value = sink_input.proplist.get(prop)
        if value:
            return value
    return sink_input.name or ""


class PulseAudioBackend:
    """Control application streams and output devices through PulseAudio.

    Applications are PulseAudio sink inputs, devices are sinks. Works the
    same against PipeWire's PulseAudio server.
    """

    def __init__(self, pulse: pulsectl.Pulse | None = None, client_name: str = PULSE_CLIENT_NAME) -> None:
        """Initialize the backend.

        Args:
            pulse: Existing pulsectl client (a new one is connected if None)
            client_name: Client name announced to the audio server

        Raises:
            BackendConnectionError: If the audio server cannot be reached
        """
        if pulse is None:
            try:
                pulse = pulsectl.Pulse(client_name)
            except pulsectl.PulseError as e:
                raise BackendConnectionError(f"Could not connect to the audio server: {e}") from e
        self._pulse = pulse

    @contextmanager
    def _translate_errors(self, kind: str, index: int | None = None) -> Iterator[None]:
        try:
            yield
        except pulsectl.PulseIndexError as e:
            raise SinkNotFoundError(kind, -1 if index is None else index) from e
        except pulsectl.PulseError as e:
            raise BackendConnectionError(f"Audio server call failed for {kind}: {e}") from e

    def list_applications(self) -> list[SinkInfo]:
        with self._translate_errors("application"):
            return [
                SinkInfo(s.index, application_name(s), s.volume.value_flat, bool(s.mute))
                for s in self._pulse.sink_input_list()
            ]

    def list_devices(self) -> list[SinkInfo]:
        with self._translate_errors("device"):
            return [
                SinkInfo(s.index, s.description or s.name, s.volume.value_flat, bool(s.mute))
                for s in self._pulse.sink_list()
            ]

    def get_application(self, index: int) -> SinkInfo:
        with self._translate_errors("application", index):
            s = self._pulse.sink_input_info(index)
        return SinkInfo(s.index, application_name(s), s.volume.value_flat, bool(s.mute))

    def get_device(self, index: int) -> SinkInfo:
        with self._translate_errors("device", index):
            s = self._pulse.sink_info(index)
        return SinkInfo(s.index, s.description or s.name, s.volume.value_flat, bool(s.mute))

    def change_application_volume(self, index: int, delta: float) -> None:
        with self._translate_errors("application", index):
            self._pulse.volume_change_all_chans(self._pulse.sink_input_info(index), delta)
        logger.debug("Application %d volume changed by %+.3f", index, delta)

    def change_device_volume(self, index: int, delta: float) -> None:
        with self._translate_errors("device", index):
            self._pulse.volume_change_all_chans(self._pulse.sink_info(index), delta)
        logger.debug("Device %d volume changed by %+.3f", index, delta)

    def set_application_mute(self, index: int, muted: bool) -> None:
        with self._translate_errors("application", index):
            self._pulse.sink_input_mute(index, muted)

    def set_device_mute(self, index: int, muted: bool) -> None:
        with self._translate_errors("device", index):
            self._pulse.sink_mute(index, muted)

    def close(self) -> None:
        self._pulse.close()

    def __enter__(self) -> "PulseAudioBackend":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
