"""Protocol definitions for audio backends."""

from typing import NamedTuple, Protocol, runtime_checkable


class SinkInfo(NamedTuple):
    """Snapshot of one application stream or output device."""

    index: int
    name: str
    volume: float  # fraction, 1.0 == 100%
    muted: bool


@runtime_checkable
class AudioBackend(Protocol):
    """Protocol for the audio server the mixer controls.

    Implementations include:
    - PulseAudioBackend: PulseAudio / PipeWire-pulse via pulsectl

    Every method may raise SinkNotFoundError when an index no longer exists
    and BackendConnectionError when the server cannot be reached.
    """

    def list_applications(self) -> list[SinkInfo]:
        """Return the applications currently playing audio."""
        ...

    def list_devices(self) -> list[SinkInfo]:
        """Return the output devices; ``name`` is the device description."""
        ...

    def get_application(self, index: int) -> SinkInfo:
        ...

    def get_device(self, index: int) -> SinkInfo:
        ...

    def change_application_volume(self, index: int, delta: float) -> None:
        """Raise (``delta > 0``) or lower (``delta < 0``) an application's volume."""
        ...

    def change_device_volume(self, index: int, delta: float) -> None:
        """Raise (``delta > 0``) or lower (``delta < 0``) a device's volume."""
        ...

    def set_application_mute(self, index: int, muted: bool) -> None:
        ...

    def set_device_mute(self, index: int, muted: bool) -> None:
        ...
