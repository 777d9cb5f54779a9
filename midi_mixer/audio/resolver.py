"""Resolution of logical sink names to live applications and devices."""

from midi_mixer.audio.protocols import AudioBackend
from midi_mixer.audio.sinks import ControllableSink, SinkKind


def normalize_application_name(name: str) -> str:
    """Fold an application name for comparison.

    Backends may pad process names with NUL bytes and vary their casing.
    """
    return name.strip().rstrip("\0").strip().casefold()


class SinkResolver:
    """Find the application or device a profile's sink name refers to.

    Applications are looked up first, by case-insensitive name with
    surrounding whitespace and NUL padding ignored. Devices are matched by
    exact description. The live lists are fetched on every call.
    """

    def __init__(self, backend: AudioBackend) -> None:
        self._backend = backend

    def resolve(self, sink_name: str) -> ControllableSink | None:
        """Return the sink named ``sink_name``, or None if nothing matches.

        Raises:
            BackendError: If the backend cannot list its sinks
        """
        wanted = normalize_application_name(sink_name)
        for app in self._backend.list_applications():
            if normalize_application_name(app.name) == wanted:
                return ControllableSink(SinkKind.APPLICATION, app.index, app.name, self._backend)

        for device in self._backend.list_devices():
            if device.name == sink_name:
                return ControllableSink(SinkKind.DEVICE, device.index, device.name, self._backend)

        return None
