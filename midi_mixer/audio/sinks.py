"""Uniform volume control over application streams and output devices."""

import logging
from enum import Enum

from midi_mixer.audio.protocols import AudioBackend, SinkInfo

logger = logging.getLogger(__name__)


class SinkKind(str, Enum):
    """The two kinds of controllable sink."""

    APPLICATION = "application"
    DEVICE = "device"

    def __str__(self) -> str:
        return self.value


class ControllableSink:
    """A resolved sink the mixer can set volume and mute on.

    The backend's volume API is relative, so :meth:`set_volume` reads the
    current level before every change. Backend errors propagate unchanged.
    """

    def __init__(self, kind: SinkKind, index: int, name: str, backend: AudioBackend) -> None:
        self.kind = kind
        self.index = index
        self._name = name
        self._backend = backend

    @property
    def name(self) -> str:
        """Display identity the sink was resolved by."""
        return self._name

    def _info(self) -> SinkInfo:
        if self.kind is SinkKind.APPLICATION:
            return self._backend.get_application(self.index)
        return self._backend.get_device(self.index)

    def current_volume(self) -> float:
        return self._info().volume

    def is_muted(self) -> bool:
        return self._info().muted

    def set_volume(self, target: float) -> float:
        """Move the volume to ``target`` (a fraction, 1.0 == 100%).

        Returns:
            The signed change that was requested from the backend
        """
        delta = target - self.current_volume()
        logger.debug("%s %s: volume delta %+.3f", self.kind, self._name, delta)
        if delta == 0:
            return 0.0
        if self.kind is SinkKind.APPLICATION:
            self._backend.change_application_volume(self.index, delta)
        else:
            self._backend.change_device_volume(self.index, delta)
        return delta

    def _set_mute(self, muted: bool) -> None:
        if self.kind is SinkKind.APPLICATION:
            self._backend.set_application_mute(self.index, muted)
        else:
            self._backend.set_device_mute(self.index, muted)

    def mute(self) -> None:
        self._set_mute(True)

    def unmute(self) -> None:
        self._set_mute(False)

    def toggle_mute(self) -> bool:
        """Unmute if muted, otherwise mute.

        Returns:
            The new mute state
        """
        muted = not self.is_muted()
        self._set_mute(muted)
        return muted

    def __repr__(self) -> str:
        return f"ControllableSink({self.kind.value}, index={self.index}, name={self._name!r})"
