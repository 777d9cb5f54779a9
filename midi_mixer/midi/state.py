"""Edge-triggered hand-off between the MIDI callback and the dispatch loop."""

import threading

from midi_mixer.midi.decoder import ControlChangeEvent


class MidiHandlerState:
    """Latest-event holder shared by the MIDI driver thread and the mixer.

    The driver thread calls :meth:`record` for every Control Change message;
    the mixer calls :meth:`poll_if_changed` or :meth:`wait_for_change`. An
    event is reported once per change: a steady value is never re-reported,
    and if several events arrive between two reads only the latest is seen.

    All state is guarded by a single condition variable.
    """

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._previous = ControlChangeEvent.empty()
        self._last = ControlChangeEvent.empty()
        self._closed = False

    def record(self, event: ControlChangeEvent) -> None:
        """Store ``event`` as the latest message and wake the mixer.

        Safe to call from the MIDI driver thread: no I/O, no waiting beyond
        the lock.
        """
        with self._condition:
            self._last = event
            self._condition.notify_all()

    def _take_if_changed(self) -> ControlChangeEvent | None:
        # Caller holds the lock
        if self._previous == self._last:
            return None
        self._previous = self._last
        return self._last

    def poll_if_changed(self) -> ControlChangeEvent | None:
        """Return the latest event if it has not been reported yet."""
        with self._condition:
            return self._take_if_changed()

    def wait_for_change(self, timeout: float | None = None) -> ControlChangeEvent | None:
        """Block until an unreported event is available and return it.

        Args:
            timeout: Maximum seconds to wait, or None to wait indefinitely

        Returns:
            The event, or None if the timeout expired or the state was closed
        """
        with self._condition:
            self._condition.wait_for(
                lambda: self._closed or self._previous != self._last,
                timeout=timeout,
            )
            if self._closed:
                return None
            return self._take_if_changed()

    def close(self) -> None:
        """Wake every waiter; later waits return None immediately."""
        with self._condition:
            self._closed = True
            self._condition.notify_all()

    @property
    def closed(self) -> bool:
        with self._condition:
            return self._closed
