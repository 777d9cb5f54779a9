"""Dispatch loop: turns Control Change events into volume and mute actions."""

import logging
import threading
from enum import Enum, auto
from typing import NamedTuple

from midi_mixer.audio.resolver import SinkResolver
from midi_mixer.constants import DISPATCH_WAIT_TIMEOUT
from midi_mixer.exceptions import BackendError
from midi_mixer.midi.decoder import ControlChangeEvent
from midi_mixer.midi.state import MidiHandlerState
from midi_mixer.profile import Profile

logger = logging.getLogger(__name__)


class DispatchState(Enum):
    """Where the mixer is within a tick."""

    IDLE = auto()
    RESOLVING = auto()
    ACTING = auto()


class ActionKind(Enum):
    """Actions the mixer can take on a sink."""

    MUTE = auto()
    UNMUTE = auto()
    SET_VOLUME = auto()


class MixerAction(NamedTuple):
    """Record of one action applied to a sink."""

    kind: ActionKind
    sink_name: str
    value: float | None = None


class Mixer:
    """Apply a profile to the events arriving on a MidiHandlerState.

    Each event is looked up as a mute button and, independently, as a
    volume fader; a control bound to both roles fires both. Actions are
    at-most-once: the event has been consumed before any backend call, so a
    failing call is never retried.
    """

    def __init__(self, profile: Profile, resolver: SinkResolver, state: MidiHandlerState) -> None:
        """Initialize the mixer.

        Args:
            profile: Resolved profile to look controls up in
            resolver: Finds the live sink for a profile's sink name
            state: Shared state fed by the MIDI callback
        """
        self.profile = profile
        self.resolver = resolver
        self.midi_state = state
        self.state = DispatchState.IDLE

    def tick(self, event: ControlChangeEvent | None = None) -> list[MixerAction]:
        """Process at most one event.

        Args:
            event: Event to process; polls the shared state if None

        Returns:
            The actions applied, empty if there was nothing to do

        Raises:
            BackendError: If resolving a sink or acting on it fails
        """
        if event is None:
            event = self.midi_state.poll_if_changed()
        if event is None:
            return []

        try:
            return self._dispatch(event)
        finally:
            self.state = DispatchState.IDLE

    def _dispatch(self, event: ControlChangeEvent) -> list[MixerAction]:
        logger.debug("Event: channel=%d control=%d value=%d", event.channel, event.control, event.value)
        actions: list[MixerAction] = []

        self.state = DispatchState.RESOLVING
        mute = self.profile.get_mute(event.channel, event.control)
        if mute is not None:
            sink_name, button = mute
            if button.triggered(event.value):
                action = self._toggle_mute(sink_name)
                if action is not None:
                    actions.append(action)

        self.state = DispatchState.RESOLVING
        volume = self.profile.get_volume_control(event.channel, event.control)
        if volume is not None:
            sink_name, fader = volume
            action = self._set_volume(sink_name, fader.to_percentage(event.value))
            if action is not None:
                actions.append(action)

        return actions

    def _toggle_mute(self, sink_name: str) -> MixerAction | None:
        sink = self.resolver.resolve(sink_name)
        if sink is None:
            logger.debug("No sink named %r, skipping mute", sink_name)
            return None
        self.state = DispatchState.ACTING
        muted = sink.toggle_mute()
        logger.info("%s %s", "Muted" if muted else "Unmuted", sink.name)
        return MixerAction(ActionKind.MUTE if muted else ActionKind.UNMUTE, sink_name)

    def _set_volume(self, sink_name: str, target: float) -> MixerAction | None:
        sink = self.resolver.resolve(sink_name)
        if sink is None:
            logger.debug("No sink named %r, skipping volume", sink_name)
            return None
        self.state = DispatchState.ACTING
        sink.set_volume(target)
        logger.info("Set %s volume to %.0f%%", sink.name, target * 100)
        return MixerAction(ActionKind.SET_VOLUME, sink_name, target)

    def run(self, stop_event: threading.Event | None = None, *, timeout: float = DISPATCH_WAIT_TIMEOUT) -> None:
        """Dispatch events until ``stop_event`` is set or the state is closed.

        Blocks on the shared state between events instead of spinning.
        Backend errors are logged and the loop carries on with the next event.

        Args:
            stop_event: Set to ask the loop to return
            timeout: Seconds between checks of ``stop_event`` while idle
        """
        stop_event = stop_event or threading.Event()
        logger.debug("Dispatch loop started")
        while not stop_event.is_set() and not self.midi_state.closed:
            event = self.midi_state.wait_for_change(timeout=timeout)
            if event is None:
                continue
            try:
                self.tick(event)
            except BackendError as e:
                logger.warning("Audio backend error: %s", e)
        logger.debug("Dispatch loop stopped")
