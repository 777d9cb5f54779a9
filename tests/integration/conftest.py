"""Integration test configuration and fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from midi_mixer.audio.resolver import SinkResolver
from midi_mixer.config import ConfigLoader
from midi_mixer.midi.decoder import decode
from midi_mixer.midi.state import MidiHandlerState
from midi_mixer.mixer import Mixer
from midi_mixer.profile import Profile


def pytest_collection_modifyitems(items):
    """Automatically mark all tests in integration/ with @pytest.mark.integration."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def profile_path(tmp_path: Path, profile_data: dict[str, Any]) -> Path:
    """Write the shared profile document to a YAML file."""
    path = tmp_path / "midi_mixer.yaml"
    path.write_text(yaml.safe_dump({"schema_version": 1, **profile_data}), encoding="utf-8")
    return path


class Pipeline:
    """Everything between raw MIDI bytes and the audio backend."""

    def __init__(self, profile: Profile, backend) -> None:
        self.state = MidiHandlerState()
        self.backend = backend
        self.mixer = Mixer(profile, SinkResolver(backend), self.state)

    def receive(self, *message: int) -> None:
        """Feed a message the way the MIDI driver callback does."""
        event = decode(message)
        if event is not None:
            self.state.record(event)


@pytest.fixture
def pipeline(profile_path: Path, fake_backend) -> Pipeline:
    """Build a pipeline from the profile file with firefox and a device running."""
    fake_backend.add_application(42, "firefox", volume=0.0)
    fake_backend.add_device(1, "Built-in Audio Analog Stereo", volume=1.0)
    profile = Profile(ConfigLoader.load_or_default(profile_path))
    return Pipeline(profile, fake_backend)
