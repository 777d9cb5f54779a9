"""Root-level pytest configuration and shared fixtures.

This module provides fixtures that are universally applicable across
all test modules. Fixtures here should be:
- Stateless or cheap to build per test
- Generic enough for reuse across unit and integration tests
- Well-documented with clear purpose
"""

from __future__ import annotations

from typing import Any

import pytest
from pytest_mock import MockerFixture

from midi_mixer.audio.protocols import SinkInfo
from midi_mixer.exceptions import SinkNotFoundError


# =============================================================================
# Fake Audio Backend
# =============================================================================

class FakeAudioBackend:
    """In-memory AudioBackend that records every call it receives."""

    def __init__(
        self,
        applications: list[SinkInfo] | None = None,
        devices: list[SinkInfo] | None = None,
    ) -> None:
        self.applications = {s.index: s for s in applications or []}
        self.devices = {s.index: s for s in devices or []}
        self.calls: list[tuple[Any, ...]] = []

    def add_application(self, index: int, name: str, volume: float = 1.0, muted: bool = False) -> None:
        self.applications[index] = SinkInfo(index, name, volume, muted)

    def add_device(self, index: int, name: str, volume: float = 1.0, muted: bool = False) -> None:
        self.devices[index] = SinkInfo(index, name, volume, muted)

    def list_applications(self) -> list[SinkInfo]:
        return list(self.applications.values())

    def list_devices(self) -> list[SinkInfo]:
        return list(self.devices.values())

    @staticmethod
    def _get(table: dict[int, SinkInfo], kind: str, index: int) -> SinkInfo:
        try:
            return table[index]
        except KeyError:
            raise SinkNotFoundError(kind, index) from None

    def get_application(self, index: int) -> SinkInfo:
        return self._get(self.applications, "application", index)

    def get_device(self, index: int) -> SinkInfo:
        return self._get(self.devices, "device", index)

    def change_application_volume(self, index: int, delta: float) -> None:
        info = self.get_application(index)
        self.calls.append(("change_application_volume", index, delta))
        self.applications[index] = info._replace(volume=max(0.0, info.volume + delta))

    def change_device_volume(self, index: int, delta: float) -> None:
        info = self.get_device(index)
        self.calls.append(("change_device_volume", index, delta))
        self.devices[index] = info._replace(volume=max(0.0, info.volume + delta))

    def set_application_mute(self, index: int, muted: bool) -> None:
        info = self.get_application(index)
        self.calls.append(("set_application_mute", index, muted))
        self.applications[index] = info._replace(muted=muted)

    def set_device_mute(self, index: int, muted: bool) -> None:
        info = self.get_device(index)
        self.calls.append(("set_device_mute", index, muted))
        self.devices[index] = info._replace(muted=muted)

    def close(self) -> None:
        self.calls.append(("close",))

    def __enter__(self) -> "FakeAudioBackend":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@pytest.fixture
def fake_backend() -> FakeAudioBackend:
    """Create an empty fake audio backend.

    Returns:
        FakeAudioBackend with no applications or devices.
    """
    return FakeAudioBackend()


# =============================================================================
# Profile Data Fixtures
# =============================================================================

@pytest.fixture
def profile_data() -> dict[str, Any]:
    """Create a raw profile document with one fader and one button group.

    Group ``browser`` (fader ch1/cc7, button ch1/cc16) maps to ``firefox``;
    group ``speakers`` (fader ch0/cc0) maps to an output device.
    """
    return {
        "midi_controller_name": "nanoKONTROL2",
        "controls": {
            "buttons": {
                "mute_browser": {"control": 16, "channel": 1, "trigger": 127},
            },
            "faders": {
                "fader_browser": {"channel": 1, "control": 7, "min": 0, "max": 127},
                "fader_speakers": {"channel": 0, "control": 0, "min": 0, "max": 127},
            },
        },
        "groups": {
            "browser": {"volume_control": ["fader_browser"], "mute": ["mute_browser"]},
            "speakers": {"volume_control": ["fader_speakers"], "mute": []},
        },
        "mapping": {
            "browser": "firefox",
            "speakers": "Built-in Audio Analog Stereo",
        },
    }


# =============================================================================
# Output Handler Fixtures
# =============================================================================

@pytest.fixture
def mock_console(mocker: MockerFixture):
    """Create a mock Rich Console for output testing.

    Returns:
        Mock object that mimics rich.console.Console interface.
    """
    return mocker.MagicMock(spec_set=["print", "log", "status"])


# =============================================================================
# Configuration Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "pydantic: Tests for Pydantic validation")
