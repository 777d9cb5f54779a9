"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
Focus on lightweight mocks and fast execution.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest


# =============================================================================
# Automatic Markers
# =============================================================================

def pytest_collection_modifyitems(items):
    """Automatically mark all tests in unit/ directory with @pytest.mark.unit."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Sample Data Factories
# =============================================================================

@pytest.fixture
def fader_data_factory():
    """Factory fixture for creating fader definition dictionaries.

    Example:
        >>> data = fader_data_factory(control=7)
        >>> assert data == {"channel": 0, "control": 7, "min": 0, "max": 127}
    """
    def _create(
        channel: int = 0,
        control: int = 0,
        min: int = 0,
        max: int = 127,
    ) -> dict[str, Any]:
        return {"channel": channel, "control": control, "min": min, "max": max}

    return _create


@pytest.fixture
def button_data_factory():
    """Factory fixture for creating button definition dictionaries."""
    def _create(
        channel: int = 0,
        control: int = 32,
        trigger: int = 127,
    ) -> dict[str, Any]:
        return {"control": control, "channel": channel, "trigger": trigger}

    return _create


@pytest.fixture
def write_profile(tmp_path: Path):
    """Factory fixture writing YAML text to a profile file.

    Returns:
        Callable taking the YAML text and returning the file path.
    """
    def _write(content: str, name: str = "midi_mixer.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
