"""Config module test fixtures.

Provides fixtures specific to testing Pydantic models and configuration
loading.
"""

from __future__ import annotations

import pytest

from midi_mixer.config.models import ProfileConfig


# =============================================================================
# YAML Documents
# =============================================================================

VALID_PROFILE_YAML = """\
schema_version: 1
midi_controller_name: nanoKONTROL2
controls:
  faders:
    fader_1:
      channel: 0
      control: 0
      min: 0
      max: 127
  buttons:
    mute_1:
      channel: 0
      control: 48
      trigger: 127
groups:
  music:
    volume_control: [fader_1]
    mute: [mute_1]
mapping:
  music: spotify
"""


@pytest.fixture
def valid_profile_yaml() -> str:
    """YAML text of a small but complete profile."""
    return VALID_PROFILE_YAML


@pytest.fixture
def valid_profile_config(profile_data) -> ProfileConfig:
    """Create a validated ProfileConfig from the shared profile document.

    Returns:
        ProfileConfig with two groups and their controls.
    """
    return ProfileConfig.model_validate(profile_data)
