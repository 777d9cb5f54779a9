"""Configuration package for MIDI Mixer."""

# Re-export models
from midi_mixer.config.models import ControlsConfig, GroupConfig, ProfileConfig

# Re-export sources
from midi_mixer.config.protocols import ConfigSource, CURRENT_SCHEMA_VERSION
from midi_mixer.config.yaml_source import YAMLConfigSource
from midi_mixer.config.default_source import DefaultConfigSource

# Re-export loader, resolver and generator
from midi_mixer.config.loader import ConfigLoader
from midi_mixer.config.resolver import ConfigResolver
from midi_mixer.config.generator import ConfigGenerator

# Re-export defaults
from midi_mixer.config.defaults import MINIMAL_PROFILE, EXAMPLE_PROFILE

__all__ = [
    # Models
    "ControlsConfig",
    "GroupConfig",
    "ProfileConfig",
    # Sources
    "ConfigSource",
    "CURRENT_SCHEMA_VERSION",
    "YAMLConfigSource",
    "DefaultConfigSource",
    # Loading
    "ConfigLoader",
    "ConfigResolver",
    "ConfigGenerator",
    # Defaults
    "MINIMAL_PROFILE",
    "EXAMPLE_PROFILE",
]
