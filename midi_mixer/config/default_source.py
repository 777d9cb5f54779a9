"""Default configuration source for MIDI Mixer."""

import copy
from typing import Any

from midi_mixer.config.defaults import MINIMAL_PROFILE
from midi_mixer.config.protocols import CURRENT_SCHEMA_VERSION


class DefaultConfigSource:
    """Provide the built-in minimal profile.

    Implements the ConfigSource protocol. The profile binds no controls, so a
    mixer started from it connects to the controller but never acts.
    """

    @property
    def source_description(self) -> str:
        """Human-readable description of the config source."""
        return "built-in defaults"

    def load(self) -> tuple[dict[str, Any], int]:
        """Load the built-in default profile.

        Returns:
            Tuple of (profile_data, schema_version)
        """
        return copy.deepcopy(dict(MINIMAL_PROFILE)), CURRENT_SCHEMA_VERSION
