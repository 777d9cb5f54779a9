"""Writing profile documents to YAML files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from midi_mixer.config.defaults import EXAMPLE_PROFILE
from midi_mixer.config.models import ProfileConfig
from midi_mixer.config.protocols import CURRENT_SCHEMA_VERSION

logger = logging.getLogger(__name__)


CONFIG_HEADER = """\
# MIDI Mixer Profile
# ==================
#
# midi_controller_name: name (or part of the name) of the MIDI input port.
#                       Matching is case-insensitive.
#
# CONTROLS SECTION
# ----------------
#   faders:  name -> {channel, control, min, max}
#            channel: MIDI channel 0-15, control: CC number 0-127
#            min/max: raw values for 0% and 100% volume (max > min)
#   buttons: name -> {channel, control, trigger}
#            trigger: the exact value that toggles mute (usually 127)
#
# GROUPS SECTION
# --------------
#   group name -> {volume_control: [fader names], mute: [button names]}
#   Every name must be defined under controls.
#
# MAPPING SECTION
# ---------------
#   group name -> sink name
#   A sink is a running application (process binary name, matched
#   case-insensitively) or an output device (description, exact match).
#   Run `midi-mixer list-sinks` to see what is available.

"""


class ConfigGenerator:
    """Write profile documents as YAML.

    Used both for the documented example written by ``init-config`` and
    for persisting a serialized :class:`~midi_mixer.profile.Profile`.
    """

    def __init__(self, profile: ProfileConfig | dict[str, Any] | None = None) -> None:
        """Initialize the config generator.

        Args:
            profile: Profile document to write (uses the example profile if None)
        """
        if profile is None:
            profile = ProfileConfig.model_validate(EXAMPLE_PROFILE)
        elif isinstance(profile, dict):
            profile = ProfileConfig.model_validate(profile)
        self.profile = profile

    def to_dict(self) -> dict[str, Any]:
        """Return the document as written to disk, ``schema_version`` first."""
        return {
            'schema_version': CURRENT_SCHEMA_VERSION,
            **self.profile.model_dump(mode='json'),
        }

    def to_yaml(self) -> str:
        """Render the document; keys keep the order they are declared in."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False, allow_unicode=True, indent=2)

    def generate(self, output_path: Path, *, include_header: bool = True) -> None:
        """Write the profile to ``output_path``, creating parent directories.

        Args:
            output_path: Destination file, overwritten if it exists
            include_header: Prefix the file with the commented schema guide

        Raises:
            OSError: If the file cannot be written
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        text = self.to_yaml()
        if include_header:
            text = CONFIG_HEADER + text
        output_path.write_text(text, encoding="utf-8")
        logger.debug("Wrote profile to %s", output_path)
