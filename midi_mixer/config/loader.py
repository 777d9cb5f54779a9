"""Configuration loader for MIDI Mixer."""

import logging
from pathlib import Path

from pydantic import ValidationError

from midi_mixer.config.default_source import DefaultConfigSource
from midi_mixer.config.models import ProfileConfig
from midi_mixer.config.protocols import ConfigSource
from midi_mixer.config.yaml_source import YAMLConfigSource
from midi_mixer.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Load and validate a profile document from a configuration source.

    Only the document shape and MIDI value ranges are checked here. Name
    references between controls, groups and the mapping table are resolved
    when a :class:`~midi_mixer.profile.Profile` is built from the result.

    Attributes:
        _source: Where the raw profile data comes from
    """

    def __init__(self, source: ConfigSource) -> None:
        """Initialize the configuration loader.

        Args:
            source: Configuration source to read the raw profile from
        """
        self._source = source

    @classmethod
    def from_path(cls, config_path: Path | None) -> "ConfigLoader":
        """Create a loader for a YAML file, or for built-in defaults if no path.

        Raises:
            YAMLConfigError: If ``config_path`` does not name a file
        """
        if config_path is None:
            return cls(DefaultConfigSource())
        return cls(YAMLConfigSource(config_path))

    @property
    def source_description(self) -> str:
        return self._source.source_description

    def load(self) -> ProfileConfig:
        """Return the validated profile document.

        Raises:
            ConfigValidationError: If the source cannot be read or fails validation
        """
        data, schema_version = self._source.load()
        logger.debug(
            "Loaded profile from %s (schema version %d)",
            self._source.source_description,
            schema_version,
        )
        try:
            return ProfileConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigValidationError(
                f"Invalid profile in {self._source.source_description}: {e}",
                errors=e,
            ) from e

    @staticmethod
    def load_or_default(config_path: Path | None) -> ProfileConfig:
        """Load ``config_path``, falling back to the minimal default profile.

        A missing, unreadable or malformed file is logged and replaced by the
        built-in defaults instead of aborting startup.
        """
        try:
            return ConfigLoader.from_path(config_path).load()
        except ConfigValidationError as e:
            logger.warning("%s; falling back to built-in defaults", e)
            return ConfigLoader(DefaultConfigSource()).load()
