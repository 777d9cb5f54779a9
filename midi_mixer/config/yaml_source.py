"""Profile documents stored as YAML files."""

from pathlib import Path
from typing import Any

import yaml

from midi_mixer.config.protocols import CURRENT_SCHEMA_VERSION
from midi_mixer.exceptions import YAMLConfigError

# Top-level sections that must be mappings when present
MAPPING_SECTIONS = ("controls", "groups", "mapping")


def _type_name(value: Any) -> str:
    return type(value).__name__


class YAMLConfigSource:
    """ConfigSource reading one YAML profile file.

    Only the top-level shape is checked here: the document is a mapping,
    ``schema_version`` is supported, and the sections have the right
    container types. Field-level validation is left to the pydantic models.
    """

    def __init__(self, config_path: Path) -> None:
        """Use the profile at ``config_path``.

        Raises:
            YAMLConfigError: If ``config_path`` is missing or not a regular file
        """
        if not config_path.exists():
            raise YAMLConfigError(f"Configuration file not found: {config_path}")
        if not config_path.is_file():
            raise YAMLConfigError(f"Configuration path is not a file: {config_path}")
        self._config_path = config_path

    @property
    def config_path(self) -> Path:
        return self._config_path

    @property
    def source_description(self) -> str:
        return f"YAML file: {self._config_path}"

    def load(self) -> tuple[dict[str, Any], int]:
        """Parse the file and split off its schema version.

        Raises:
            YAMLConfigError: If the YAML is malformed or has the wrong shape
        """
        document = self._read()
        schema_version = self._schema_version(document.pop("schema_version", 1))
        self._check_sections(document)
        return document, schema_version

    def _read(self) -> dict[str, Any]:
        try:
            with self._config_path.open(encoding="utf-8") as f:
                document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            where = f" (line {mark.line + 1}, column {mark.column + 1})" if mark is not None else ""
            raise YAMLConfigError(f"Failed to parse YAML configuration{where}: {e}") from e
        except UnicodeDecodeError as e:
            raise YAMLConfigError(f"Configuration file is not valid UTF-8: {self._config_path} ({e.reason} at byte {e.start})") from e
        except OSError as e:
            raise YAMLConfigError(f"Cannot read configuration file {self._config_path}: {e.strerror or e}") from e

        if document is None:
            raise YAMLConfigError(f"Configuration file is empty: {self._config_path}")
        if not isinstance(document, dict):
            raise YAMLConfigError(f"Configuration must be a YAML mapping, got {_type_name(document)}")
        return document

    @staticmethod
    def _schema_version(value: Any) -> int:
        # bool is an int subclass but never a valid version
        if not isinstance(value, int) or isinstance(value, bool):
            raise YAMLConfigError(f"'schema_version' must be an integer, got {_type_name(value)}")
        if value > CURRENT_SCHEMA_VERSION:
            raise YAMLConfigError(
                f"Configuration schema version {value} is not supported "
                f"(this release reads up to {CURRENT_SCHEMA_VERSION}); please update MIDI Mixer."
            )
        return value

    @staticmethod
    def _check_sections(document: dict[str, Any]) -> None:
        for section in MAPPING_SECTIONS:
            value = document.get(section)
            if value is not None and not isinstance(value, dict):
                raise YAMLConfigError(f"'{section}' must be a mapping, got {_type_name(value)}")

        controller = document.get("midi_controller_name")
        if controller is not None and not isinstance(controller, str):
            raise YAMLConfigError(f"'midi_controller_name' must be a string, got {_type_name(controller)}")
