"""Configuration-related exceptions for MIDI Mixer."""

from pydantic import ValidationError

from midi_mixer.exceptions.base import ConfigError


class ConfigValidationError(ConfigError):
    """Raised when Pydantic validation fails for user data.

    This exception is raised when the profile document fails validation due
    to incorrect data types, missing required fields, or values outside the
    MIDI ranges defined in the Pydantic models.
    """

    def __init__(self, message: str, *, errors: ValidationError | None = None) -> None:
        super().__init__(message)
        self.errors = errors


class FaderNotFoundError(ConfigError):
    """Raised when a group references a fader that is not defined.

    Every name listed under a group's ``volume_control`` must exist in the
    ``controls.faders`` section of the profile.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Fader not found in config: {name}")
        self.name = name


class ButtonNotFoundError(ConfigError):
    """Raised when a group references a button that is not defined.

    Every name listed under a group's ``mute`` must exist in the
    ``controls.buttons`` section of the profile.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Button not found in config: {name}")
        self.name = name


class GroupNotFoundError(ConfigError):
    """Raised when the mapping table references an undefined group."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Group not found in config: {name}")
        self.name = name


class InvalidFaderRangeError(ConfigError):
    """Raised when a fader's ``max`` is not strictly greater than its ``min``.

    Such a fader cannot be converted to a volume fraction.
    """

    def __init__(self, name: str, minimum: int, maximum: int) -> None:
        super().__init__(
            f"Fader '{name}' has an empty range (min={minimum}, max={maximum}); max must be greater than min."
        )
        self.name = name
        self.min = minimum
        self.max = maximum


class YAMLConfigError(ConfigValidationError):
    """Exception raised for YAML configuration file errors.

    This includes:
    - File not found
    - YAML parsing errors
    - Invalid structure (missing sections, wrong types)
    - Unsupported schema version
    """
    pass
