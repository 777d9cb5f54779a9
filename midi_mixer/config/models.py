"""Pydantic models for the MIDI Mixer profile document."""

from pydantic import BaseModel, Field, field_validator

from midi_mixer.constants import DEFAULT_CONTROLLER_NAME
from midi_mixer.controls import Button, Fader


class ControlsConfig(BaseModel):
    """Named control definitions shared by every group."""

    buttons: dict[str, Button] = Field(default_factory=dict)
    faders: dict[str, Fader] = Field(default_factory=dict)


class GroupConfig(BaseModel):
    """A group as written in the profile: lists of control names."""

    volume_control: list[str] = Field(default_factory=list, description="Fader names")
    mute: list[str] = Field(default_factory=list, description="Button names")


class ProfileConfig(BaseModel):
    """User-editable profile document.

    Control references inside ``groups`` and group references inside
    ``mapping`` are plain names here; they are resolved when a
    :class:`~midi_mixer.profile.Profile` is built.
    """

    midi_controller_name: str = DEFAULT_CONTROLLER_NAME
    controls: ControlsConfig = Field(default_factory=ControlsConfig)
    groups: dict[str, GroupConfig] = Field(default_factory=dict)
    mapping: dict[str, str] = Field(default_factory=dict, description="Group name to sink name")

    @field_validator("controls", "groups", "mapping", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        # An empty YAML section (``groups:``) parses as None
        if value is None:
            return {}
        return value

    @field_validator("midi_controller_name")
    @classmethod
    def clean_controller_name(cls, value: str) -> str:
        """Trim surrounding whitespace from the controller name."""
        return value.strip()
