"""Type aliases for MIDI Mixer configuration dictionaries."""
from typing import TypedDict


class ButtonDict(TypedDict):
    """TypedDict for button definitions."""
    control: int
    channel: int
    trigger: int


class FaderDict(TypedDict, total=False):
    """TypedDict for fader definitions."""
    channel: int
    control: int
    min: int
    max: int


class ControlsDict(TypedDict, total=False):
    """TypedDict for the ``controls`` section."""
    buttons: dict[str, ButtonDict]
    faders: dict[str, FaderDict]


class GroupDict(TypedDict, total=False):
    """TypedDict for group definitions."""
    volume_control: list[str]
    mute: list[str]


class ProfileDict(TypedDict, total=False):
    """TypedDict for a whole profile document."""
    midi_controller_name: str
    controls: ControlsDict
    groups: dict[str, GroupDict]
    mapping: dict[str, str]
