"""Profile model: binds MIDI controls to groups and groups to sinks."""

import logging
from collections.abc import Iterator, Mapping
from typing import TypeVar

from pydantic import BaseModel, ConfigDict

from midi_mixer.config.models import ControlsConfig, GroupConfig, ProfileConfig
from midi_mixer.controls import Button, Fader
from midi_mixer.exceptions import ButtonNotFoundError, FaderNotFoundError
from midi_mixer.profile.validators import FaderRangeValidator, MappingValidator

logger = logging.getLogger(__name__)

ControlT = TypeVar("ControlT", Fader, Button)


class Group(BaseModel):
    """A named bundle of faders and buttons that act on one sink."""

    model_config = ConfigDict(frozen=True)

    name: str
    volume_control: tuple[Fader, ...] = ()
    mute: tuple[Button, ...] = ()
    # Names the controls were referenced by, parallel to the tuples above
    fader_names: tuple[str, ...] = ()
    button_names: tuple[str, ...] = ()


class Profile:
    """Immutable, fully resolved view of a :class:`ProfileConfig`.

    Construction resolves every name reference and fails on the first bad
    one, so a Profile either exists completely or not at all.

    Attributes:
        controller_name: MIDI input port name to connect to
        groups: Resolved groups keyed by name
        mapping: Group name to logical sink name
    """

    def __init__(
            self,
            config: ProfileConfig,
            *,
            range_validator: FaderRangeValidator | None = None,
            mapping_validator: MappingValidator | None = None,
    ) -> None:
        """Build a profile from its configuration document.

        Args:
            config: Parsed profile document
            range_validator: Custom fader range validator (uses default if None)
            mapping_validator: Custom mapping validator (uses default if None)

        Raises:
            InvalidFaderRangeError: If a fader has ``max <= min``
            FaderNotFoundError: If a group names an undefined fader
            ButtonNotFoundError: If a group names an undefined button
            GroupNotFoundError: If the mapping names an undefined group
        """
        range_validator = range_validator or FaderRangeValidator()
        mapping_validator = mapping_validator or MappingValidator()

        # One shared instance per name; groups hold references into these
        self._faders: dict[str, Fader] = dict(config.controls.faders)
        self._buttons: dict[str, Button] = dict(config.controls.buttons)
        range_validator.validate(self._faders)

        self._groups: dict[str, Group] = {
            name: self._build_group(name, group)
            for name, group in config.groups.items()
        }

        mapping_validator.validate(config.mapping, self._groups)
        self._mapping: dict[str, str] = dict(config.mapping)
        self.controller_name = config.midi_controller_name

        logger.debug(
            "Built profile with %d faders, %d buttons, %d groups",
            len(self._faders), len(self._buttons), len(self._groups),
        )

    def _build_group(self, name: str, group: GroupConfig) -> Group:
        faders = self._lookup(group.volume_control, self._faders, FaderNotFoundError)
        buttons = self._lookup(group.mute, self._buttons, ButtonNotFoundError)
        return Group(
            name=name,
            volume_control=faders,
            mute=buttons,
            fader_names=tuple(group.volume_control),
            button_names=tuple(group.mute),
        )

    @staticmethod
    def _lookup(
            names: list[str],
            controls: Mapping[str, ControlT],
            not_found: type[FaderNotFoundError] | type[ButtonNotFoundError],
    ) -> tuple[ControlT, ...]:
        resolved = []
        for name in names:
            control = controls.get(name)
            if control is None:
                raise not_found(name)
            resolved.append(control)
        return tuple(resolved)

    @property
    def groups(self) -> Mapping[str, Group]:
        return dict(self._groups)

    @property
    def mapping(self) -> Mapping[str, str]:
        return dict(self._mapping)

    def _mapped_groups(self) -> Iterator[tuple[Group, str]]:
        """Yield (group, sink_name) in mapping order, skipping empty sink names."""
        for group_name, sink_name in self._mapping.items():
            if sink_name:
                yield self._groups[group_name], sink_name

    def get_volume_control(self, channel: int, control: int) -> tuple[str, Fader] | None:
        """Return the sink name and fader bound to ``channel``/``control``.

        Returns:
            ``(sink_name, fader)`` for the first mapped group containing a
            matching fader, or None if no mapped group has one.
        """
        for group, sink_name in self._mapped_groups():
            for fader in group.volume_control:
                if fader.matches(channel, control):
                    return sink_name, fader
        return None

    def get_mute(self, channel: int, control: int) -> tuple[str, Button] | None:
        """Return the sink name and button bound to ``channel``/``control``.

        Returns:
            ``(sink_name, button)`` for the first mapped group containing a
            matching button, or None if no mapped group has one.
        """
        for group, sink_name in self._mapped_groups():
            for button in group.mute:
                if button.matches(channel, control):
                    return sink_name, button
        return None

    def serialize(self) -> ProfileConfig:
        """Rebuild the configuration document this profile was built from.

        Groups are written back with the control names they were built from,
        so names sharing one definition, or equal definitions, stay distinct.
        """
        groups = {
            name: GroupConfig(
                volume_control=list(group.fader_names),
                mute=list(group.button_names),
            )
            for name, group in self._groups.items()
        }

        return ProfileConfig(
            midi_controller_name=self.controller_name,
            controls=ControlsConfig(faders=dict(self._faders), buttons=dict(self._buttons)),
            groups=groups,
            mapping=dict(self._mapping),
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Profile":
        """Validate a raw profile document and build a Profile from it."""
        return cls(ProfileConfig.model_validate(data))
