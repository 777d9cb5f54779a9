"""Validation utilities applied while building a Profile."""

from collections.abc import Iterable, Mapping

from midi_mixer.controls import Fader
from midi_mixer.exceptions import GroupNotFoundError, InvalidFaderRangeError


class FaderRangeValidator:
    """Validates that every fader can be converted to a percentage."""

    def validate(self, faders: Mapping[str, Fader]) -> None:
        """Reject faders whose ``max`` does not exceed ``min``."""
        for name, fader in faders.items():
            if fader.max <= fader.min:
                raise InvalidFaderRangeError(name, fader.min, fader.max)


class MappingValidator:
    """Validates that the mapping table only names known groups."""

    def validate(self, mapping: Mapping[str, str], group_names: Iterable[str]) -> None:
        known = set(group_names)
        for group_name in mapping:
            if group_name not in known:
                raise GroupNotFoundError(group_name)
