"""Control definitions: the MIDI faders and buttons a profile binds."""

from pydantic import BaseModel, ConfigDict, Field


class Fader(BaseModel):
    """A continuous control mapped linearly onto a volume fraction."""

    model_config = ConfigDict(frozen=True)

    channel: int = Field(..., ge=0, le=15, description="MIDI channel (0-15)")
    control: int = Field(..., ge=0, le=127, description="Control Change number")
    min: int = Field(0, ge=0, le=127, description="Raw value at 0% volume")
    max: int = Field(127, ge=0, le=127, description="Raw value at 100% volume")

    def matches(self, channel: int, control: int) -> bool:
        """Return True if this fader listens on ``channel``/``control``."""
        return self.channel == channel and self.control == control

    def to_percentage(self, value: int) -> float:
        """Convert a raw value to a position within ``[min, max]``.

        The result is not clamped: values outside the range give fractions
        below 0.0 or above 1.0 and callers decide what to do with them.
        """
        return (value - self.min) / (self.max - self.min)


class Button(BaseModel):
    """A discrete control that fires when it sends its trigger value."""

    model_config = ConfigDict(frozen=True)

    control: int = Field(..., ge=0, le=127, description="Control Change number")
    channel: int = Field(..., ge=0, le=15, description="MIDI channel (0-15)")
    trigger: int = Field(127, ge=0, le=127, description="Value that fires the button")

    def matches(self, channel: int, control: int) -> bool:
        """Return True if this button listens on ``channel``/``control``."""
        return self.channel == channel and self.control == control

    def triggered(self, value: int) -> bool:
        """Exact match against the trigger value, not a threshold."""
        return value == self.trigger
