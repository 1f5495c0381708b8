"""Gravity flags, scale modes and sizes for positioning an image inside a view."""

import enum
from dataclasses import dataclass
from typing import Union


class Gravity(enum.IntFlag):
    """Where the image sits inside the view, independent of scaling.

    Bit values match the ``imageGravity`` attribute encoding so stored
    integer masks stay compatible.
    """
    BOTTOM = 0b00000001
    CENTER_VERTICAL = 0b00000010
    TOP = 0b00000100
    LEFT = 0b00001000
    CENTER_HORIZONTAL = 0b00010000
    RIGHT = 0b00100000
    START = 0b01000000
    END = 0b10000000
    CENTER = CENTER_HORIZONTAL | CENTER_VERTICAL

    @classmethod
    def parse(cls, value: Union[str, int, "Gravity"]) -> "Gravity":
        """Resolve ``"top|left"`` style strings (or raw masks) to flags.

        Names are case-insensitive and may be joined with ``|``, ``,`` or
        whitespace. An empty string means no flags.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        if not isinstance(value, str):
            raise ValueError(f"Unknown gravity: {value!r}")
        flags = cls(0)
        for token in value.replace(",", "|").replace(" ", "|").split("|"):
            token = token.strip()
            if not token:
                continue
            try:
                flags |= cls[token.upper()]
            except KeyError:
                raise ValueError(f"Unknown gravity: {token!r}") from None
        return flags

    def to_string(self) -> str:
        """Inverse of :meth:`parse`, e.g. ``"top|left"``."""
        if self == Gravity.CENTER:
            return "center"
        names = [
            flag.name.lower() for flag in _SINGLE_FLAGS if flag in self
        ]
        return "|".join(names)


_SINGLE_FLAGS = (
    Gravity.TOP, Gravity.BOTTOM, Gravity.CENTER_VERTICAL,
    Gravity.LEFT, Gravity.RIGHT, Gravity.CENTER_HORIZONTAL,
    Gravity.START, Gravity.END,
)


class ScaleMode(enum.Enum):
    """How the image is resized to the view before gravity is applied."""
    NONE = 1    # native size, centered
    INSIDE = 2  # whole image visible, may letterbox
    CROP = 3    # whole view covered, image may overflow

    @classmethod
    def parse(cls, value: Union[str, int, "ScaleMode"]) -> "ScaleMode":
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        if not isinstance(value, str):
            raise ValueError(f"Unknown scale mode: {value!r}")
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown scale mode: {value!r}") from None


@dataclass(frozen=True)
class Size:
    """Width/height pair for a view's drawable area or an image."""
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Size must be non-negative: w={self.width}, h={self.height}"
            )

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0
