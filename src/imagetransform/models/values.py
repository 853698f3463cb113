from __future__ import annotations

import numbers
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from PIL import ImageColor

from imagetransform.errors import (
    InvalidAnchor,
    InvalidAnchorLabel,
    InvalidBackground,
    InvalidDimensions,
    InvalidFitPolicy,
)


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class Dimensions:
    """Width and height of a raster, both strictly positive."""

    width: int
    height: int

    def __post_init__(self) -> None:
        self._check(self.width, self.height, InvalidDimensions)
        object.__setattr__(self, "width", int(self.width))
        object.__setattr__(self, "height", int(self.height))

    @staticmethod
    def _check(width: Any, height: Any, error: type[InvalidDimensions]) -> None:
        for name, value in (("width", width), ("height", height)):
            if not _is_int(value) or value <= 0:
                raise error(f"{name} must be a positive integer, got: {value!r}")

    @classmethod
    def coerce(cls, value: Any, error: type[InvalidDimensions] = InvalidDimensions) -> Dimensions:
        """
        Build Dimensions from another Dimensions, a (width, height) pair or a surface.

        Any object exposing ``width`` and ``height`` attributes is accepted as a
        surface, which includes ``PIL.Image.Image``.

        Raises:
            error: if the value has no usable positive width/height.
        """
        if isinstance(value, Dimensions):
            return value

        if hasattr(value, "width") and hasattr(value, "height"):
            width, height = value.width, value.height
        elif isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
            width, height = value
        else:
            raise error(f"Expected (width, height) or a surface, got: {value!r}")

        cls._check(width, height, error)
        return cls(width, height)

    @classmethod
    def parse(cls, text: str, error: type[InvalidDimensions] = InvalidDimensions) -> Dimensions:
        """Parse a ``WIDTHxHEIGHT`` string such as ``"640x480"``."""
        parts = text.lower().replace(" ", "").split("x")
        if len(parts) != 2:
            raise error(f"Expected WIDTHxHEIGHT, got: {text!r}")
        try:
            width, height = int(parts[0]), int(parts[1])
        except ValueError:
            raise error(f"Expected WIDTHxHEIGHT, got: {text!r}") from None
        return cls.coerce((width, height), error)

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def as_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class AnchorLabel(str, Enum):
    """Named positions for placing one raster on top of another."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    TOP_CENTER = "top-center"

    MIDDLE_LEFT = "middle-left"
    MIDDLE_RIGHT = "middle-right"
    MIDDLE_CENTER = "middle-center"

    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"
    BOTTOM_CENTER = "bottom-center"

    @classmethod
    def values(cls) -> list[str]:
        """Get all label names as strings."""
        return [label.value for label in cls]

    @classmethod
    def parse(cls, value: Any) -> AnchorLabel:
        """
        Look up a label, ignoring case and surrounding whitespace.

        Raises:
            InvalidAnchorLabel: if the value is not one of ``values()``.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidAnchorLabel(f"Anchor label must be a string, got: {value!r}")
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise InvalidAnchorLabel(
                f"Unknown anchor label: {value!r}. Available: {', '.join(cls.values())}"
            ) from None


@dataclass(frozen=True)
class Anchor:
    """
    Where an overlay goes: either a named label or explicit (x, y) coordinates.

    Exactly one of the two representations is set. Prefer the ``named``,
    ``at`` and ``parse`` constructors over calling the class directly.

    Examples
    --------
    >>> Anchor.parse("Bottom-Right").label
    <AnchorLabel.BOTTOM_RIGHT: 'bottom-right'>
    >>> Anchor.parse([10, 5]).coordinates
    (10, 5)
    """

    label: AnchorLabel | None = None
    x: int | None = None
    y: int | None = None

    def __post_init__(self) -> None:
        has_coordinates = self.x is not None or self.y is not None

        if self.label is not None and has_coordinates:
            raise InvalidAnchor("An anchor takes either a label or coordinates, not both")

        if self.label is not None:
            object.__setattr__(self, "label", AnchorLabel.parse(self.label))
            return

        if not has_coordinates:
            raise InvalidAnchor("An anchor needs a label or (x, y) coordinates")

        for name, value in (("x", self.x), ("y", self.y)):
            if not _is_int(value):
                raise InvalidAnchor(f"Anchor {name} must be an integer, got: {value!r}")
        object.__setattr__(self, "x", int(self.x))
        object.__setattr__(self, "y", int(self.y))

    @classmethod
    def named(cls, label: str | AnchorLabel) -> Anchor:
        return cls(label=AnchorLabel.parse(label))

    @classmethod
    def at(cls, x: int, y: int = 0) -> Anchor:
        return cls(x=x, y=y)

    @classmethod
    def parse(cls, value: Any) -> Anchor:
        """
        Build an anchor from config or command line input.

        Accepts an Anchor, a label (any case), an ``"x,y"`` string, or a one or
        two element sequence of integers. A single coordinate sets ``x`` and
        leaves ``y`` at 0.

        Raises:
            InvalidAnchorLabel: for an unknown label.
            InvalidAnchor: for anything else that is not a valid anchor.
        """
        if isinstance(value, Anchor):
            return value

        if isinstance(value, str) and "," in value:
            try:
                coords = [int(part) for part in value.split(",")]
            except ValueError:
                raise InvalidAnchor(f"Anchor coordinates must be integers, got: {value!r}") from None
            return cls._from_coordinates(coords, value)

        if isinstance(value, str):
            return cls.named(value)

        if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            return cls._from_coordinates(list(value), value)

        raise InvalidAnchor(f"Cannot build an anchor from: {value!r}")

    @classmethod
    def _from_coordinates(cls, coords: list[Any], original: Any) -> Anchor:
        if len(coords) == 1:
            return cls.at(coords[0])
        if len(coords) == 2:
            return cls.at(coords[0], coords[1])
        raise InvalidAnchor(f"Anchor coordinates take one or two values, got: {original!r}")

    @property
    def is_explicit(self) -> bool:
        return self.label is None

    @property
    def coordinates(self) -> tuple[int, int] | None:
        if self.is_explicit:
            return (self.x, self.y)
        return None

    def __str__(self) -> str:
        if self.is_explicit:
            return f"{self.x},{self.y}"
        return self.label.value


class FitPolicy(str, Enum):
    """How a source raster is mapped onto a thumbnail's target box."""

    FIT = "fit"
    SCALE = "scale"
    INFLATE = "inflate"
    DEFLATE = "deflate"

    # Cover the box, then crop the overflow away from the named edge
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    CENTER = "center"

    @classmethod
    def values(cls) -> list[str]:
        return [policy.value for policy in cls]

    @classmethod
    def parse(cls, value: Any) -> FitPolicy:
        """
        Look up a policy, ignoring case and surrounding whitespace.

        Raises:
            InvalidFitPolicy: if the value is not one of ``values()``.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidFitPolicy(f"Fit policy must be a string, got: {value!r}")
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise InvalidFitPolicy(
                f"Unknown fit policy: {value!r}. Available: {', '.join(cls.values())}"
            ) from None

    @property
    def covers(self) -> bool:
        """True for the crop-to-fill policies."""
        return self in _COVER_POLICIES


_COVER_POLICIES = frozenset(
    {FitPolicy.LEFT, FitPolicy.RIGHT, FitPolicy.TOP, FitPolicy.BOTTOM, FitPolicy.CENTER}
)

TRANSPARENT = "transparent"


@dataclass(frozen=True)
class Background:
    """Fill colour for thumbnail padding; ``color=None`` means transparent."""

    color: tuple[int, int, int, int] | None = None

    def __post_init__(self) -> None:
        if self.color is None:
            return
        if not isinstance(self.color, Sequence) or len(self.color) != 4 or not all(_is_int(c) and 0 <= c <= 255 for c in self.color):
            raise InvalidBackground(f"Background must be an RGBA tuple of 0-255 ints, got: {self.color!r}")
        object.__setattr__(self, "color", tuple(int(c) for c in self.color))

    @classmethod
    def parse(cls, value: Any) -> Background:
        """
        Build a background from a colour string, an RGB(A) tuple or None.

        Colour strings are anything ``PIL.ImageColor.getrgb`` understands
        (``"#fff"``, ``"#ff000080"``, ``"red"``, ``"rgb(0, 0, 0)"``).
        ``None``, ``""`` and ``"transparent"`` give a transparent background.

        Raises:
            InvalidBackground: if the value is not a colour.
        """
        if isinstance(value, Background):
            return value
        if value is None:
            return cls()

        if isinstance(value, str):
            text = value.strip()
            if not text or text.lower() == TRANSPARENT:
                return cls()
            try:
                rgb = ImageColor.getrgb(text)
            except ValueError:
                raise InvalidBackground(f"Unknown background colour: {value!r}") from None
            return cls._from_channels(tuple(rgb), value)

        if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
            return cls._from_channels(tuple(value), value)

        raise InvalidBackground(f"Unknown background colour: {value!r}")

    @classmethod
    def _from_channels(cls, channels: tuple, original: Any) -> Background:
        if len(channels) == 3:
            channels = (*channels, 255)
        if len(channels) != 4:
            raise InvalidBackground(f"Background takes 3 or 4 channels, got: {original!r}")
        return cls(channels)

    @property
    def is_transparent(self) -> bool:
        return self.color is None

    @property
    def fill(self) -> tuple[int, int, int, int]:
        """RGBA value to paint the padding with."""
        return self.color if self.color is not None else (0, 0, 0, 0)

    def __str__(self) -> str:
        if self.color is None:
            return TRANSPARENT
        return "#" + "".join(f"{c:02x}" for c in self.color)
