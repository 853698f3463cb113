"""Overlay placement: where one raster lands on another."""

import logging

from imagetransform.geometry._rounding import round_half_away
from imagetransform.geometry.surface import Surface, dimensions_of
from imagetransform.models import Anchor, AnchorLabel, Dimensions

logger = logging.getLogger(__name__)

_START = 0.0
_MIDDLE = 0.5
_END = 1.0

# (horizontal, vertical) share of the free space placed before the overlay
_ALIGNMENT: dict[AnchorLabel, tuple[float, float]] = {
    AnchorLabel.TOP: (_START, _START),
    AnchorLabel.TOP_LEFT: (_START, _START),
    AnchorLabel.TOP_CENTER: (_MIDDLE, _START),
    AnchorLabel.TOP_RIGHT: (_END, _START),
    AnchorLabel.LEFT: (_START, _MIDDLE),
    AnchorLabel.MIDDLE_LEFT: (_START, _MIDDLE),
    AnchorLabel.CENTER: (_MIDDLE, _MIDDLE),
    AnchorLabel.MIDDLE_CENTER: (_MIDDLE, _MIDDLE),
    AnchorLabel.RIGHT: (_END, _MIDDLE),
    AnchorLabel.MIDDLE_RIGHT: (_END, _MIDDLE),
    AnchorLabel.BOTTOM: (_START, _END),
    AnchorLabel.BOTTOM_LEFT: (_START, _END),
    AnchorLabel.BOTTOM_CENTER: (_MIDDLE, _END),
    AnchorLabel.BOTTOM_RIGHT: (_END, _END),
}


def resolve(
    anchor: Anchor | AnchorLabel | str,
    base: Surface | Dimensions | tuple[int, int],
    overlay: Surface | Dimensions | tuple[int, int],
) -> tuple[int, int]:
    """
    Compute the (left, top) offset of ``overlay`` when composited onto ``base``.

    Explicit coordinates are returned as given, without looking at either size.
    For a label, the free space ``base - overlay`` is split according to the
    label and rounded half away from zero. Offsets go negative when the
    overlay is larger than the base; clipping is left to the compositor.

    Args:
        anchor: Anchor, or anything ``Anchor.parse`` accepts
        base: The surface being drawn on
        overlay: The surface being drawn

    Returns:
        (left, top) in base pixel coordinates

    Raises:
        InvalidAnchorLabel: if a label string is not a known position
        InvalidDimensions: if either size is not positive
    """
    anchor = Anchor.parse(anchor)

    if anchor.is_explicit:
        return anchor.coordinates

    base_size = dimensions_of(base)
    overlay_size = dimensions_of(overlay)

    horizontal, vertical = _ALIGNMENT[anchor.label]
    free_x = base_size.width - overlay_size.width
    free_y = base_size.height - overlay_size.height

    offset = (round_half_away(free_x * horizontal), round_half_away(free_y * vertical))
    logger.debug("Placed %s on %s at %s -> %s", overlay_size, base_size, anchor, offset)
    return offset
