"""Thumbnail sizing: how a source raster maps into a target box."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from imagetransform.errors import InvalidSourceDimensions, InvalidThumbnailSize
from imagetransform.geometry._rounding import round_half_away
from imagetransform.geometry.position import resolve
from imagetransform.geometry.surface import Surface, dimensions_of
from imagetransform.models import Anchor, AnchorLabel, Background, Dimensions, FitPolicy

logger = logging.getLogger(__name__)

# Which part of the scaled image survives the crop for each cover policy
_COVER_ANCHORS: dict[FitPolicy, Anchor] = {
    FitPolicy.LEFT: Anchor.named(AnchorLabel.MIDDLE_LEFT),
    FitPolicy.RIGHT: Anchor.named(AnchorLabel.MIDDLE_RIGHT),
    FitPolicy.TOP: Anchor.named(AnchorLabel.TOP_CENTER),
    FitPolicy.BOTTOM: Anchor.named(AnchorLabel.BOTTOM_CENTER),
    FitPolicy.CENTER: Anchor.named(AnchorLabel.CENTER),
}

_FIT_ANCHOR = Anchor.named(AnchorLabel.CENTER)


@dataclass(frozen=True)
class ThumbnailPlan:
    """
    Resolved geometry of one thumbnail.

    The source is resized to ``draw`` and pasted at ``offset`` on a blank
    ``canvas``. A negative offset means the drawn image overflows the canvas
    and is cropped.
    """

    draw: Dimensions
    canvas: Dimensions
    offset: tuple[int, int] = (0, 0)

    def as_tuple(self) -> tuple[int, int, int, int, int, int]:
        """(drawW, drawH, canvasW, canvasH, offsetX, offsetY)"""
        return (*self.draw.as_tuple(), *self.canvas.as_tuple(), *self.offset)

    @property
    def is_cropped(self) -> bool:
        x, y = self.offset
        return (
            x < 0
            or y < 0
            or x + self.draw.width > self.canvas.width
            or y + self.draw.height > self.canvas.height
        )

    @property
    def is_padded(self) -> bool:
        x, y = self.offset
        return (
            x > 0
            or y > 0
            or x + self.draw.width < self.canvas.width
            or y + self.draw.height < self.canvas.height
        )


def _scaled(source: Dimensions, factor: float) -> Dimensions:
    if factor == 1.0:
        return source
    return Dimensions(
        max(1, round_half_away(source.width * factor)),
        max(1, round_half_away(source.height * factor)),
    )


def size(
    source: Surface | Dimensions | tuple[int, int],
    target: Dimensions | tuple[int, int],
    policy: FitPolicy | str = FitPolicy.FIT,
) -> ThumbnailPlan:
    """
    Work out draw size, canvas size and offset for a thumbnail.

    Args:
        source: Size of the raster being thumbnailed (or the raster itself)
        target: The thumbnail box
        policy: How the source maps onto the box

    Returns:
        ThumbnailPlan with draw, canvas and offset

    Raises:
        InvalidSourceDimensions: if the source has a zero or negative side
        InvalidThumbnailSize: if the target has a zero or negative side
        InvalidFitPolicy: if the policy is unknown
    """
    source = dimensions_of(source, InvalidSourceDimensions)
    target = Dimensions.coerce(target, InvalidThumbnailSize)
    policy = FitPolicy.parse(policy)

    scale_x = target.width / source.width
    scale_y = target.height / source.height

    if policy is FitPolicy.SCALE:
        plan = ThumbnailPlan(draw=target, canvas=target)

    elif policy is FitPolicy.FIT:
        draw = _scaled(source, min(scale_x, scale_y))
        plan = ThumbnailPlan(draw=draw, canvas=target, offset=resolve(_FIT_ANCHOR, target, draw))

    elif policy is FitPolicy.INFLATE:
        smaller = source.width < target.width and source.height < target.height
        draw = _scaled(source, min(scale_x, scale_y) if smaller else 1.0)
        plan = ThumbnailPlan(draw=draw, canvas=draw)

    elif policy is FitPolicy.DEFLATE:
        larger = source.width > target.width or source.height > target.height
        draw = _scaled(source, min(scale_x, scale_y) if larger else 1.0)
        plan = ThumbnailPlan(draw=draw, canvas=draw)

    else:
        draw = _scaled(source, max(scale_x, scale_y))
        anchor = _COVER_ANCHORS[policy]
        plan = ThumbnailPlan(draw=draw, canvas=target, offset=resolve(anchor, target, draw))

    logger.debug("Thumbnail %s -> %s (%s): %s", source, target, policy.value, plan.as_tuple())
    return plan


@dataclass(frozen=True)
class ThumbnailSpec:
    """
    Validated configuration of a thumbnail transform.

    Built once per transform; invalid sizes, policies or colours fail here
    rather than when the thumbnail is drawn.

    Examples
    --------
    >>> spec = ThumbnailSpec.create(100, 100, "fit", background="#ffffff")
    >>> spec.plan((200, 100)).as_tuple()
    (100, 50, 100, 100, 0, 25)
    """

    target: Dimensions
    policy: FitPolicy = FitPolicy.FIT
    background: Background = field(default_factory=Background)

    def __post_init__(self) -> None:
        object.__setattr__(self, "target", Dimensions.coerce(self.target, InvalidThumbnailSize))
        object.__setattr__(self, "policy", FitPolicy.parse(self.policy))
        object.__setattr__(self, "background", Background.parse(self.background))

    @classmethod
    def create(
        cls,
        width: Any,
        height: Any,
        policy: FitPolicy | str = FitPolicy.FIT,
        background: Any = None,
    ) -> ThumbnailSpec:
        return cls(target=(width, height), policy=policy, background=background)

    def plan(self, source: Surface | Dimensions | tuple[int, int]) -> ThumbnailPlan:
        return size(source, self.target, self.policy)
