"""Pure placement and sizing math for overlays and thumbnails."""

from imagetransform.geometry.position import resolve
from imagetransform.geometry.surface import Surface, dimensions_of
from imagetransform.geometry.thumbnail import ThumbnailPlan, ThumbnailSpec, size

__all__ = ["resolve", "size", "ThumbnailPlan", "ThumbnailSpec", "Surface", "dimensions_of"]
