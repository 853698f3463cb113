"""Immutable value types shared by the geometry, colour and pipeline layers."""

from imagetransform.models.values import (
    TRANSPARENT,
    Anchor,
    AnchorLabel,
    Background,
    Dimensions,
    FitPolicy,
)

__all__ = [
    "Anchor",
    "AnchorLabel",
    "Background",
    "Dimensions",
    "FitPolicy",
    "TRANSPARENT",
]
