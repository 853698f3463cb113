"""Overlay placement, thumbnail sizing and gamma correction for images."""

from imagetransform.color import GammaPair, correct, gamma_table
from imagetransform.errors import (
    ImageTransformError,
    InvalidAnchor,
    InvalidAnchorLabel,
    InvalidBackground,
    InvalidDimensions,
    InvalidFitPolicy,
    InvalidGamma,
    InvalidSample,
    InvalidSourceDimensions,
    InvalidThumbnailSize,
)
from imagetransform.geometry import ThumbnailPlan, ThumbnailSpec, resolve, size
from imagetransform.models import Anchor, AnchorLabel, Background, Dimensions, FitPolicy

__version__ = "0.1.0"

__all__ = [
    "Anchor",
    "AnchorLabel",
    "Background",
    "Dimensions",
    "FitPolicy",
    "GammaPair",
    "ThumbnailPlan",
    "ThumbnailSpec",
    "correct",
    "gamma_table",
    "resolve",
    "size",
    "ImageTransformError",
    "InvalidAnchor",
    "InvalidAnchorLabel",
    "InvalidBackground",
    "InvalidDimensions",
    "InvalidFitPolicy",
    "InvalidGamma",
    "InvalidSample",
    "InvalidSourceDimensions",
    "InvalidThumbnailSize",
]
