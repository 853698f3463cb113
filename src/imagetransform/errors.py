"""Typed validation errors raised when transform configuration is built."""


class ImageTransformError(ValueError):
    """Base class for every imagetransform validation failure."""


class InvalidDimensions(ImageTransformError):
    """A width or height is not a positive integer."""


class InvalidThumbnailSize(InvalidDimensions):
    """The target box of a thumbnail is not a valid size."""


class InvalidSourceDimensions(InvalidDimensions):
    """The source raster handed to the thumbnail sizer has no usable size."""


class InvalidAnchor(ImageTransformError):
    """An anchor is neither a single label nor a single coordinate pair."""


class InvalidAnchorLabel(InvalidAnchor):
    """An anchor label is outside the fixed set of named positions."""


class InvalidFitPolicy(ImageTransformError):
    """A thumbnail fit policy token is outside the fixed set."""


class InvalidGamma(ImageTransformError):
    """A gamma value is not a finite, positive number."""


class InvalidBackground(ImageTransformError):
    """A background colour cannot be parsed."""


class InvalidSample(ImageTransformError):
    """A colour sample handed to the gamma corrector is not finite."""
