"""The raster abstraction the geometry functions read sizes from."""

from typing import Protocol, runtime_checkable

from imagetransform.errors import InvalidDimensions
from imagetransform.models import Dimensions


@runtime_checkable
class Surface(Protocol):
    """
    Anything with an integer width and height.

    ``PIL.Image.Image`` satisfies this protocol as is. The geometry layer only
    ever reads these two attributes and never touches pixel storage.
    """

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...


def dimensions_of(
    surface: Surface | Dimensions | tuple[int, int],
    error: type[InvalidDimensions] = InvalidDimensions,
) -> Dimensions:
    """Read the size of a surface (or pass through a size) as Dimensions."""
    return Dimensions.coerce(surface, error)
