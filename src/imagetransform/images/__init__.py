"""Image processing utilities."""

from imagetransform.images.process import (
    apply_transforms,
    gamma_image,
    overlay_image,
    process_file,
    save_image,
    thumbnail_image,
)

__all__ = [
    "apply_transforms",
    "gamma_image",
    "overlay_image",
    "process_file",
    "save_image",
    "thumbnail_image",
]
