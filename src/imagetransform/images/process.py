"""Pillow backend: apply the geometry and colour math to real images."""

import logging
from pathlib import Path

from PIL import Image

from imagetransform.color import GammaPair, gamma_table
from imagetransform.config import OutputConfig, TransformConfig, format_name, writable_formats
from imagetransform.geometry import ThumbnailSpec, resolve
from imagetransform.models import Anchor

logger = logging.getLogger(__name__)

_IDENTITY = list(range(256))
_GAMMA_MODES = ("L", "LA", "RGB", "RGBA")


def _has_alpha(image: Image.Image) -> bool:
    return image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info)


def overlay_image(base: Image.Image, overlay: Image.Image, anchor: Anchor | str) -> Image.Image:
    """
    Composite ``overlay`` onto a copy of ``base`` at the anchor's offset.

    Parts of the overlay that fall outside the base are clipped. The overlay's
    alpha channel is respected when it has one.
    """
    left, top = resolve(anchor, base, overlay)
    result = base.copy()

    if left >= base.width or top >= base.height or left + overlay.width <= 0 or top + overlay.height <= 0:
        logger.debug("Overlay at (%d, %d) falls entirely outside %dx%d", left, top, base.width, base.height)
        return result

    if result.mode == "RGBA":
        source = overlay.convert("RGBA")
        dest = (max(0, left), max(0, top))
        result.alpha_composite(source, dest=dest, source=(max(0, -left), max(0, -top)))
    elif _has_alpha(overlay):
        source = overlay.convert("RGBA")
        result.paste(source, (left, top), source)
    else:
        result.paste(overlay, (left, top))

    return result


def thumbnail_image(image: Image.Image, spec: ThumbnailSpec) -> Image.Image:
    """Resize ``image`` to the spec's plan, padding or cropping onto the canvas."""
    plan = spec.plan(image)

    # Palette and bilevel images only resample with NEAREST
    if image.mode in ("P", "1"):
        image = image.convert("RGBA" if _has_alpha(image) else "RGB")

    if image.size == plan.draw.as_tuple():
        resized = image.copy()
    else:
        resized = image.resize(plan.draw.as_tuple(), Image.Resampling.LANCZOS)

    if plan.canvas == plan.draw and plan.offset == (0, 0):
        return resized

    background = spec.background
    mode = "RGBA" if background.fill[3] < 255 or _has_alpha(resized) else "RGB"
    fill = background.fill if mode == "RGBA" else background.fill[:3]

    canvas = Image.new(mode, plan.canvas.as_tuple(), fill)
    return overlay_image(canvas, resized.convert(mode), Anchor.at(*plan.offset))


def gamma_image(image: Image.Image, gamma: GammaPair) -> Image.Image:
    """Gamma-correct every colour band; alpha is left as is."""
    if image.mode not in _GAMMA_MODES:
        image = image.convert("RGBA" if _has_alpha(image) else "RGB")

    if gamma.is_identity:
        return image.copy()

    table = gamma_table(gamma)
    lut: list[int] = []
    for band in image.getbands():
        lut.extend(_IDENTITY if band == "A" else table)

    return image.point(lut)


def apply_transforms(
    image: Image.Image,
    config: TransformConfig,
    overlay: Image.Image | None = None,
) -> Image.Image:
    """
    Run the configured steps in order: thumbnail, overlay, gamma.

    Args:
        image: Source image
        config: Transform configuration
        overlay: Preloaded overlay image; read from ``config.overlay.path`` if omitted

    Returns:
        A new image; ``image`` is not modified
    """
    result = image

    if config.thumbnail is not None:
        result = thumbnail_image(result, config.thumbnail.to_spec())

    if config.overlay is not None:
        if overlay is None:
            with Image.open(config.overlay.path) as opened:
                overlay = opened.copy()
        result = overlay_image(result, overlay, config.overlay.to_anchor())

    if config.gamma is not None:
        result = gamma_image(result, config.gamma.to_gamma())

    return result.copy() if result is image else result


def save_image(image: Image.Image, output_path: Path, output: OutputConfig) -> None:
    """
    Save with the configured format and quality.

    Raises:
        ValueError: if the format is not one Pillow can write
    """
    if output.format:
        image_format = format_name(output.format)
    else:
        image_format = Image.registered_extensions().get(output_path.suffix.lower(), "PNG")

    if image_format not in writable_formats():
        raise ValueError(f"Cannot write images as {image_format}: {output_path}")

    # JPEG has no alpha channel
    if image_format == "JPEG" and image.mode not in ("RGB", "L"):
        image = image.convert("RGB")

    params = {"quality": output.quality} if image_format in ("JPEG", "WEBP") else {}
    image.save(output_path, image_format, **params)


def process_file(
    input_path: Path,
    output_path: Path,
    config: TransformConfig,
    overlay: Image.Image | None = None,
) -> Path:
    """
    Open, transform and save a single image.

    Raises:
        OSError: if the image cannot be read or written
    """
    with Image.open(input_path) as img:
        img.load()
        result = apply_transforms(img, config, overlay)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    save_image(result, output_path, config.output)
    logger.info("Wrote %s (%dx%d)", output_path, result.width, result.height)
    return output_path
