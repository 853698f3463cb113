"""Batch pipeline: run a transform config over a directory of images."""

import logging
from pathlib import Path

from PIL import Image
from tqdm import tqdm

from imagetransform.config import OutputConfig, TransformConfig, format_name
from imagetransform.images.process import process_file
from imagetransform.pipeline._shared import BatchResult

logger = logging.getLogger(__name__)

_FORMAT_EXTENSIONS = {"JPEG": ".jpg", "TIFF": ".tif"}


def find_images(input_dir: Path, output: OutputConfig) -> list[Path]:
    """Files directly under ``input_dir`` with one of the configured extensions, sorted."""
    extensions = {ext.lower() for ext in output.formats}
    return sorted(p for p in input_dir.iterdir() if p.is_file() and p.suffix.lower() in extensions)


def output_path_for(source: Path, output_dir: Path, output: OutputConfig) -> Path:
    """Where the processed copy of ``source`` goes."""
    if output.format:
        fmt = format_name(output.format)
        extension = _FORMAT_EXTENSIONS.get(fmt, f".{fmt.lower()}")
    else:
        extension = source.suffix
    return output_dir / f"{source.stem}{output.suffix}{extension}"


def process_directory(
    input_dir: Path,
    output_dir: Path,
    config: TransformConfig,
    skip_existing: bool = False,
    show_progress: bool = True,
) -> BatchResult:
    """
    Transform every image in a directory.

    The overlay image, if any, is read once and reused. A file that fails to
    read, transform or write is recorded in ``BatchResult.failed`` and the run
    continues with the next one.

    Args:
        input_dir: Directory with source images
        output_dir: Directory for results (created if needed)
        config: Transform configuration
        skip_existing: Leave files whose output already exists untouched
        show_progress: Show a tqdm progress bar

    Returns:
        BatchResult with processed, skipped and failed files
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    overlay = None
    if config.overlay is not None:
        with Image.open(config.overlay.path) as opened:
            overlay = opened.copy()

    sources = find_images(input_dir, config.output)
    result = BatchResult(total_found=len(sources))

    for source in tqdm(sources, desc="Processing images", disable=not show_progress):
        target = output_path_for(source, output_dir, config.output)

        if skip_existing and target.exists():
            result.skipped.append(source)
            continue

        try:
            process_file(source, target, config, overlay)
        except (OSError, ValueError) as e:
            logger.warning("Failed to process %s: %s", source, e)
            result.failed.append({"path": str(source), "error": str(e)})
            continue

        result.processed.append(target)

    return result
