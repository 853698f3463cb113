"""CLI entrypoint for imagetransform tools."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from imagetransform.errors import ImageTransformError

app = typer.Typer(
    name="imagetransform",
    help="Overlay, thumbnail and gamma transforms for images",
    no_args_is_help=True,
)
console = Console()


@contextmanager
def _reported() -> Iterator[None]:
    """Turn validation and file errors into a one-line message and exit code 1."""
    try:
        yield
    except ValidationError as e:
        problems = "; ".join(f"{'.'.join(map(str, err['loc'])) or 'config'}: {err['msg']}" for err in e.errors())
        console.print(f"[red]ValidationError: {escape(problems)}[/red]")
        raise typer.Exit(code=1) from e
    except (ImageTransformError, OSError) as e:
        console.print(f"[red]{type(e).__name__}: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
):
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def position(
    anchor: Annotated[str, typer.Argument(help="Anchor label (e.g. bottom-right) or x,y")],
    base: Annotated[str, typer.Option(help="Base size as WIDTHxHEIGHT")],
    overlay: Annotated[str, typer.Option(help="Overlay size as WIDTHxHEIGHT")],
):
    """Print where an overlay would be placed."""
    from imagetransform.geometry import resolve
    from imagetransform.models import Dimensions

    with _reported():
        left, top = resolve(anchor, Dimensions.parse(base), Dimensions.parse(overlay))

    console.print(f"left={left} top={top}")


@app.command()
def plan(
    source: Annotated[str, typer.Argument(help="Source size as WIDTHxHEIGHT")],
    target: Annotated[str, typer.Argument(help="Thumbnail size as WIDTHxHEIGHT")],
    policy: Annotated[str, typer.Option(help="Fit policy")] = "fit",
):
    """Print the geometry of a thumbnail without touching any image."""
    from imagetransform.errors import InvalidSourceDimensions, InvalidThumbnailSize
    from imagetransform.geometry import size
    from imagetransform.models import Dimensions

    with _reported():
        result = size(
            Dimensions.parse(source, InvalidSourceDimensions),
            Dimensions.parse(target, InvalidThumbnailSize),
            policy,
        )

    table = Table(title=f"Thumbnail plan ({policy.lower()})", show_header=True)
    table.add_column("Field")
    table.add_column("Value", justify="right")
    table.add_row("Draw", str(result.draw))
    table.add_row("Canvas", str(result.canvas))
    table.add_row("Offset", f"{result.offset[0]}, {result.offset[1]}")
    table.add_row("Padded", "yes" if result.is_padded else "no")
    table.add_row("Cropped", "yes" if result.is_cropped else "no")
    console.print(table)


@app.command()
def thumbnail(
    input_path: Annotated[Path, typer.Argument(help="Source image")],
    output_path: Annotated[Path, typer.Argument(help="Where to write the thumbnail")],
    width: Annotated[int, typer.Option("--width", "-w", help="Thumbnail width")] = 100,
    height: Annotated[int, typer.Option("--height", "-h", help="Thumbnail height")] = 100,
    policy: Annotated[str, typer.Option(help="Fit policy")] = "fit",
    background: Annotated[str | None, typer.Option(help="Padding colour, default transparent")] = None,
    quality: Annotated[int, typer.Option(help="JPEG/WebP quality")] = 85,
):
    """Create a thumbnail of a single image."""
    from imagetransform.config import OutputConfig, ThumbnailConfig, TransformConfig
    from imagetransform.images import process_file

    with _reported():
        config = TransformConfig(
            thumbnail=ThumbnailConfig(width=width, height=height, policy=policy, background=background),
            output=OutputConfig(quality=quality),
        )
        config.validate_transforms()
        process_file(input_path, output_path, config)

    console.print(f"[green]Thumbnail saved to {output_path}[/green]")


@app.command()
def overlay(
    base_path: Annotated[Path, typer.Argument(help="Base image")],
    overlay_path: Annotated[Path, typer.Argument(help="Image to place on top")],
    output_path: Annotated[Path, typer.Argument(help="Where to write the result")],
    position: Annotated[str, typer.Option("--position", "-p", help="Anchor label or x,y")] = "top-left",
):
    """Composite one image onto another."""
    from imagetransform.config import OverlayConfig, TransformConfig
    from imagetransform.images import process_file

    with _reported():
        config = TransformConfig(overlay=OverlayConfig(path=overlay_path, position=position))
        config.validate_transforms()
        process_file(base_path, output_path, config)

    console.print(f"[green]Overlay saved to {output_path}[/green]")


@app.command()
def gamma(
    input_path: Annotated[Path, typer.Argument(help="Source image")],
    output_path: Annotated[Path, typer.Argument(help="Where to write the result")],
    input_gamma: Annotated[float, typer.Option(help="Input gamma")] = 1.0,
    output_gamma: Annotated[float, typer.Option(help="Output gamma")] = 1.6,
):
    """Apply gamma correction to an image."""
    from imagetransform.config import GammaConfig, TransformConfig
    from imagetransform.images import process_file

    with _reported():
        config = TransformConfig(gamma=GammaConfig(input=input_gamma, output=output_gamma))
        config.validate_transforms()
        process_file(input_path, output_path, config)

    console.print(f"[green]Gamma-corrected image saved to {output_path}[/green]")


@app.command()
def process(
    input_dir: Annotated[Path, typer.Argument(help="Directory with source images")],
    output_dir: Annotated[Path, typer.Argument(help="Directory for results")],
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Transform config (default: $IMAGETRANSFORM_CONFIG)"),
    ] = None,
    skip_existing: Annotated[bool, typer.Option(help="Skip files already processed")] = False,
):
    """Run a transform config over every image in a directory."""
    from imagetransform.config import default_config_path, load_transform_config
    from imagetransform.pipeline import process_directory

    config_path = config or default_config_path()
    if config_path is None:
        console.print("[red]No config given and IMAGETRANSFORM_CONFIG is not set[/red]")
        raise typer.Exit(code=1)

    console.print(f"[bold]Loading config from {config_path}...[/bold]")
    with _reported():
        transform_config = load_transform_config(config_path)

    console.print(f"Input directory: {input_dir}")
    console.print(f"Output directory: {output_dir}\n")

    with _reported():
        results = process_directory(input_dir, output_dir, transform_config, skip_existing=skip_existing)

    console.print(f"\n[green]Processed {len(results.processed)} of {results.total_found} images[/green]")
    if results.skipped:
        console.print(f"[yellow]Skipped {len(results.skipped)} existing[/yellow]")
    if results.failed:
        console.print("\n[red]Failed:[/red]")
        for fail in results.failed[:10]:
            console.print(f"  {fail['path']}: {fail.get('error', 'Unknown')}")
        raise typer.Exit(code=1)


@app.command()
def version():
    """Show version information."""
    from imagetransform import __version__

    console.print(f"imagetransform version {__version__}")


if __name__ == "__main__":
    app()
