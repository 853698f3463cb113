"""Configuration loading and validation."""

import os
from pathlib import Path
from typing import Any

import dotenv
import yaml
from PIL import Image
from pydantic import BaseModel, field_validator

from imagetransform.color import GammaPair
from imagetransform.geometry import ThumbnailSpec
from imagetransform.models import Anchor

CONFIG_ENV_VAR = "IMAGETRANSFORM_CONFIG"

_FORMAT_ALIASES = {"JPG": "JPEG", "TIF": "TIFF"}


def _expand(v: Any) -> Path:
    return Path(os.path.expandvars(os.path.expanduser(str(v))))


class ThumbnailConfig(BaseModel):
    """Thumbnail step configuration."""

    width: int
    height: int
    policy: str = "fit"
    background: str | None = None

    def to_spec(self) -> ThumbnailSpec:
        return ThumbnailSpec.create(self.width, self.height, self.policy, self.background)


class OverlayConfig(BaseModel):
    """Overlay step configuration. ``position`` is a label or [x, y]."""

    path: Path
    position: str | list[int] = "top-left"

    @field_validator("path", mode="before")
    @classmethod
    def expand_path(cls, v: str) -> Path:
        """Expand environment variables and ~ in path."""
        return _expand(v)

    def to_anchor(self) -> Anchor:
        return Anchor.parse(self.position)


class GammaConfig(BaseModel):
    """Gamma step configuration."""

    input: float = 1.0
    output: float = 1.6

    def to_gamma(self) -> GammaPair:
        return GammaPair(self.input, self.output)


def format_name(value: str) -> str:
    """Pillow format name for ``value``, accepting extension spellings like ``jpg`` or ``.tif``."""
    name = value.strip().lstrip(".").upper()
    return _FORMAT_ALIASES.get(name, name)


def writable_formats() -> set[str]:
    """Format names this Pillow build can save."""
    return set(Image.registered_extensions().values()) & set(Image.SAVE)


class OutputConfig(BaseModel):
    """How results are written."""

    format: str | None = None
    quality: int = 85
    suffix: str = ""
    formats: list[str] = [".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp", ".tif", ".tiff"]

    @field_validator("format")
    @classmethod
    def known_format(cls, v: str | None) -> str | None:
        """Normalise to a Pillow format name that can be written."""
        if v is None:
            return None
        name = format_name(v)
        if name not in writable_formats():
            raise ValueError(f"Unknown output format: {v!r}")
        return name


class TransformConfig(BaseModel):
    """Full transform configuration: thumbnail -> overlay -> gamma, each optional."""

    thumbnail: ThumbnailConfig | None = None
    overlay: OverlayConfig | None = None
    gamma: GammaConfig | None = None
    output: OutputConfig = OutputConfig()

    def validate_transforms(self) -> None:
        """
        Build every configured value object once.

        Raises:
            ImageTransformError: the typed error of the first invalid step.
        """
        if self.thumbnail is not None:
            self.thumbnail.to_spec()
        if self.overlay is not None:
            self.overlay.to_anchor()
        if self.gamma is not None:
            self.gamma.to_gamma()


def load_transform_config(config_path: Path) -> TransformConfig:
    """Load a transform configuration and validate every step eagerly."""
    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping, got {type(data).__name__}: {config_path}")

    config = TransformConfig(**data)
    config.validate_transforms()
    return config


def default_config_path() -> Path | None:
    """Config path from ``IMAGETRANSFORM_CONFIG`` (environment or .env), if set."""
    dotenv.load_dotenv()
    value = os.environ.get(CONFIG_ENV_VAR)
    return _expand(value) if value else None
