"""Shared fixtures for imagetransform tests."""

import pytest
from PIL import Image

RED = (255, 0, 0)
BLUE = (0, 0, 255)
WHITE = (255, 255, 255)


@pytest.fixture
def solid_image():
    """Factory for single-colour images."""

    def make(size=(100, 80), color=RED, mode="RGB"):
        return Image.new(mode, size, color)

    return make


@pytest.fixture
def split_image():
    """200x100 RGB image: left half red, right half blue."""
    image = Image.new("RGB", (200, 100), RED)
    image.paste(Image.new("RGB", (100, 100), BLUE), (100, 0))
    return image


@pytest.fixture
def image_dir(tmp_path, split_image):
    """Directory with two good PNGs, one corrupt PNG and one non-image file."""
    source = tmp_path / "in"
    source.mkdir()
    split_image.save(source / "a.png")
    Image.new("RGB", (60, 60), BLUE).save(source / "b.png")
    (source / "broken.png").write_bytes(b"not an image")
    (source / "notes.txt").write_text("ignored")
    return source
