"""Tests for overlay placement."""

import pytest
from PIL import Image

from imagetransform.errors import InvalidAnchorLabel, InvalidDimensions
from imagetransform.geometry import resolve
from imagetransform.models import Anchor, AnchorLabel, Dimensions

# base 200x100, overlay 50x30 -> free space 150 x 70
PLACEMENTS = {
    "top": (0, 0),
    "top-left": (0, 0),
    "top-center": (75, 0),
    "top-right": (150, 0),
    "left": (0, 35),
    "middle-left": (0, 35),
    "center": (75, 35),
    "middle-center": (75, 35),
    "right": (150, 35),
    "middle-right": (150, 35),
    "bottom": (0, 70),
    "bottom-left": (0, 70),
    "bottom-center": (75, 70),
    "bottom-right": (150, 70),
}


class TestResolveLabels:
    """Tests for resolve() with named anchors."""

    def test_center(self):
        """A 50x50 overlay centred on 100x100 sits at (25, 25)."""
        assert resolve(Anchor.named("center"), Dimensions(100, 100), Dimensions(50, 50)) == (25, 25)

    def test_top_right(self):
        """top-right puts the overlay flush with the right edge."""
        assert resolve(Anchor.named("top-right"), (100, 80), (20, 20)) == (80, 0)

    @pytest.mark.parametrize("label,expected", sorted(PLACEMENTS.items()))
    def test_every_label(self, label, expected):
        """Every label should place the overlay per the placement table."""
        assert resolve(Anchor.named(label), (200, 100), (50, 30)) == expected

    def test_table_covers_every_label(self):
        """No label is left without a placement."""
        assert set(PLACEMENTS) == set(AnchorLabel.values())

    def test_is_deterministic(self):
        """Calling twice with the same inputs gives the same result."""
        for label in AnchorLabel:
            first = resolve(Anchor.named(label), (123, 45), (67, 89))
            second = resolve(Anchor.named(label), (123, 45), (67, 89))
            assert first == second
            assert all(isinstance(v, int) for v in first)

    def test_rounds_half_away_from_zero(self):
        """Odd free space rounds .5 up."""
        assert resolve("center", (101, 101), (50, 50)) == (26, 26)

    def test_negative_offsets_round_away_from_zero(self):
        """An overlay larger than the base gets a negative offset."""
        assert resolve("center", (50, 50), (101, 101)) == (-26, -26)
        assert resolve("bottom-right", (50, 50), (60, 70)) == (-10, -20)

    def test_accepts_label_strings_in_any_case(self):
        """resolve should parse label strings itself."""
        assert resolve("BOTTOM-RIGHT", (100, 80), (20, 20)) == (80, 60)

    def test_unknown_label_is_rejected(self):
        """Unknown labels must not fall back to a default."""
        with pytest.raises(InvalidAnchorLabel):
            resolve("middle", (100, 80), (20, 20))

    def test_reads_sizes_from_surfaces(self):
        """Pillow images work as surfaces."""
        base = Image.new("RGB", (100, 80))
        overlay = Image.new("RGB", (20, 20))
        assert resolve("bottom-center", base, overlay) == (40, 60)

    def test_rejects_empty_surface(self):
        """A zero-sized base cannot be placed against."""
        with pytest.raises(InvalidDimensions):
            resolve("center", (0, 10), (5, 5))


class TestResolveCoordinates:
    """Tests for resolve() with explicit coordinates."""

    def test_returns_coordinates_verbatim(self):
        """Explicit coordinates ignore both sizes."""
        assert resolve(Anchor.at(10, 5), (100, 100), (50, 50)) == (10, 5)

    def test_does_not_inspect_sizes(self):
        """Sizes are not even validated for explicit coordinates."""
        assert resolve(Anchor.at(10, 5), (0, 0), None) == (10, 5)

    def test_coordinate_string(self):
        """An "x,y" string resolves to its coordinates."""
        assert resolve("3,4", (10, 10), (1, 1)) == (3, 4)
