"""Tests for the immutable value types."""

import dataclasses
from types import SimpleNamespace

import pytest

from imagetransform.errors import (
    ImageTransformError,
    InvalidAnchor,
    InvalidAnchorLabel,
    InvalidBackground,
    InvalidDimensions,
    InvalidFitPolicy,
    InvalidSourceDimensions,
    InvalidThumbnailSize,
)
from imagetransform.models import Anchor, AnchorLabel, Background, Dimensions, FitPolicy


class TestDimensions:
    """Tests for Dimensions."""

    def test_holds_width_and_height(self):
        """Dimensions should expose width, height and a tuple form."""
        dims = Dimensions(640, 480)
        assert dims.as_tuple() == (640, 480)
        assert str(dims) == "640x480"

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 10), (2.5, 10), (True, 10), ("10", 10)])
    def test_rejects_non_positive_or_non_integer(self, width, height):
        """Dimensions should fail at construction for anything but positive ints."""
        with pytest.raises(InvalidDimensions):
            Dimensions(width, height)

    def test_is_immutable(self):
        """Dimensions should be frozen."""
        dims = Dimensions(1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            dims.width = 5

    def test_parse(self):
        """parse should read WIDTHxHEIGHT strings."""
        assert Dimensions.parse("640x480") == Dimensions(640, 480)
        assert Dimensions.parse(" 10 X 20 ") == Dimensions(10, 20)

    @pytest.mark.parametrize("text", ["640", "axb", "10x20x30", "0x10"])
    def test_parse_rejects_garbage(self, text):
        """parse should raise the requested error type."""
        with pytest.raises(InvalidThumbnailSize):
            Dimensions.parse(text, InvalidThumbnailSize)

    def test_coerce_from_surface(self):
        """coerce should read width/height from any surface-like object."""
        surface = SimpleNamespace(width=30, height=40)
        assert Dimensions.coerce(surface) == Dimensions(30, 40)

    def test_coerce_zero_surface_uses_given_error(self):
        """coerce should raise the caller's error type for an empty surface."""
        with pytest.raises(InvalidSourceDimensions):
            Dimensions.coerce(SimpleNamespace(width=0, height=40), InvalidSourceDimensions)

    def test_coerce_rejects_unknown_types(self):
        """coerce should not accept arbitrary values."""
        with pytest.raises(InvalidDimensions):
            Dimensions.coerce("100x100")


class TestAnchorLabel:
    """Tests for AnchorLabel parsing."""

    def test_parse_is_case_insensitive(self):
        """Labels should match regardless of case and whitespace."""
        assert AnchorLabel.parse(" Bottom-Right ") is AnchorLabel.BOTTOM_RIGHT

    @pytest.mark.parametrize("value", ["middle", "top_left", "", 3, None])
    def test_parse_rejects_unknown(self, value):
        """Unknown labels should be rejected, not defaulted."""
        with pytest.raises(InvalidAnchorLabel):
            AnchorLabel.parse(value)

    def test_has_fourteen_labels(self):
        """The label set is closed."""
        assert len(AnchorLabel.values()) == 14


class TestAnchor:
    """Tests for Anchor construction."""

    def test_named(self):
        """named should store a label and no coordinates."""
        anchor = Anchor.named("center")
        assert anchor.label is AnchorLabel.CENTER
        assert anchor.coordinates is None
        assert not anchor.is_explicit

    def test_at(self):
        """at should store coordinates and no label."""
        anchor = Anchor.at(10, 5)
        assert anchor.is_explicit
        assert anchor.coordinates == (10, 5)
        assert str(anchor) == "10,5"

    def test_parse_single_coordinate_sets_x(self):
        """A one element sequence sets x and leaves y at 0."""
        assert Anchor.parse([10]).coordinates == (10, 0)

    def test_parse_coordinate_string(self):
        """An "x,y" string should become explicit coordinates."""
        assert Anchor.parse("-4,7").coordinates == (-4, 7)

    def test_parse_label_string(self):
        """Anything else string-like should be treated as a label."""
        assert Anchor.parse("TOP-LEFT").label is AnchorLabel.TOP_LEFT

    def test_unknown_label_fails_at_construction(self):
        """Unknown labels fail when the anchor is built."""
        with pytest.raises(InvalidAnchorLabel):
            Anchor.parse("somewhere")

    @pytest.mark.parametrize("value", ["a,b", "1,2,3", [1, 2, 3], [], 4.5, {"x": 1}, b"ab", bytearray(b"ab")])
    def test_parse_rejects_bad_values(self, value):
        """Malformed anchors should fail with InvalidAnchor."""
        with pytest.raises(InvalidAnchor):
            Anchor.parse(value)

    def test_label_and_coordinates_are_exclusive(self):
        """Exactly one representation may be set."""
        with pytest.raises(InvalidAnchor):
            Anchor(label=AnchorLabel.TOP, x=1, y=1)
        with pytest.raises(InvalidAnchor):
            Anchor()

    def test_coordinates_must_be_integers(self):
        """Explicit coordinates should be ints."""
        with pytest.raises(InvalidAnchor):
            Anchor.at(1.5, 2)
        with pytest.raises(InvalidAnchor):
            Anchor(x=1)

    def test_label_error_is_an_anchor_error(self):
        """InvalidAnchorLabel should be catchable as InvalidAnchor."""
        assert issubclass(InvalidAnchorLabel, InvalidAnchor)


class TestFitPolicy:
    """Tests for FitPolicy parsing."""

    def test_parse(self):
        """Policies should match regardless of case."""
        assert FitPolicy.parse("Deflate") is FitPolicy.DEFLATE

    def test_parse_rejects_unknown(self):
        """Unknown policies should be rejected."""
        with pytest.raises(InvalidFitPolicy):
            FitPolicy.parse("stretch")

    def test_covers(self):
        """Only the edge and center policies crop to fill."""
        covering = {p for p in FitPolicy if p.covers}
        assert covering == {
            FitPolicy.LEFT,
            FitPolicy.RIGHT,
            FitPolicy.TOP,
            FitPolicy.BOTTOM,
            FitPolicy.CENTER,
        }


class TestBackground:
    """Tests for Background parsing."""

    @pytest.mark.parametrize("value", [None, "", "transparent", "TRANSPARENT"])
    def test_transparent(self, value):
        """Empty values and the sentinel should give a transparent background."""
        background = Background.parse(value)
        assert background.is_transparent
        assert background.fill == (0, 0, 0, 0)
        assert str(background) == "transparent"

    def test_hex_colours(self):
        """Hex strings should parse with and without alpha."""
        assert Background.parse("#fff").color == (255, 255, 255, 255)
        assert Background.parse("#ff000080").color == (255, 0, 0, 128)

    def test_named_colour(self):
        """Named colours should parse and print as hex."""
        assert str(Background.parse("red")) == "#ff0000ff"

    def test_tuple(self):
        """RGB tuples should get full alpha."""
        assert Background.parse((1, 2, 3)).color == (1, 2, 3, 255)

    @pytest.mark.parametrize("value", ["nope", (1, 2), 42, b"\x01\x02\x03"])
    def test_rejects_garbage(self, value):
        """Unparseable colours should fail."""
        with pytest.raises(InvalidBackground):
            Background.parse(value)

    def test_rejects_out_of_range_channels(self):
        """Channels must be 0-255."""
        with pytest.raises(InvalidBackground):
            Background((300, 0, 0, 0))


class TestErrors:
    """Tests for the error hierarchy."""

    def test_all_errors_are_value_errors(self):
        """Every typed error should be a ValueError."""
        for error in (InvalidAnchorLabel, InvalidFitPolicy, InvalidBackground, InvalidThumbnailSize):
            assert issubclass(error, ImageTransformError)
            assert issubclass(error, ValueError)
