"""
Unit Tests for ContentBounds Model

Tests for the ContentBounds dataclass describing the content region of
a song image.
"""

import pytest

from gigsheets.core.models.bounds import ContentBounds


class TestContentBounds:
    """Tests for ContentBounds dataclass."""

    # ─────────────────────────────────────────────────────────────────────────
    # Constructor Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_init_when_valid_bounds_then_creates_bounds(self):
        """Valid bounds should be created successfully."""
        b = ContentBounds(left=10, top=5, right=110, bottom=55)
        assert (b.left, b.top, b.right, b.bottom) == (10, 5, 110, 55)

    def test_init_when_negative_offset_then_raises_error(self):
        """Negative left/top should raise ValueError."""
        with pytest.raises(ValueError, match="offsets must be >= 0"):
            ContentBounds(left=-1, top=0, right=10, bottom=10)

    def test_init_when_right_before_left_then_raises_error(self):
        """right < left should raise ValueError."""
        with pytest.raises(ValueError, match="right must be >= left"):
            ContentBounds(left=50, top=0, right=40, bottom=10)

    def test_init_when_bottom_before_top_then_raises_error(self):
        """bottom < top should raise ValueError."""
        with pytest.raises(ValueError, match="bottom must be >= top"):
            ContentBounds(left=0, top=20, right=10, bottom=10)

    # ─────────────────────────────────────────────────────────────────────────
    # Property Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_width_and_height_are_exclusive_differences(self):
        b = ContentBounds(left=10, top=5, right=110, bottom=55)
        assert b.width == 100
        assert b.height == 50

    def test_is_degenerate_when_zero_area(self):
        assert ContentBounds(5, 5, 5, 10).is_degenerate is True
        assert ContentBounds(5, 5, 10, 5).is_degenerate is True
        assert ContentBounds(5, 5, 6, 6).is_degenerate is False

    def test_full_covers_whole_image(self):
        b = ContentBounds.full(100, 50)
        assert b.covers(100, 50) is True
        assert b.as_box() == (0, 0, 100, 50)

    def test_covers_when_inset_then_false(self):
        b = ContentBounds(left=0, top=0, right=99, bottom=50)
        assert b.covers(100, 50) is False

    def test_repr(self):
        assert repr(ContentBounds(1, 2, 3, 4)) == "ContentBounds(1, 2, 3, 4)"
