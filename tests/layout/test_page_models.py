"""
Tests for gigsheets.layout.models

Test Coverage:
- PageCursor: page numbering and position tracking
- page_count()
"""
from gigsheets.core.models import ImageEntry
from gigsheets.layout import Footer, PageCursor, PlaceImage, StartPage, page_count


def test_cursor_starts_before_first_page():
    cursor = PageCursor(top=10)

    assert cursor.page_number == 0


def test_cursor_new_page_resets_to_top():
    # Arrange
    cursor = PageCursor(top=10)
    cursor.new_page()
    cursor.advance(50)

    # Act
    number = cursor.new_page()

    # Assert
    assert number == 2
    assert cursor.y == 10
    assert cursor.is_page_empty is True


def test_cursor_advance_marks_page_used():
    cursor = PageCursor(top=10)
    cursor.new_page()

    cursor.advance(0.5)

    assert cursor.is_page_empty is False


def test_place_image_bottom():
    op = PlaceImage(ImageEntry("a", 1, 1), x=10, y=10, width=50, height=25)

    assert op.bottom == 35


def test_page_count_counts_start_pages():
    ops = [StartPage(1), Footer(1, "x"), StartPage(2), Footer(2, "x")]

    assert page_count(ops) == 2
