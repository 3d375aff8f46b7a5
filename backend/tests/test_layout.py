"""
Unit tests for the layout cursor and its page-break rule.

A break happens if and only if y + required > page_height - footer_reserve.
"""

from dataclasses import replace

import pytest

from goal_report.services.canvas import PageCanvas
from goal_report.services.errors import LayoutContractError
from goal_report.services.layout import LayoutCursor, PageGeometry


def test_cursor_starts_below_header(cursor: LayoutCursor):
    assert cursor.y == cursor.geometry.margin + cursor.geometry.header_height
    assert cursor.page == 0


def test_reserve_that_fits_keeps_cursor(cursor: LayoutCursor, canvas: PageCanvas):
    reserved = cursor.reserve(100, canvas)

    assert reserved is cursor
    assert canvas.page_count == 1


def test_reserve_exactly_to_the_footer_does_not_break(cursor: LayoutCursor, canvas: PageCanvas):
    geometry = PageGeometry(width=600, height=800)   # content bottom at 720
    near_end = replace(cursor, geometry=geometry).moved_to(680)

    reserved = near_end.reserve(40, canvas)

    assert reserved.y == 680
    assert canvas.page_count == 1


def test_reserve_past_the_footer_breaks_before_drawing(cursor: LayoutCursor, canvas: PageCanvas):
    near_end = cursor.moved_to(cursor.geometry.content_bottom - 40)

    reserved = near_end.reserve(40.5, canvas)

    assert canvas.page_count == 2
    assert canvas.current_page == 1
    assert reserved.page == 1
    assert reserved.y == cursor.geometry.content_top


def test_break_draws_header_on_new_page(cursor: LayoutCursor, canvas: PageCanvas):
    cursor.moved_to(cursor.geometry.content_bottom).reserve(10, canvas)

    texts = canvas.page_texts(1)
    assert "Aivora" in texts
    assert "Goal Achievement Report" in texts
    assert "16/10/2026" in texts


def test_per_page_footer_is_stamped_when_page_closes(cursor: LayoutCursor, canvas: PageCanvas):
    chrome = replace(cursor.chrome, total_pages=2)
    closing = replace(cursor, chrome=chrome).moved_to(cursor.geometry.content_bottom)

    closing.reserve(10, canvas)

    assert "Page 1 of 2" in canvas.page_texts(0)
    assert not any(text.startswith("Page ") for text in canvas.page_texts(1))


def test_deferred_footer_is_not_stamped_on_break(cursor: LayoutCursor, canvas: PageCanvas):
    chrome = replace(cursor.chrome, footer_timing="deferred")
    closing = replace(cursor, chrome=chrome).moved_to(cursor.geometry.content_bottom)

    closing.reserve(10, canvas)

    assert not any(text.startswith("Page ") for text in canvas.page_texts(0))


def test_advance_returns_new_cursor(cursor: LayoutCursor):
    moved = cursor.advance(25)

    assert moved.y == cursor.y + 25
    assert cursor.y == cursor.geometry.content_top


def test_negative_reserve_is_a_contract_error(cursor: LayoutCursor, canvas: PageCanvas):
    with pytest.raises(LayoutContractError):
        cursor.reserve(-1, canvas)


def test_oversized_reserve_at_page_top_does_not_break(cursor: LayoutCursor, canvas: PageCanvas):
    page_room = cursor.geometry.content_bottom - cursor.geometry.content_top

    reserved = cursor.reserve(page_room + 1, canvas)

    assert reserved is cursor
    assert canvas.page_count == 1


def test_oversized_reserve_below_page_top_breaks_once(cursor: LayoutCursor, canvas: PageCanvas):
    page_room = cursor.geometry.content_bottom - cursor.geometry.content_top

    reserved = cursor.advance(10).reserve(page_room + 1, canvas)
    again = reserved.reserve(page_room + 1, canvas)

    assert canvas.page_count == 2
    assert again is reserved
