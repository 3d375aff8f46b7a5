"""
Unit tests for the four section renderers.

Each renderer is driven with a synthetic cursor and the returned cursor
and canvas display list are checked directly.
"""

import pytest

from goal_report.schemas.report import InsightSnapshot, ProgressEntry
from goal_report.services.canvas import PageCanvas, ShapeOp, TextOp
from goal_report.services.errors import LayoutContractError
from goal_report.services.layout import LayoutCursor
from goal_report.services.sections import (
    InsightsSection,
    OverviewSection,
    ProgressTableSection,
    StatisticsSection,
)
from goal_report.services.sections.overview import CARD_GAP, CARD_HEIGHT
from goal_report.services.sections.progress_table import ROW_HEIGHT, recent_completed


def _all_texts(canvas: PageCanvas) -> list[str]:
    return [text for page in range(canvas.page_count) for text in canvas.page_texts(page)]


def _day_cells(canvas: PageCanvas, section: ProgressTableSection) -> list[int]:
    """Day numbers drawn in the table, in draw order."""
    style = section.styles["day_badge"]
    return [
        int(op.text)
        for page in range(canvas.page_count)
        for op in canvas.page_ops(page)
        if isinstance(op, TextOp) and op.style == style
    ]


# --- Overview ---

def test_overview_draws_cards_and_status(cursor, canvas, goal):
    end = OverviewSection().render(cursor, canvas, goal)

    texts = canvas.page_texts(0)
    assert "Goal Overview" in texts
    assert goal.title in texts
    assert "30 days" in texts
    assert "1.5 hours" in texts
    assert "05/01/2026" in texts
    assert "IN PROGRESS" in texts
    assert end.y > cursor.y


def test_overview_cards_share_the_row_equally(cursor, canvas, goal):
    OverviewSection().render(cursor, canvas, goal)

    cards = [
        op for op in canvas.page_ops(0)
        if isinstance(op, ShapeOp) and op.height == CARD_HEIGHT
    ]
    expected_width = (cursor.geometry.content_width - 2 * CARD_GAP) / 3
    assert len(cards) == 3
    assert all(card.width == pytest.approx(expected_width) for card in cards)
    assert len({card.y for card in cards}) == 1


def test_overview_completed_badge(cursor, canvas, goal):
    OverviewSection().render(cursor, canvas, goal.model_copy(update={"status": "completed"}))

    assert "COMPLETED" in canvas.page_texts(0)


def test_overview_without_description_draws_no_body_text(cursor, canvas, goal):
    section = OverviewSection()
    section.render(cursor, canvas, goal.model_copy(update={"description": None}))

    body = section.styles["body"]
    assert not [op for op in canvas.page_ops(0) if isinstance(op, TextOp) and op.style == body]


def test_overview_description_breaks_between_lines(cursor, canvas, goal):
    long_goal = goal.model_copy(update={"description": "Keep going every single day. " * 40})
    start = cursor.moved_to(cursor.geometry.content_bottom - 150)

    OverviewSection().render(start, canvas, long_goal)

    assert canvas.page_count == 2
    for page in range(canvas.page_count):
        for op in canvas.page_ops(page):
            if isinstance(op, TextOp) and op.y < cursor.geometry.content_bottom:
                assert op.y + len(op.lines) * op.style.line_height <= cursor.geometry.content_bottom


def test_long_goal_title_is_clipped_to_one_page(cursor, canvas, goal):
    long_goal = goal.model_copy(update={"title": "Read a whole novel in Spanish without a dictionary " * 80})
    section = OverviewSection()

    section.render(cursor, canvas, long_goal)

    style = section.styles["goal_title"]
    title = next(op for op in canvas.page_ops(0) if isinstance(op, TextOp) and op.style == style)
    assert "Goal Overview" in canvas.page_texts(0)
    assert title.lines[-1].endswith("...")
    assert canvas.text_width(title.lines[-1], style) <= cursor.geometry.content_width - 30
    assert title.y + len(title.lines) * style.line_height <= cursor.geometry.content_bottom


# --- Statistics ---

def test_statistics_formats_values(cursor, canvas, stats):
    StatisticsSection().render(cursor, canvas, stats)

    texts = canvas.page_texts(0)
    assert "83%" in texts
    assert "+42" in texts
    assert "37.5h" in texts
    assert "25" in texts
    assert texts.index("Completed Days") < texts.index("Total Days")


def test_statistics_negative_sentiment(cursor, canvas, stats):
    StatisticsSection().render(cursor, canvas, stats.model_copy(update={"average_sentiment": -0.2}))

    assert "-20" in canvas.page_texts(0)


def test_statistics_second_row_moves_to_next_page_as_a_unit(cursor, canvas, stats):
    start = cursor.moved_to(cursor.geometry.content_bottom - 110)

    StatisticsSection().render(start, canvas, stats)

    assert canvas.page_count == 2
    first, second = canvas.page_texts(0), canvas.page_texts(1)
    assert {"Completed Days", "Completion Rate", "Current Streak"} <= set(first)
    assert {"Total Days", "Hours Spent", "Avg. Sentiment"} <= set(second)
    assert "Total Days" not in first


# --- Progress table ---

def test_table_shows_last_ten_completed_entries(cursor, canvas, progress):
    """14 completed entries: the table starts at the 5th completed one."""
    section = ProgressTableSection()
    section.render(cursor, canvas, progress)

    completed_days = [entry.day for entry in progress if entry.completed]
    assert len(completed_days) == 14
    assert _day_cells(canvas, section) == completed_days[4:]
    assert _all_texts(canvas).count("Done") == 10


def test_table_with_few_entries_renders_each_once(cursor, canvas):
    progress = [
        ProgressEntry(day=1, completed=True, hours_spent=2),
        ProgressEntry(day=2, completed=False),
        ProgressEntry(day=3, completed=True),
    ]
    section = ProgressTableSection()
    section.render(cursor, canvas, progress)

    assert _day_cells(canvas, section) == [1, 3]
    texts = canvas.page_texts(0)
    assert "2h" in texts
    assert "-" in texts


def test_table_keeps_supplied_order():
    progress = [
        ProgressEntry(day=7, completed=True),
        ProgressEntry(day=2, completed=True),
        ProgressEntry(day=4, completed=True),
    ]

    assert [entry.day for entry in recent_completed(progress)] == [7, 2, 4]


def test_table_comment_preview_and_placeholder(cursor, canvas):
    long_comment = "Worked through two chapters and all the exercises"
    progress = [
        ProgressEntry(day=1, completed=True, comment=long_comment),
        ProgressEntry(day=2, completed=True),
    ]
    section = ProgressTableSection()
    section.render(cursor, canvas, progress)

    texts = canvas.page_texts(0)
    assert long_comment[:32] + "..." in texts
    assert long_comment not in texts

    placeholder = [op for op in canvas.page_ops(0) if isinstance(op, TextOp) and op.text == "No comment"]
    assert len(placeholder) == 1
    assert placeholder[0].style.font_name == "Helvetica-Oblique"


def test_table_rows_never_straddle_a_page_break(cursor, canvas, progress):
    start = cursor.moved_to(cursor.geometry.content_bottom - 200)
    section = ProgressTableSection()

    section.render(start, canvas, progress)

    assert canvas.page_count == 2
    bottom = cursor.geometry.content_bottom
    rows = [
        op
        for page in range(canvas.page_count)
        for op in canvas.page_ops(page)
        if isinstance(op, ShapeOp) and op.height == ROW_HEIGHT
    ]
    assert len(rows) == 10
    assert all(row.y + row.height <= bottom for row in rows)
    # The header row is repeated above the rows that moved
    assert "Day" in canvas.page_texts(1)
    assert len(_day_cells(canvas, section)) == 10


# --- Insights ---

def test_insights_render_summary_and_motivation(cursor, canvas, insight):
    InsightsSection().render(cursor, canvas, insight)

    texts = _all_texts(canvas)
    assert "Key Summary" in texts
    assert insight.summary in texts
    assert insight.highlights[:3] == [t for t in texts if t in insight.highlights]
    assert "Extra" not in texts
    assert "Motivation level: 72/100" in texts


@pytest.mark.parametrize("field", ["highlights", "recommendations", "blockers"])
def test_insight_lists_are_capped_at_three(cursor, canvas, field):
    items = [f"{field} item {n}" for n in range(1, 6)]
    insight = InsightSnapshot(summary="Steady month.", **{field: items})

    InsightsSection().render(cursor, canvas, insight)

    assert [t for t in _all_texts(canvas) if t in items] == items[:3]


def test_summary_taller_than_a_page_flows_across_pages(cursor, canvas):
    summary = "Practice went well again today. " * 200
    section = InsightsSection()

    section.render(cursor, canvas, InsightSnapshot(summary=summary))

    style = section.styles["insight_summary"]
    lines = canvas.wrap_text(summary, cursor.geometry.content_width - 30, style)
    bottom = cursor.geometry.content_bottom
    assert canvas.page_count > 1

    # Title, header and the first line share the first page
    first = canvas.page_texts(0)
    assert first.index("AI-Generated Insights") < first.index("Key Summary") < first.index(lines[0])

    drawn = []
    for page in range(canvas.page_count):
        summary_ops = [op for op in canvas.page_ops(page) if isinstance(op, TextOp) and op.style == style]
        assert summary_ops, f"page {page + 1} holds no summary text"
        drawn.extend(op.text for op in summary_ops)
        for op in canvas.page_ops(page):
            if op.y >= bottom:
                continue  # footer chrome
            if isinstance(op, TextOp):
                assert op.y + len(op.lines) * op.style.line_height <= bottom
            else:
                assert op.bottom <= bottom
    assert drawn == lines


def test_empty_insight_lists_are_omitted(cursor, canvas):
    insight = InsightSnapshot(summary="Quiet week.", highlights=["Showed up"], recommendations=[], blockers=[])

    InsightsSection().render(cursor, canvas, insight)

    texts = _all_texts(canvas)
    assert "Highlights" in texts
    assert "Recommendations" not in texts
    assert "Challenges" not in texts
    assert not any(text.startswith("Mood trend") for text in texts)


def test_mood_trend_shows_latest_points(cursor, canvas, insight):
    InsightsSection().render(cursor, canvas, insight)

    trend = next(text for text in _all_texts(canvas) if text.startswith("Mood trend"))
    assert "Day 4 " in trend
    assert "Day 10 " in trend
    assert "Day 3 " not in trend


def test_long_bullets_break_cleanly(cursor, canvas):
    bullet = "Spend the first ten minutes of each session reviewing yesterday's mistakes. " * 4
    insight = InsightSnapshot(summary="Busy month.", recommendations=[bullet, bullet, bullet])
    start = cursor.moved_to(cursor.geometry.content_bottom - 260)

    InsightsSection().render(start, canvas, insight)

    assert canvas.page_count == 2
    bottom = cursor.geometry.content_bottom
    for page in range(canvas.page_count):
        for op in canvas.page_ops(page):
            if isinstance(op, TextOp) and op.text == bullet:
                assert op.y + len(op.lines) * op.style.line_height <= bottom


# --- Contract ---

@pytest.mark.parametrize("section", [
    OverviewSection(), StatisticsSection(), ProgressTableSection(), InsightsSection(),
])
def test_sections_refuse_missing_data(section, cursor: LayoutCursor, canvas: PageCanvas):
    with pytest.raises(LayoutContractError):
        section.render(cursor, canvas, None)
