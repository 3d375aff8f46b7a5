"""
AI-Generated Insights section.

Renders the most recent insight only:
1. Key Summary box (sized to the wrapped summary, at least 70 tall). A
   summary taller than a page flows on line by line, one box per page.
2. Motivation level and a short mood trend line
3. Highlights, Recommendations and Challenges lists, 3 items each

A list header is its own reserved block and every bullet is reserved
separately with its measured height, so long bullets break cleanly.
Empty lists are skipped entirely, header included.
"""

from dataclasses import dataclass, replace

from goal_report.schemas.report import InsightSnapshot
from goal_report.services.canvas import PageCanvas
from goal_report.services.formatting import format_sentiment
from goal_report.services.layout import LayoutCursor
from goal_report.services.sections.base import SECTION_TITLE_HEIGHT, SectionRenderer
from goal_report.services.theme import (
    DANGER,
    DANGER_BG,
    INFO,
    INFO_BG,
    SUCCESS,
    SUCCESS_BG,
)

MAX_LIST_ITEMS = 3
MOOD_TREND_POINTS = 7
SUMMARY_HEADER_HEIGHT = 35
SUMMARY_MIN_BODY_HEIGHT = 70
SUMMARY_PADDING = 12
LIST_HEADER_HEIGHT = 28
LIST_HEADER_PITCH = 35
LIST_HEADER_RESERVE = 50
BULLET_GAP = 8


@dataclass(frozen=True)
class InsightList:
    heading: str
    field: str
    background: str
    accent: str
    heading_color: str


INSIGHT_LISTS = [
    InsightList("Highlights", "highlights", SUCCESS_BG, SUCCESS, "#065F46"),
    InsightList("Recommendations", "recommendations", INFO_BG, INFO, "#1E3A8A"),
    InsightList("Challenges", "blockers", DANGER_BG, DANGER, "#991B1B"),
]


def mood_trend_line(insight: InsightSnapshot) -> str:
    points = insight.mood_trend[-MOOD_TREND_POINTS:]
    return "Mood trend: " + ", ".join(
        f"Day {point.day} ({format_sentiment(point.score)})" for point in points
    )


class InsightsSection(SectionRenderer):
    title = "AI-Generated Insights"

    def render(self, cursor: LayoutCursor, canvas: PageCanvas, insight: InsightSnapshot) -> LayoutCursor:
        self._require(insight)

        cursor = self._draw_summary(cursor, canvas, insight)
        cursor = self._draw_meta(cursor, canvas, insight)

        for listing in INSIGHT_LISTS:
            items = getattr(insight, listing.field)[:MAX_LIST_ITEMS]
            if items:
                cursor = self._draw_list(cursor, canvas, listing, items)
        return cursor

    def _draw_summary(self, cursor: LayoutCursor, canvas: PageCanvas, insight: InsightSnapshot) -> LayoutCursor:
        margin = cursor.geometry.margin
        width = cursor.geometry.content_width
        style = self.styles["insight_summary"]

        lines = canvas.wrap_text(insight.summary, width - 30, style)
        body_height = max(
            SUMMARY_MIN_BODY_HEIGHT,
            len(lines) * style.line_height + 2 * SUMMARY_PADDING,
        )
        block_height = SUMMARY_HEADER_HEIGHT + body_height
        page_room = cursor.geometry.content_bottom - cursor.geometry.content_top

        if SECTION_TITLE_HEIGHT + block_height <= page_room:
            keep_with = block_height
        else:
            # Only the header and the first line stay with the title
            keep_with = SUMMARY_HEADER_HEIGHT + 2 * SUMMARY_PADDING + style.line_height

        cursor = self.draw_title(cursor, canvas, keep_with=keep_with)
        cursor = cursor.reserve(keep_with, canvas)

        canvas.draw_rounded_rect(margin, cursor.y, width, SUMMARY_HEADER_HEIGHT, 8, fill="#6366F1")
        canvas.draw_text("Key Summary", margin + 15, cursor.y + 11, None, self.styles["insight_header"])
        cursor = cursor.advance(SUMMARY_HEADER_HEIGHT)

        if keep_with == block_height:
            canvas.draw_rect(margin, cursor.y, width, body_height, fill="#EFF6FF", stroke="#BFDBFE")
            canvas.draw_text(insight.summary, margin + 15, cursor.y + SUMMARY_PADDING, width - 30, style)
            cursor = cursor.advance(body_height)
        else:
            cursor = self._draw_summary_lines(cursor, canvas, lines)
        return cursor.advance(10)

    def _draw_summary_lines(self, cursor: LayoutCursor, canvas: PageCanvas, lines: list[str]) -> LayoutCursor:
        """Flow a summary taller than a page across pages, one box per page."""
        margin = cursor.geometry.margin
        width = cursor.geometry.content_width
        style = self.styles["insight_summary"]
        line_height = style.line_height

        remaining = list(lines)
        while remaining:
            cursor = cursor.reserve(2 * SUMMARY_PADDING + line_height, canvas)
            room = cursor.geometry.content_bottom - cursor.y - 2 * SUMMARY_PADDING
            chunk = remaining[:max(1, int(room // line_height))]
            remaining = remaining[len(chunk):]

            box_height = len(chunk) * line_height + 2 * SUMMARY_PADDING
            canvas.draw_rect(margin, cursor.y, width, box_height, fill="#EFF6FF", stroke="#BFDBFE")
            for i, line in enumerate(chunk):
                canvas.draw_text(line, margin + 15, cursor.y + SUMMARY_PADDING + i * line_height, None, style)
            cursor = cursor.advance(box_height)
        return cursor

    def _draw_meta(self, cursor: LayoutCursor, canvas: PageCanvas, insight: InsightSnapshot) -> LayoutCursor:
        margin = cursor.geometry.margin
        width = cursor.geometry.content_width
        style = self.styles["insight_meta"]

        lines = [f"Motivation level: {insight.motivation_level}/100"]
        if insight.mood_trend:
            lines.append(mood_trend_line(insight))

        for text in lines:
            height = canvas.measure_text(text, width, style)
            cursor = cursor.reserve(height, canvas)
            canvas.draw_text(text, margin, cursor.y, width, style)
            cursor = cursor.advance(height + 4)
        return cursor.advance(16)

    def _draw_list(
        self,
        cursor: LayoutCursor,
        canvas: PageCanvas,
        listing: InsightList,
        items: list[str],
    ) -> LayoutCursor:
        margin = cursor.geometry.margin
        width = cursor.geometry.content_width

        cursor = cursor.reserve(LIST_HEADER_RESERVE, canvas)
        canvas.draw_rounded_rect(margin, cursor.y, width, LIST_HEADER_HEIGHT, 6,
                                 fill=listing.background, stroke=listing.accent)
        canvas.draw_text(listing.heading, margin + 12, cursor.y + 8, None,
                         replace(self.styles["list_header"], color=listing.heading_color))
        cursor = cursor.advance(LIST_HEADER_PITCH)

        style = self.styles["bullet"]
        text_width = width - 35
        for item in items:
            height = canvas.measure_text(item, text_width, style)
            cursor = cursor.reserve(height + BULLET_GAP, canvas)
            canvas.draw_circle(margin + 15, cursor.y + 5, 3, fill=listing.accent, stroke=listing.accent)
            canvas.draw_text(item, margin + 25, cursor.y, text_width, style)
            cursor = cursor.advance(height + BULLET_GAP)

        return cursor.advance(10)
