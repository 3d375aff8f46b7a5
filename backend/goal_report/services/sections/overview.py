"""Goal Overview section: title box, description, detail cards, status badge."""

from dataclasses import replace

from goal_report.schemas.report import GoalSnapshot
from goal_report.services.canvas import PageCanvas
from goal_report.services.formatting import format_date, format_number
from goal_report.services.layout import LayoutCursor
from goal_report.services.sections.base import (
    SECTION_TITLE_HEIGHT,
    SectionRenderer,
    clip_lines,
    column_width,
)
from goal_report.services.theme import CARD_PALETTE, STATUS_PALETTE

TITLE_BOX_HEIGHT = 40
TITLE_BOX_PADDING = 24
CARD_HEIGHT = 65
CARD_GAP = 15
BADGE_WIDTH = 180
BADGE_HEIGHT = 30


def detail_cards(goal: GoalSnapshot) -> list[tuple[str, str]]:
    """(label, value) for each card in the details row."""
    return [
        ("Duration", f"{goal.duration} days"),
        ("Hours/Day", f"{format_number(goal.hours_per_day)} hours"),
        ("Start Date", format_date(goal.start_date)),
    ]


def status_label(goal: GoalSnapshot) -> str:
    return "COMPLETED" if goal.status == "completed" else "IN PROGRESS"


class OverviewSection(SectionRenderer):
    title = "Goal Overview"

    def render(self, cursor: LayoutCursor, canvas: PageCanvas, goal: GoalSnapshot) -> LayoutCursor:
        self._require(goal)
        margin = cursor.geometry.margin
        width = cursor.geometry.content_width

        # --- Title box (grows for long titles, clipped to one page) ---
        title_style = self.styles["goal_title"]
        page_room = cursor.geometry.content_bottom - cursor.geometry.content_top
        max_lines = int((page_room - SECTION_TITLE_HEIGHT - TITLE_BOX_PADDING) // title_style.line_height)
        title_lines = clip_lines(
            canvas, canvas.wrap_text(goal.title, width - 30, title_style), max_lines, width - 30, title_style,
        )
        box_height = max(TITLE_BOX_HEIGHT, len(title_lines) * title_style.line_height + TITLE_BOX_PADDING)

        cursor = self.draw_title(cursor, canvas, keep_with=box_height)
        cursor = cursor.reserve(box_height, canvas)
        canvas.draw_rounded_rect(margin, cursor.y, width, box_height, 8,
                                 fill="#F0F9FF", stroke="#0EA5E9")
        canvas.draw_text("\n".join(title_lines), margin + 15, cursor.y + 12, None, title_style)
        cursor = cursor.advance(box_height + 15)

        # --- Description: one reserved block per wrapped line ---
        if goal.description:
            style = self.styles["body"]
            for line in canvas.wrap_text(goal.description, width, style):
                cursor = cursor.reserve(style.line_height, canvas)
                canvas.draw_text(line, margin, cursor.y, None, style)
                cursor = cursor.advance(style.line_height)
            cursor = cursor.advance(10)

        cursor = cursor.advance(5)
        cursor = self._draw_cards(cursor, canvas, goal)
        return self._draw_status_badge(cursor, canvas, goal)

    def _draw_cards(self, cursor: LayoutCursor, canvas: PageCanvas, goal: GoalSnapshot) -> LayoutCursor:
        cards = detail_cards(goal)
        card_width = column_width(cursor.geometry.content_width, len(cards), CARD_GAP)

        # The whole row is one block
        cursor = cursor.reserve(CARD_HEIGHT, canvas)
        card_x = cursor.geometry.margin
        for (label, value), (fill, border) in zip(cards, CARD_PALETTE):
            canvas.draw_rounded_rect(card_x, cursor.y, card_width, CARD_HEIGHT, 6,
                                     fill=fill, stroke=border)
            canvas.draw_text(value, card_x, cursor.y + 20, card_width, self.styles["card_value"])
            canvas.draw_text(label, card_x, cursor.y + 45, card_width, self.styles["card_label"])
            card_x += card_width + CARD_GAP

        return cursor.advance(CARD_HEIGHT + 15)

    def _draw_status_badge(self, cursor: LayoutCursor, canvas: PageCanvas, goal: GoalSnapshot) -> LayoutCursor:
        fill, accent = STATUS_PALETTE[goal.status]
        margin = cursor.geometry.margin

        cursor = cursor.reserve(BADGE_HEIGHT, canvas)
        canvas.draw_rounded_rect(margin, cursor.y, BADGE_WIDTH, BADGE_HEIGHT, 15,
                                 fill=fill, stroke=accent)
        canvas.draw_text(status_label(goal), margin, cursor.y + 9, BADGE_WIDTH,
                         self._badge_style(accent))
        return cursor.advance(BADGE_HEIGHT + 15)

    def _badge_style(self, color: str):
        return replace(self.styles["badge"], color=color)
