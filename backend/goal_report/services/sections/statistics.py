"""
Progress Statistics section: six stat boxes in a 3-per-row grid.

Each row of boxes is reserved as one block, so a row is never split
across pages (the second row may move to the next page on its own).
"""

from dataclasses import dataclass, replace

from goal_report.schemas.report import StatsSnapshot
from goal_report.services.canvas import PageCanvas
from goal_report.services.formatting import (
    format_completion_rate,
    format_number,
    format_sentiment,
)
from goal_report.services.layout import LayoutCursor
from goal_report.services.sections.base import SectionRenderer, column_width
from goal_report.services.theme import DANGER, DANGER_BG, INFO, INFO_BG, SUCCESS, SUCCESS_BG

BOXES_PER_ROW = 3
BOX_HEIGHT = 60
BOX_GAP = 10
ROW_GAP = 10
LEAD_RESERVE = 100


@dataclass(frozen=True)
class StatItem:
    label: str
    value: str
    color: str
    background: str


def stat_items(stats: StatsSnapshot) -> list[StatItem]:
    """The six boxes, in display order."""
    positive = stats.average_sentiment > 0
    return [
        StatItem("Completed Days", str(stats.completed_days), SUCCESS, SUCCESS_BG),
        StatItem("Completion Rate", format_completion_rate(stats.completion_rate), INFO, INFO_BG),
        StatItem("Current Streak", str(stats.current_streak), "#F97316", "#FFEDD5"),
        StatItem("Total Days", str(stats.total_days), "#6B7280", "#F3F4F6"),
        StatItem("Hours Spent", f"{format_number(stats.total_hours_spent)}h", "#8B5CF6", "#EDE9FE"),
        StatItem(
            "Avg. Sentiment",
            format_sentiment(stats.average_sentiment),
            "#22C55E" if positive else DANGER,
            SUCCESS_BG if positive else DANGER_BG,
        ),
    ]


class StatisticsSection(SectionRenderer):
    title = "Progress Statistics"

    def render(self, cursor: LayoutCursor, canvas: PageCanvas, stats: StatsSnapshot) -> LayoutCursor:
        self._require(stats)

        cursor = cursor.reserve(LEAD_RESERVE, canvas)
        cursor = self.draw_title(cursor, canvas, keep_with=BOX_HEIGHT)

        items = stat_items(stats)
        box_width = column_width(cursor.geometry.content_width, BOXES_PER_ROW, BOX_GAP)
        rows = [items[i:i + BOXES_PER_ROW] for i in range(0, len(items), BOXES_PER_ROW)]

        for row_index, row in enumerate(rows):
            if row_index:
                cursor = cursor.advance(ROW_GAP)
            cursor = cursor.reserve(BOX_HEIGHT, canvas)

            box_x = cursor.geometry.margin
            for item in row:
                canvas.draw_rounded_rect(box_x, cursor.y, box_width, BOX_HEIGHT, 8,
                                         fill=item.background, stroke=item.color)
                canvas.draw_text(item.value, box_x, cursor.y + 15, box_width,
                                 replace(self.styles["stat_value"], color=item.color))
                canvas.draw_text(item.label, box_x, cursor.y + 42, box_width,
                                 self.styles["stat_label"])
                box_x += box_width + BOX_GAP

            cursor = cursor.advance(BOX_HEIGHT)

        return cursor.advance(25)
