"""
Daily Progress Summary section: a table of the most recent completed days.

Only completed entries are shown, and only the last 10 of them in the
order they were supplied (the tail of the filtered list, not re-sorted).
Every row is one reserved block. When a row has to move to a new page,
the header row is drawn again first so the columns stay labelled.
"""

from goal_report.schemas.report import ProgressEntry
from goal_report.services.canvas import PageCanvas
from goal_report.services.formatting import NO_COMMENT, comment_preview, format_hours
from goal_report.services.layout import LayoutCursor
from goal_report.services.sections.base import SectionRenderer
from goal_report.services.theme import BRAND_PRIMARY

MAX_ROWS = 10
HEADER_HEIGHT = 30
ROW_HEIGHT = 25
ROW_PITCH = 28   # row plus the gap below it
LEAD_RESERVE = 150

# Column x offsets from the left margin: (header, cell)
DAY_COLUMN = (10, 8)
STATUS_COLUMN = (60, 60)
HOURS_COLUMN = (120, 125)
COMMENT_COLUMN = (180, 185)


def recent_completed(progress: list[ProgressEntry], limit: int = MAX_ROWS) -> list[ProgressEntry]:
    completed = [entry for entry in progress if entry.completed]
    return completed[-limit:]


class ProgressTableSection(SectionRenderer):
    title = "Daily Progress Summary"

    def render(self, cursor: LayoutCursor, canvas: PageCanvas, progress: list[ProgressEntry]) -> LayoutCursor:
        self._require(progress)

        cursor = cursor.reserve(LEAD_RESERVE, canvas)
        cursor = self.draw_title(cursor, canvas, keep_with=HEADER_HEIGHT + ROW_PITCH)
        cursor = self._draw_header_row(cursor, canvas)

        for index, entry in enumerate(recent_completed(progress)):
            row_cursor = cursor.reserve(ROW_PITCH, canvas)
            if row_cursor.page != cursor.page:
                row_cursor = self._draw_header_row(row_cursor, canvas)
            self._draw_row(row_cursor, canvas, entry, index)
            cursor = row_cursor.advance(ROW_PITCH)

        return cursor.advance(15)

    def _draw_header_row(self, cursor: LayoutCursor, canvas: PageCanvas) -> LayoutCursor:
        margin = cursor.geometry.margin
        cursor = cursor.reserve(HEADER_HEIGHT, canvas)
        canvas.draw_rounded_rect(margin, cursor.y, cursor.geometry.content_width, HEADER_HEIGHT, 6,
                                 fill=BRAND_PRIMARY)

        style = self.styles["table_header"]
        for label, (offset, _) in zip(
            ("Day", "Status", "Hours", "Comment"),
            (DAY_COLUMN, STATUS_COLUMN, HOURS_COLUMN, COMMENT_COLUMN),
        ):
            canvas.draw_text(label, margin + offset, cursor.y + 10, None, style)
        return cursor.advance(HEADER_HEIGHT)

    def _draw_row(self, cursor: LayoutCursor, canvas: PageCanvas, entry: ProgressEntry, index: int) -> None:
        margin = cursor.geometry.margin
        y = cursor.y

        # Alternate row tint
        fill, border = ("#F0F9FF", "#BFDBFE") if index % 2 == 0 else ("#FFFFFF", "#E5E7EB")
        canvas.draw_rounded_rect(margin, y, cursor.geometry.content_width, ROW_HEIGHT, 4,
                                 fill=fill, stroke=border)

        # Day number badge
        day_x = margin + DAY_COLUMN[1]
        canvas.draw_rounded_rect(day_x, y + 6, 30, 14, 7, fill="#E0E7FF", stroke="#6366F1")
        canvas.draw_text(str(entry.day), day_x, y + 8, 30, self.styles["day_badge"])

        # Rows are pre-filtered to completed entries
        canvas.draw_text("Done", margin + STATUS_COLUMN[1], y + 8, None, self.styles["status_done"])

        hours_style = "hours" if entry.hours_spent is not None else "hours_missing"
        canvas.draw_text(format_hours(entry.hours_spent), margin + HOURS_COLUMN[1], y + 8,
                         None, self.styles[hours_style])

        comment_x = margin + COMMENT_COLUMN[1]
        preview = comment_preview(entry.comment)
        if preview is None:
            canvas.draw_text(NO_COMMENT, comment_x, y + 9, None, self.styles["comment_missing"])
        else:
            # Previews are at most 35 characters, so this stays on one line
            canvas.draw_text(preview, comment_x, y + 9, cursor.geometry.width - comment_x - margin,
                             self.styles["comment"])
