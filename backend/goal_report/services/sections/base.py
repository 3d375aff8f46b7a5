"""
Shared plumbing for section renderers.

Every section follows the same contract:

    cursor = SomeSection().render(cursor, canvas, data_slice)

It reserves space before each block it draws, draws, and returns a cursor
positioned just below its content. Sections never look at each other's
state; the cursor and canvas are all they share.
"""

from typing import Any, Optional

from goal_report.services.canvas import PageCanvas, TextStyle
from goal_report.services.errors import LayoutContractError
from goal_report.services.layout import LayoutCursor
from goal_report.services.theme import BRAND_ACCENT, build_styles

SECTION_TITLE_HEIGHT = 33   # accent rule (8) + title line (25)
ELLIPSIS = "..."


def column_width(total_width: float, count: int, gap: float) -> float:
    """Width of each of `count` equal columns separated by `gap`."""
    return (total_width - gap * (count - 1)) / count


def clip_lines(
    canvas: PageCanvas,
    lines: list[str],
    max_lines: int,
    width: float,
    style: TextStyle,
) -> list[str]:
    """Keep at most `max_lines` wrapped lines, ending a cut with "..."."""
    if len(lines) <= max_lines:
        return lines

    kept = lines[:max(1, max_lines)]
    last = kept[-1].rstrip()
    while last and canvas.text_width(last + ELLIPSIS, style) > width:
        last = last[:-1].rstrip()
    return kept[:-1] + [last + ELLIPSIS]


class SectionRenderer:
    """Base class for the four report sections."""

    title: str = ""

    def __init__(self, styles: Optional[dict[str, TextStyle]] = None):
        self.styles = styles or build_styles()

    def render(self, cursor: LayoutCursor, canvas: PageCanvas, data: Any) -> LayoutCursor:
        raise NotImplementedError

    def _require(self, data: Any) -> None:
        if data is None:
            raise LayoutContractError(f"{type(self).__name__} was given no data to render")

    def draw_title(
        self,
        cursor: LayoutCursor,
        canvas: PageCanvas,
        keep_with: float = 0,
    ) -> LayoutCursor:
        """Draw the section title.

        keep_with is the height of the block that must follow the title on
        the same page, so a title never ends up alone at the bottom.
        """
        cursor = cursor.reserve(SECTION_TITLE_HEIGHT + keep_with, canvas)
        margin = cursor.geometry.margin

        canvas.draw_line(margin, cursor.y, margin + 50, cursor.y, stroke=BRAND_ACCENT, line_width=2)
        canvas.draw_text(self.title, margin, cursor.y + 8, None, self.styles["section_title"])
        return cursor.advance(SECTION_TITLE_HEIGHT)
