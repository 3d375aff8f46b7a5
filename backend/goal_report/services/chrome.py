"""
Repeating page chrome: the header band and the footer on every page.

Header: brand name, fixed report subtitle, generation date (dd/mm/yyyy).
Footer: attribution line and "Page N of M".

The footer can be stamped at two moments (see ReportAssembler):
- per_page: as each page closes. Needs total_pages known up front.
- deferred: after every page exists, by revisiting pages with
  switch_to_page(). Only the assembler does this.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from goal_report.services.canvas import PageCanvas
from goal_report.services.formatting import format_date
from goal_report.services.theme import BRAND_ACCENT, BRAND_PRIMARY, build_styles

STYLES = build_styles()

HEADER_BAND_HEIGHT = 50
SUBTITLE_OFFSET = 80      # from the left margin, clear of the brand name
DATE_WIDTH = 100
FOOTER_RULE_OFFSET = 55   # distance of the footer rule from the page bottom
FOOTER_TEXT_OFFSET = 45
FOOTER_PAGE_OFFSET = 32


@dataclass(frozen=True)
class PageChrome:
    brand: str
    subtitle: str
    attribution: str
    generated_on: date
    footer_timing: str = "per_page"
    total_pages: Optional[int] = None
    margin: float = 50

    @property
    def date_label(self) -> str:
        return format_date(self.generated_on)

    def footer_label(self, page_number: int, total_pages: Optional[int] = None) -> str:
        total = total_pages if total_pages is not None else self.total_pages
        if total is None:
            return f"Page {page_number}"
        return f"Page {page_number} of {total}"

    def draw_header(self, canvas: PageCanvas) -> None:
        """Draw the header band at the top of the canvas's current page."""
        width = canvas.page_width
        canvas.draw_rect(0, 0, width, HEADER_BAND_HEIGHT, fill=BRAND_PRIMARY)
        canvas.draw_text(self.brand, self.margin, 16, None, STYLES["brand"])
        canvas.draw_text(self.subtitle, self.margin + SUBTITLE_OFFSET, 21, None, STYLES["subtitle"])
        canvas.draw_text(self.date_label, width - self.margin - DATE_WIDTH, 21, DATE_WIDTH, STYLES["date"])

    def draw_footer(
        self,
        canvas: PageCanvas,
        page_number: int,
        total_pages: Optional[int] = None,
    ) -> None:
        """Draw the footer at the bottom of the canvas's current page."""
        width, height = canvas.page_width, canvas.page_height
        left, text_width = self.margin, width - 2 * self.margin
        canvas.draw_line(
            left, height - FOOTER_RULE_OFFSET, width - left, height - FOOTER_RULE_OFFSET,
            stroke=BRAND_ACCENT,
        )
        canvas.draw_text(
            self.attribution, left, height - FOOTER_TEXT_OFFSET, text_width, STYLES["footer"],
        )
        canvas.draw_text(
            self.footer_label(page_number, total_pages),
            left, height - FOOTER_PAGE_OFFSET, text_width, STYLES["footer"],
        )

    def close_page(self, canvas: PageCanvas, page_index: int) -> None:
        """Called when the layout leaves a page for good."""
        if self.footer_timing == "per_page":
            self.draw_footer(canvas, page_index + 1)
