"""
Layout cursor and page-break policy.

The cursor is a value, not a shared object: every section renderer takes
a cursor and returns a new one positioned after its content. The only way
to claim vertical space is reserve(), which either confirms the block fits
on the current page or breaks to a fresh page first.

Break rule:
    break  <=>  cursor.y + required > page_height - footer_reserve

The decision is made once per block using the block's full height, so a
block (a table row, a row of stat boxes, a bullet) is never split. A cursor
still at the top of an empty page never breaks: another page would be no
taller, so renderers wrap or clip anything larger than a page themselves.
"""

import logging
from dataclasses import dataclass, replace

from goal_report.services.canvas import PageCanvas
from goal_report.services.chrome import PageChrome
from goal_report.services.errors import LayoutContractError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageGeometry:
    width: float
    height: float
    margin: float = 50
    header_height: float = 60
    footer_reserve: float = 80

    @classmethod
    def for_canvas(cls, canvas: PageCanvas, margin: float = 50) -> "PageGeometry":
        return cls(width=canvas.page_width, height=canvas.page_height, margin=margin)

    @property
    def content_top(self) -> float:
        """Where writing starts on every page, just below the header."""
        return self.margin + self.header_height

    @property
    def content_bottom(self) -> float:
        """Lowest y any block may reach before the footer area."""
        return self.height - self.footer_reserve

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin


@dataclass(frozen=True)
class LayoutCursor:
    y: float
    page: int
    geometry: PageGeometry
    chrome: PageChrome

    @classmethod
    def start(cls, geometry: PageGeometry, chrome: PageChrome) -> "LayoutCursor":
        return cls(y=geometry.content_top, page=0, geometry=geometry, chrome=chrome)

    @property
    def at_page_top(self) -> bool:
        return self.y <= self.geometry.content_top

    def fits(self, required: float) -> bool:
        return self.y + required <= self.geometry.content_bottom

    def advance(self, dy: float) -> "LayoutCursor":
        return replace(self, y=self.y + dy)

    def moved_to(self, y: float) -> "LayoutCursor":
        return replace(self, y=y)

    def reserve(self, required: float, canvas: PageCanvas) -> "LayoutCursor":
        """Claim `required` units of vertical space for the next block.

        Returns this cursor unchanged when the block fits, or when nothing
        has been drawn on the page yet. Otherwise closes the current page
        (footer, when stamped per page), opens a new one, draws its header
        and returns a cursor at the top of its content area.
        """
        if required < 0:
            raise LayoutContractError(f"Cannot reserve negative height ({required})")
        if self.fits(required) or self.at_page_top:
            return self

        self.chrome.close_page(canvas, self.page)
        new_index = canvas.new_page()
        self.chrome.draw_header(canvas)
        logger.debug(
            "Page break before %.1f-unit block at y=%.1f -> page %d",
            required, self.y, new_index + 1,
        )
        return replace(self, y=self.geometry.content_top, page=new_index)
