"""
PDF report generator - turns a goal's data into a paginated PDF.

The assembler runs the four section renderers in a fixed order over one
PageCanvas, threading a LayoutCursor through them:

    Overview → Statistics → Progress Table → Insights (only if any exist)

then stamps the footers, finalizes the canvas, and hands back the bytes
(or a chunk iterator for streaming responses).

Footer timing:
- per_page (default): footers are stamped as each page closes. "Page N of M"
  needs M before the first page closes, so the layout runs once on a
  throwaway canvas to count pages, then for real. Layout is deterministic,
  so both passes break at the same places.
- deferred: one layout pass, then every page is revisited with
  switch_to_page() and stamped once the page count is known.
"""

import logging
import time
from dataclasses import replace
from datetime import date
from io import BytesIO
from typing import Iterator, Optional

from reportlab.lib.pagesizes import A4, LETTER

from goal_report.config import settings
from goal_report.schemas.report import ReportData
from goal_report.services.canvas import PageCanvas
from goal_report.services.chrome import PageChrome
from goal_report.services.errors import LayoutContractError, ReportGenerationError
from goal_report.services.layout import LayoutCursor, PageGeometry
from goal_report.services.sections import (
    InsightsSection,
    OverviewSection,
    ProgressTableSection,
    StatisticsSection,
)
from goal_report.services.theme import build_styles

logger = logging.getLogger(__name__)

PAGE_SIZES = {"A4": A4, "LETTER": LETTER}
INSIGHTS_LEAD_RESERVE = 150


class ReportAssembler:
    """Builds goal achievement report PDFs.

    Usage:
        assembler = ReportAssembler(generated_on=date(2026, 10, 16))
        pdf_bytes = assembler.render(report_data)

        # Or, for a streaming HTTP response
        for chunk in assembler.stream(report_data):
            ...

    Every argument defaults to the application settings. Pin generated_on
    to get byte-identical output for identical data.
    """

    def __init__(
        self,
        brand: Optional[str] = None,
        subtitle: Optional[str] = None,
        attribution: Optional[str] = None,
        page_size: Optional[str] = None,
        margin: Optional[float] = None,
        footer_timing: Optional[str] = None,
        generated_on: Optional[date] = None,
    ):
        self.brand = brand or settings.REPORT_BRAND
        self.subtitle = subtitle or settings.REPORT_SUBTITLE
        self.attribution = attribution or settings.REPORT_ATTRIBUTION
        self.pagesize = PAGE_SIZES[page_size or settings.REPORT_PAGE_SIZE]
        self.margin = margin if margin is not None else settings.REPORT_MARGIN
        self.footer_timing = footer_timing or settings.REPORT_FOOTER_TIMING
        self.generated_on = generated_on

        if self.footer_timing not in ("per_page", "deferred"):
            raise ValueError(f"Unknown footer timing: {self.footer_timing}")

        styles = build_styles()
        self.overview = OverviewSection(styles)
        self.statistics = StatisticsSection(styles)
        self.progress_table = ProgressTableSection(styles)
        self.insights = InsightsSection(styles)

    # ------------------------------------------------------------------
    # PUBLIC API
    # ------------------------------------------------------------------

    def render(self, data: ReportData) -> bytes:
        """Render the report and return the finished PDF bytes.

        Raises ReportGenerationError if anything goes wrong at runtime.
        Contract violations (LayoutContractError) propagate as-is.
        """
        started = time.perf_counter()
        try:
            canvas = self.render_canvas(data)
            pdf_bytes = canvas.finalize()
        except LayoutContractError:
            raise
        except Exception as exc:
            logger.exception("Report generation failed for goal %r", data.goal.title)
            raise ReportGenerationError() from exc

        logger.info(
            "Rendered report for goal %r: %d pages, %d bytes in %.0fms",
            data.goal.title, canvas.page_count, len(pdf_bytes),
            (time.perf_counter() - started) * 1000,
        )
        return pdf_bytes

    def stream(self, data: ReportData, chunk_size: Optional[int] = None) -> Iterator[bytes]:
        """Render, then yield the PDF in chunks.

        Rendering happens eagerly so failures surface before the first
        chunk is handed to a response.
        """
        return iter_chunks(BytesIO(self.render(data)), chunk_size or settings.STREAM_CHUNK_SIZE)

    def render_canvas(self, data: ReportData) -> PageCanvas:
        """Lay out every page, footers included, without finalizing.

        Useful for tests that want to inspect what landed on each page.
        """
        chrome = self._chrome()

        if self.footer_timing == "per_page":
            total_pages = self._layout(data, self._new_canvas(data), chrome)[0].page_count
            chrome = replace(chrome, total_pages=total_pages)
            canvas, cursor = self._layout(data, self._new_canvas(data), chrome)
            if canvas.page_count != total_pages:
                raise LayoutContractError(
                    f"Layout passes disagree on page count ({total_pages} vs {canvas.page_count})"
                )
            # The last page never closes through a break
            chrome.close_page(canvas, cursor.page)
        else:
            canvas, _ = self._layout(data, self._new_canvas(data), chrome)
            for index in range(canvas.page_count):
                canvas.switch_to_page(index)
                chrome.draw_footer(canvas, index + 1, canvas.page_count)

        return canvas

    # ------------------------------------------------------------------
    # LAYOUT
    # ------------------------------------------------------------------

    def _layout(
        self,
        data: ReportData,
        canvas: PageCanvas,
        chrome: PageChrome,
    ) -> tuple[PageCanvas, LayoutCursor]:
        geometry = PageGeometry.for_canvas(canvas, self.margin)

        chrome.draw_header(canvas)
        cursor = LayoutCursor.start(geometry, chrome)

        cursor = self.overview.render(cursor, canvas, data.goal)
        cursor = self.statistics.render(cursor, canvas, data.stats)
        cursor = self.progress_table.render(cursor, canvas, data.progress)

        if data.insights:
            # Exact height is unknown until the section measures its text
            cursor = cursor.reserve(INSIGHTS_LEAD_RESERVE, canvas)
            cursor = self.insights.render(cursor, canvas, data.insights[0])

        return canvas, cursor

    def _chrome(self) -> PageChrome:
        return PageChrome(
            brand=self.brand,
            subtitle=self.subtitle,
            attribution=self.attribution,
            generated_on=self.generated_on or date.today(),
            footer_timing=self.footer_timing,
            margin=self.margin,
        )

    def _new_canvas(self, data: ReportData) -> PageCanvas:
        return PageCanvas(
            pagesize=self.pagesize,
            title=f"Goal Report - {data.goal.title}",
            author=self.brand,
        )


def iter_chunks(buffer: BytesIO, chunk_size: int) -> Iterator[bytes]:
    """Yield a buffer's contents in fixed-size chunks."""
    while True:
        chunk = buffer.read(chunk_size)
        if not chunk:
            break
        yield chunk
