"""
Paged drawing surface for the goal report.

The section renderers never talk to ReportLab directly. They draw onto a
PageCanvas, which records every call into a per-page display list and only
replays it onto a real ReportLab canvas when the document is finalized.

Why a display list instead of drawing straight onto reportlab.pdfgen.Canvas?
- ReportLab can't go back to a page once showPage() has been called, but the
  footer pass needs switch_to_page() to stamp "Page N of M" after the fact.
- Tests can inspect exactly what landed on which page without parsing PDF.

Key concepts:
- Coordinates are top-left based: y grows downward, like the layout cursor.
  They're flipped to PDF's bottom-left origin only during replay.
- Every draw call carries its own style/colors. There is no "current font"
  or "current fill color" state to leak between calls.
- finalize() may run exactly once. Anything drawn afterwards is a bug and
  raises CanvasFinalizedError.
"""

from dataclasses import dataclass
from io import BytesIO
from typing import Optional, Union

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import getAscent, stringWidth
from reportlab.pdfgen import canvas as pdf_canvas

from goal_report.services.errors import CanvasFinalizedError, LayoutContractError


@dataclass(frozen=True)
class TextStyle:
    """Font, size, color and alignment for a single draw_text call."""
    font_name: str = "Helvetica"
    font_size: float = 10
    color: str = "#000000"
    align: str = "left"  # left | center | right
    leading: Optional[float] = None

    @property
    def line_height(self) -> float:
        return self.leading if self.leading is not None else self.font_size * 1.2


# --- Display list operations ---

@dataclass(frozen=True)
class TextOp:
    text: str
    lines: tuple[str, ...]
    x: float
    y: float
    width: Optional[float]
    style: TextStyle


@dataclass(frozen=True)
class ShapeOp:
    kind: str  # rect | rounded_rect | circle | line
    x: float
    y: float
    width: float = 0
    height: float = 0
    radius: float = 0
    fill: Optional[str] = None
    stroke: Optional[str] = None
    line_width: float = 1

    @property
    def bottom(self) -> float:
        if self.kind == "circle":
            return self.y + self.radius
        return self.y + self.height


DrawOp = Union[TextOp, ShapeOp]


class PageCanvas:
    """A drawing surface that buffers pages until finalize().

    Usage:
        canvas = PageCanvas(title="Goal Report")
        used = canvas.draw_text("Hello", 50, 110, 300, TextStyle(font_size=12))
        canvas.draw_rounded_rect(50, 140, 200, 40, 8, fill="#F0F9FF")
        canvas.new_page()
        pdf_bytes = canvas.finalize()
    """

    def __init__(
        self,
        pagesize: tuple[float, float] = A4,
        title: str = "",
        author: str = "",
    ):
        self.page_width, self.page_height = pagesize
        self.title = title
        self.author = author
        self._pages: list[list[DrawOp]] = [[]]
        self._current = 0
        self._finalized = False

    # ------------------------------------------------------------------
    # PAGE MANAGEMENT
    # ------------------------------------------------------------------

    @property
    def page_count(self) -> int:
        return len(self._pages)

    @property
    def current_page(self) -> int:
        """Zero-based index of the page draw calls currently land on."""
        return self._current

    @property
    def finalized(self) -> bool:
        return self._finalized

    def new_page(self) -> int:
        """Append a blank page, make it active, and return its index."""
        self._ensure_open()
        self._pages.append([])
        self._current = len(self._pages) - 1
        return self._current

    def switch_to_page(self, index: int) -> None:
        """Make an already-created page the target of subsequent draws."""
        self._ensure_open()
        if not 0 <= index < len(self._pages):
            raise LayoutContractError(
                f"Page {index} does not exist (document has {len(self._pages)} pages)"
            )
        self._current = index

    # ------------------------------------------------------------------
    # TEXT
    # ------------------------------------------------------------------

    def wrap_text(self, text: str, width: Optional[float], style: TextStyle) -> list[str]:
        """Split text into the lines it would occupy at the given width."""
        if width is None:
            return text.split("\n")
        return simpleSplit(text, style.font_name, style.font_size, width) or [""]

    def measure_text(self, text: str, width: Optional[float], style: TextStyle) -> float:
        """Height draw_text() would consume, without drawing anything."""
        return len(self.wrap_text(text, width, style)) * style.line_height

    def text_width(self, text: str, style: TextStyle) -> float:
        return stringWidth(text, style.font_name, style.font_size)

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        width: Optional[float] = None,
        style: TextStyle = TextStyle(),
    ) -> float:
        """Draw text with its top edge at y, wrapping to width.

        Returns the vertical space consumed so callers can advance their
        cursor by exactly that much.
        """
        self._ensure_open()
        lines = tuple(self.wrap_text(text, width, style))
        self._pages[self._current].append(TextOp(text, lines, x, y, width, style))
        return len(lines) * style.line_height

    # ------------------------------------------------------------------
    # SHAPES
    # ------------------------------------------------------------------

    def draw_rect(self, x, y, width, height, fill=None, stroke=None, line_width=1):
        self._add_shape(ShapeOp("rect", x, y, width, height, 0, fill, stroke, line_width))

    def draw_rounded_rect(self, x, y, width, height, radius, fill=None, stroke=None, line_width=1):
        self._add_shape(
            ShapeOp("rounded_rect", x, y, width, height, radius, fill, stroke, line_width)
        )

    def draw_circle(self, cx, cy, radius, fill=None, stroke=None, line_width=1):
        self._add_shape(ShapeOp("circle", cx, cy, 0, 0, radius, fill, stroke, line_width))

    def draw_line(self, x1, y1, x2, y2, stroke="#000000", line_width=1):
        # Lines reuse width/height as the (dx, dy) to the end point
        self._add_shape(ShapeOp("line", x1, y1, x2 - x1, y2 - y1, 0, None, stroke, line_width))

    def _add_shape(self, op: ShapeOp) -> None:
        self._ensure_open()
        self._pages[self._current].append(op)

    # ------------------------------------------------------------------
    # INSPECTION
    # ------------------------------------------------------------------

    def page_ops(self, index: int) -> list[DrawOp]:
        return list(self._pages[index])

    def page_texts(self, index: int) -> list[str]:
        """All text drawn on a page, in draw order."""
        return [op.text for op in self._pages[index] if isinstance(op, TextOp)]

    # ------------------------------------------------------------------
    # OUTPUT
    # ------------------------------------------------------------------

    def finalize(self) -> bytes:
        """Replay every page onto a ReportLab canvas and return the PDF bytes.

        The canvas is sealed afterwards.
        """
        self._ensure_open()
        self._finalized = True

        buffer = BytesIO()
        out = pdf_canvas.Canvas(
            buffer,
            pagesize=(self.page_width, self.page_height),
            invariant=1,  # no timestamps/random IDs, so output is reproducible
        )
        out.setTitle(self.title)
        out.setAuthor(self.author)

        for ops in self._pages:
            for op in ops:
                if isinstance(op, TextOp):
                    self._replay_text(out, op)
                else:
                    self._replay_shape(out, op)
            out.showPage()

        out.save()
        return buffer.getvalue()

    def _replay_text(self, out, op: TextOp) -> None:
        style = op.style
        out.setFont(style.font_name, style.font_size)
        out.setFillColor(colors.HexColor(style.color))
        ascent = getAscent(style.font_name, style.font_size)

        for i, line in enumerate(op.lines):
            baseline = self.page_height - (op.y + i * style.line_height + ascent)
            if style.align == "center" and op.width is not None:
                out.drawCentredString(op.x + op.width / 2, baseline, line)
            elif style.align == "right" and op.width is not None:
                out.drawRightString(op.x + op.width, baseline, line)
            else:
                out.drawString(op.x, baseline, line)

    def _replay_shape(self, out, op: ShapeOp) -> None:
        fill = 1 if op.fill else 0
        stroke = 1 if op.stroke else 0
        if op.fill:
            out.setFillColor(colors.HexColor(op.fill))
        if op.stroke:
            out.setStrokeColor(colors.HexColor(op.stroke))
        out.setLineWidth(op.line_width)

        if op.kind == "rect":
            out.rect(op.x, self.page_height - op.y - op.height, op.width, op.height,
                     stroke=stroke, fill=fill)
        elif op.kind == "rounded_rect":
            out.roundRect(op.x, self.page_height - op.y - op.height, op.width, op.height,
                          op.radius, stroke=stroke, fill=fill)
        elif op.kind == "circle":
            out.circle(op.x, self.page_height - op.y, op.radius, stroke=stroke, fill=fill)
        elif op.kind == "line":
            out.line(op.x, self.page_height - op.y,
                     op.x + op.width, self.page_height - (op.y + op.height))

    def _ensure_open(self) -> None:
        if self._finalized:
            raise CanvasFinalizedError("Canvas has already been finalized")
