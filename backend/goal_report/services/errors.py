"""
Exceptions raised by the report engine.

Two families, handled very differently by callers:
- ReportGenerationError: the render failed at runtime. The HTTP layer turns
  this into a 500. No partial document is ever returned alongside it.
- LayoutContractError: a programming mistake (drawing on a finalized canvas,
  handing a section renderer no data). These are never wrapped so they fail
  loudly in tests.
"""


class ReportError(Exception):
    """Base class for everything the report engine raises."""


class ReportGenerationError(ReportError):
    """The report could not be produced."""

    def __init__(self, message: str = "Report generation failed"):
        super().__init__(message)


class LayoutContractError(ReportError):
    """A caller broke the engine's drawing contract."""


class CanvasFinalizedError(LayoutContractError):
    """Raised when a finalized canvas is drawn on again."""
