"""
Report API endpoints.

1. POST /reports/goals/{goal_id}/pdf - Render a goal achievement report

The caller posts everything the report needs (goal, progress entries,
insights, and optionally precomputed stats). There is no database here:
fetching and authorizing goal data is the calling service's job.

Rendering is CPU-bound and synchronous, so it runs in the threadpool to
keep the event loop free. The finished PDF is streamed back in chunks.
"""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse
from starlette.concurrency import run_in_threadpool

from goal_report.schemas.report import ReportData, ReportRequest
from goal_report.services.errors import ReportGenerationError
from goal_report.services.pdf_report import ReportAssembler
from goal_report.services.stats import compute_stats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/reports", tags=["reports"])


@router.post("/goals/{goal_id}/pdf")
async def download_goal_report_pdf(goal_id: str, request: ReportRequest):
    """Render the goal report and stream it back as a PDF download.

    If the request carries no stats, they're computed from the goal's
    progress entries (completion rate, streak, hours, sentiment).
    """
    data = ReportData(
        goal=request.goal,
        progress=request.progress,
        insights=request.insights,
        stats=request.stats or compute_stats(request.goal, request.progress),
    )

    assembler = ReportAssembler()
    try:
        chunks = await run_in_threadpool(assembler.stream, data)
    except ReportGenerationError:
        logger.error("PDF generation failed for goal %s", goal_id)
        raise HTTPException(status_code=500, detail="Failed to generate PDF report")

    filename = f"goal-report-{goal_id}.pdf"
    return StreamingResponse(
        chunks,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
