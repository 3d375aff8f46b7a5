"""
Test fixtures shared across the engine and API tests.

Architecture:
- Engine tests render onto a PageCanvas and inspect its display list
  (which text landed on which page, where each shape sits) instead of
  parsing PDF bytes.
- API tests use the real FastAPI app through httpx's ASGITransport.
  There's no database, so no setup/teardown beyond the client.
- The generation date is pinned so output is reproducible.
"""

from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from goal_report.main import app
from goal_report.schemas.report import (
    GoalSnapshot,
    InsightSnapshot,
    MoodPoint,
    ProgressEntry,
    ReportData,
    StatsSnapshot,
)
from goal_report.services.canvas import PageCanvas
from goal_report.services.chrome import PageChrome
from goal_report.services.layout import LayoutCursor, PageGeometry

GENERATED_ON = date(2026, 10, 16)


@pytest_asyncio.fixture
async def client():
    """Async HTTP test client over the real FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# --- Engine fixtures ---

@pytest.fixture
def chrome():
    return PageChrome(
        brand="Aivora",
        subtitle="Goal Achievement Report",
        attribution="Generated by Aivora",
        generated_on=GENERATED_ON,
    )


@pytest.fixture
def canvas():
    return PageCanvas()


@pytest.fixture
def cursor(canvas, chrome):
    """A cursor at the top of the first page's content area."""
    return LayoutCursor.start(PageGeometry.for_canvas(canvas), chrome)


# --- Report data fixtures ---

@pytest.fixture
def goal():
    return GoalSnapshot(
        title="Learn conversational Spanish",
        description=(
            "Practice every day with flashcards, a podcast episode and a short "
            "conversation with a tutor, aiming to hold a 10 minute chat by the end."
        ),
        duration=30,
        hours_per_day=1.5,
        start_date=date(2026, 1, 5),
        status="active",
        plan_length=30,
    )


@pytest.fixture
def progress():
    """20 logged days: 14 completed, every third day missed."""
    entries = []
    for day in range(1, 21):
        completed = day % 3 != 0
        entries.append(ProgressEntry(
            day=day,
            completed=completed,
            comment=f"Day {day} went fine" if day % 2 == 0 else None,
            hours_spent=1.5 if day % 4 else None,
            sentiment_score=0.4 if completed else -0.3,
        ))
    return entries


@pytest.fixture
def insight():
    return InsightSnapshot(
        summary="Consistent practice with a strong mid-month streak. Listening is ahead of speaking.",
        highlights=["Seven day streak", "Finished the first podcast season", "Tutor noted better pronunciation", "Extra"],
        recommendations=["Shadow podcast dialogues", "Book a second weekly tutor session"],
        blockers=["Evenings are often too busy"],
        motivation_level=72,
        mood_trend=[MoodPoint(day=d, score=0.1 * (d % 5)) for d in range(1, 11)],
    )


@pytest.fixture
def stats():
    return StatsSnapshot(
        total_days=30,
        completed_days=25,
        completion_rate=83.3,
        current_streak=4,
        total_hours_spent=37.5,
        average_sentiment=0.42,
    )


@pytest.fixture
def report_data(goal, progress, insight, stats):
    return ReportData(goal=goal, progress=progress, insights=[insight], stats=stats)
