"""
Pydantic schemas for the goal report.

These are the engine's only input. They're built once (by the API layer
or any other caller) and never mutated during a render, so every model
is frozen.

JSON uses camelCase (hoursPerDay, startDate, ...) to match the clients
that post goal data; snake_case field names are accepted too.
"""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class SnapshotModel(BaseModel):
    """Shared config: frozen, camelCase aliases, snake_case accepted."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class GoalSnapshot(SnapshotModel):
    title: str
    description: Optional[str] = None
    duration: int = Field(gt=0)
    hours_per_day: float = Field(gt=0)
    start_date: date
    status: Literal["active", "completed", "abandoned"] = "active"
    plan_length: int = Field(default=0, ge=0)

    @field_validator("start_date", mode="before")
    @classmethod
    def accept_timestamps(cls, value):
        """Accept full ISO timestamps ("2026-01-05T08:30:00Z") by keeping the date."""
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and "T" in value:
            return value.split("T", 1)[0]
        return value


class ProgressEntry(SnapshotModel):
    day: int = Field(gt=0)
    completed: bool = False
    comment: Optional[str] = Field(default=None, max_length=1000)
    hours_spent: Optional[float] = Field(default=None, ge=0)
    sentiment_score: Optional[float] = Field(default=None, ge=-1, le=1)


class MoodPoint(SnapshotModel):
    day: int
    score: float


class InsightSnapshot(SnapshotModel):
    summary: str
    highlights: list[str] = []
    recommendations: list[str] = []
    blockers: list[str] = []
    motivation_level: int = Field(default=50, ge=0, le=100)
    mood_trend: list[MoodPoint] = []


class StatsSnapshot(SnapshotModel):
    total_days: int = Field(ge=0)
    completed_days: int = Field(ge=0)
    completion_rate: float = Field(ge=0, le=100)
    current_streak: int = Field(ge=0)
    total_hours_spent: float = Field(ge=0)
    average_sentiment: float = Field(ge=-1, le=1)


def _check_unique_days(progress: list[ProgressEntry]) -> None:
    days = [entry.day for entry in progress]
    if len(days) != len(set(days)):
        raise ValueError("progress entries must have unique day numbers")


class ReportData(SnapshotModel):
    """Everything a single report render needs.

    insights are ordered most recent first; only insights[0] is rendered.
    """
    goal: GoalSnapshot
    progress: list[ProgressEntry] = []
    insights: list[InsightSnapshot] = []
    stats: StatsSnapshot

    @model_validator(mode="after")
    def unique_progress_days(self):
        _check_unique_days(self.progress)
        return self


class ReportRequest(SnapshotModel):
    """Request body for the PDF endpoint.

    stats is optional: when omitted, the API computes it from the goal
    and its progress entries.
    """
    goal: GoalSnapshot
    progress: list[ProgressEntry] = []
    insights: list[InsightSnapshot] = []
    stats: Optional[StatsSnapshot] = None

    @model_validator(mode="after")
    def unique_progress_days(self):
        _check_unique_days(self.progress)
        return self
