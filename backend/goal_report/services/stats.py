"""
Aggregate statistics for a goal, computed from its progress entries.

The report engine itself never computes these; it renders whatever
StatsSnapshot it is given. This helper exists for callers (like the API)
that only have the raw goal and progress data.
"""

from goal_report.schemas.report import GoalSnapshot, ProgressEntry, StatsSnapshot


def compute_stats(goal: GoalSnapshot, progress: list[ProgressEntry]) -> StatsSnapshot:
    """Build a StatsSnapshot for a goal.

    - total_days: the plan length, or the goal duration when no plan exists
    - completion_rate: completed / total * 100, one decimal
    - current_streak: trailing run of completed days, ordered by day
    - total_hours_spent / average_sentiment: over completed entries only;
      missing sentiment scores count as 0
    """
    ordered = sorted(progress, key=lambda entry: entry.day)
    completed = [entry for entry in ordered if entry.completed]

    total_days = goal.plan_length or goal.duration
    completed_days = len(completed)
    completion_rate = (
        round(completed_days / total_days * 100, 1) if total_days > 0 else 0.0
    )

    current_streak = 0
    for entry in reversed(ordered):
        if not entry.completed:
            break
        current_streak += 1

    total_hours = sum(entry.hours_spent or 0 for entry in completed)
    average_sentiment = (
        sum(entry.sentiment_score or 0 for entry in completed) / completed_days
        if completed_days
        else 0.0
    )

    return StatsSnapshot(
        total_days=total_days,
        completed_days=completed_days,
        completion_rate=min(completion_rate, 100.0),
        current_streak=current_streak,
        total_hours_spent=total_hours,
        average_sentiment=average_sentiment,
    )
