"""
Display formatting for report values.

Rounding is half-up (0.5 → 1, -0.5 → -1), computed on the decimal text of
the value so 0.425 rounds like the number a user typed, not like its
binary approximation.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

Number = Union[int, float]

COMMENT_PREVIEW_LIMIT = 35
COMMENT_PREVIEW_KEEP = 32
NO_COMMENT = "No comment"


def round_half_up(value: Number) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_number(value: Number) -> str:
    """Render 2.0 as "2" and 2.5 as "2.5" (at most two decimals)."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_completion_rate(rate: Number) -> str:
    return f"{round_half_up(rate)}%"


def format_sentiment(score: Number) -> str:
    """Signed percentage: 0.42 → "+42", -0.2 → "-20". The sign is shown
    only for positive scores."""
    value = round_half_up(Decimal(str(score)) * 100)
    return f"+{value}" if score > 0 else str(value)


def format_hours(hours: Optional[Number]) -> str:
    if hours is None:
        return "-"
    return f"{format_number(hours)}h"


def comment_preview(comment: Optional[str]) -> Optional[str]:
    """Truncate a progress comment for its table cell.

    Returns None when there is no comment; callers draw the placeholder.
    """
    if not comment:
        return None
    if len(comment) > COMMENT_PREVIEW_LIMIT:
        return comment[:COMMENT_PREVIEW_KEEP] + "..."
    return comment


def format_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")
