"""Rolling month-by-month trend series."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .installments import generate_monthly_expenses
from .loader import select_month
from .log import get_logger
from .models import Revenue, Transaction
from .periods import shift_month, short_month_name
from .summary import build_monthly_aggregate

logger = get_logger(__name__)

DEFAULT_WINDOW = 6


@dataclass(frozen=True)
class TrendPoint:
    label: str
    month: int
    year: int
    expense: float
    revenue: float

    @property
    def profit(self) -> float:
        return self.revenue - self.expense


def build_trend(
    transactions: Sequence[Transaction],
    revenues: Sequence[Revenue],
    target_month: int,
    target_year: int,
    window_size: int = DEFAULT_WINDOW,
) -> List[TrendPoint]:
    """Return ``window_size`` points ending at the target month, oldest first.

    ``expense`` is the professional expense total of each month.
    """

    points = []
    for offset in range(window_size - 1, -1, -1):
        month, year = shift_month(target_month, target_year, -offset)
        aggregate = build_monthly_aggregate(
            generate_monthly_expenses(transactions, month, year),
            select_month(revenues, month, year),
        )
        points.append(
            TrendPoint(
                label=short_month_name(month),
                month=month,
                year=year,
                expense=aggregate.total_professional_expense,
                revenue=aggregate.total_revenue,
            )
        )
    logger.debug("Built %d trend point(s) ending %02d/%d", len(points), target_month + 1, target_year)
    return points

