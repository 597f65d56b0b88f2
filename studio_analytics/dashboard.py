"""Assemble everything the dashboard shows for one month, with memoization."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from typing import Hashable, Iterable, List, Mapping, Optional, Sequence, Tuple

from . import config
from .installments import generate_monthly_expenses
from .loader import select_month
from .log import get_logger
from .metrics import (
    CostShare,
    Insight,
    cash_efficiency_percent,
    fixed_cost_target,
    management_insight,
    payment_method_shares,
    profit_margin_percent,
    top_cost_categories,
)
from .models import MonthlyExpense, PaymentMethod, Revenue, Transaction
from .periods import month_name, next_month, previous_month
from .summary import MonthlyAggregate, build_monthly_aggregate
from .trend import TrendPoint, build_trend

logger = get_logger(__name__)


@dataclass(frozen=True)
class Dashboard:
    month: int
    year: int
    expenses: Sequence[MonthlyExpense]
    revenues: Sequence[Revenue]
    aggregate: MonthlyAggregate
    trend: Sequence[TrendPoint]
    profit_margin: float
    cash_efficiency: float
    fixed_cost_target: float
    payment_shares: Mapping[PaymentMethod, float]
    top_costs: Sequence[CostShare]
    insight: Insight

    @property
    def title(self) -> str:
        return f"{month_name(self.month)} {self.year}"


def build_dashboard(
    transactions: Sequence[Transaction],
    revenues: Sequence[Revenue],
    month: int,
    year: int,
    window_size: int = config.TREND_WINDOW,
    top_limit: int = config.TOP_COST_LIMIT,
) -> Dashboard:
    expenses = generate_monthly_expenses(transactions, month, year)
    month_revenues = select_month(revenues, month, year)
    aggregate = build_monthly_aggregate(expenses, month_revenues)
    return Dashboard(
        month=month,
        year=year,
        expenses=tuple(expenses),
        revenues=tuple(month_revenues),
        aggregate=aggregate,
        trend=tuple(build_trend(transactions, revenues, month, year, window_size)),
        profit_margin=profit_margin_percent(aggregate),
        cash_efficiency=cash_efficiency_percent(aggregate),
        fixed_cost_target=fixed_cost_target(aggregate),
        payment_shares=payment_method_shares(aggregate),
        top_costs=tuple(top_cost_categories(aggregate, top_limit)),
        insight=management_insight(aggregate),
    )


class DashboardCache:
    """Least-recently-used memo of :func:`build_dashboard` results.

    Keys are built from the input values (transactions and revenues are
    frozen dataclasses), so an edited collection is a different key.
    """

    def __init__(self, maxsize: int = config.CACHE_SIZE) -> None:
        self.maxsize = maxsize
        self.hits = 0
        self.misses = 0
        self._entries: "OrderedDict[Hashable, Dashboard]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def get(
        self,
        transactions: Iterable[Transaction],
        revenues: Iterable[Revenue],
        month: int,
        year: int,
        window_size: int = config.TREND_WINDOW,
        top_limit: int = config.TOP_COST_LIMIT,
    ) -> Dashboard:
        transactions = tuple(transactions)
        revenues = tuple(revenues)
        key = (transactions, revenues, month, year, window_size, top_limit)
        cached = self._entries.get(key)
        if cached is not None:
            self.hits += 1
            self._entries.move_to_end(key)
            logger.debug("Dashboard cache hit for %02d/%d", month + 1, year)
            return cached

        self.misses += 1
        dashboard = build_dashboard(transactions, revenues, month, year, window_size, top_limit)
        self._entries[key] = dashboard
        while len(self._entries) > max(self.maxsize, 0):
            self._entries.popitem(last=False)
        return dashboard

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0


class DashboardNavigator:
    """Tracks the selected month and serves dashboards for prev/next moves."""

    def __init__(
        self,
        transactions: Sequence[Transaction],
        revenues: Sequence[Revenue],
        month: int,
        year: int,
        cache: Optional[DashboardCache] = None,
        window_size: int = config.TREND_WINDOW,
        top_limit: int = config.TOP_COST_LIMIT,
    ) -> None:
        self.transactions = list(transactions)
        self.revenues = list(revenues)
        self.month = month
        self.year = year
        self.cache = cache if cache is not None else DashboardCache()
        self.window_size = window_size
        self.top_limit = top_limit

    @property
    def position(self) -> Tuple[int, int]:
        return self.month, self.year

    def current(self) -> Dashboard:
        return self.cache.get(
            self.transactions,
            self.revenues,
            self.month,
            self.year,
            self.window_size,
            self.top_limit,
        )

    def previous(self) -> Dashboard:
        self.month, self.year = previous_month(self.month, self.year)
        return self.current()

    def next(self) -> Dashboard:
        self.month, self.year = next_month(self.month, self.year)
        return self.current()

    def replace_data(
        self,
        transactions: Optional[List[Transaction]] = None,
        revenues: Optional[List[Revenue]] = None,
    ) -> None:
        if transactions is not None:
            self.transactions = list(transactions)
        if revenues is not None:
            self.revenues = list(revenues)
