"""Aggregate one month of expenses and revenues."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence

from .log import get_logger
from .models import Category, ExpenseType, MonthlyExpense, PaymentMethod, Revenue

logger = get_logger(__name__)

# Order in which payment channels are reported.
PAYMENT_METHOD_ORDER = (PaymentMethod.PIX, PaymentMethod.CARD, PaymentMethod.CASH)


@dataclass(frozen=True)
class SubCategoryTotal:
    sub_category: str
    amount: float


@dataclass(frozen=True)
class MonthlyAggregate:
    total_by_type: Mapping[ExpenseType, float]
    fixed_by_type: Mapping[ExpenseType, float]
    total_revenue: float
    revenue_by_payment_method: Mapping[PaymentMethod, float]
    expense_by_sub_category: Sequence[SubCategoryTotal]

    @property
    def total_professional_expense(self) -> float:
        return self.total_by_type[ExpenseType.PROFESSIONAL]

    @property
    def total_personal_expense(self) -> float:
        return self.total_by_type[ExpenseType.PERSONAL]

    @property
    def total_expense(self) -> float:
        return sum(self.total_by_type.values())

    @property
    def net_profit(self) -> float:
        return self.total_revenue - self.total_professional_expense


def _zero_by_type() -> Dict[ExpenseType, float]:
    return {expense_type: 0.0 for expense_type in ExpenseType}


def build_monthly_aggregate(
    expenses: Iterable[MonthlyExpense], revenues: Iterable[Revenue]
) -> MonthlyAggregate:
    total_by_type = _zero_by_type()
    fixed_by_type = _zero_by_type()
    by_sub_category: Dict[str, float] = {}

    for expense in expenses:
        total_by_type[expense.type] += expense.amount
        if expense.category is Category.FIXED:
            fixed_by_type[expense.type] += expense.amount
        if expense.type is ExpenseType.PROFESSIONAL:
            by_sub_category[expense.sub_category] = (
                by_sub_category.get(expense.sub_category, 0.0) + expense.amount
            )

    total_revenue = 0.0
    by_method = {method: 0.0 for method in PAYMENT_METHOD_ORDER}
    for revenue in revenues:
        total_revenue += revenue.amount
        by_method[revenue.payment_method] += revenue.amount

    # sorted() is stable, so equal sums keep first-seen order.
    breakdown: List[SubCategoryTotal] = [
        SubCategoryTotal(sub_category=code, amount=amount)
        for code, amount in sorted(
            by_sub_category.items(), key=lambda item: item[1], reverse=True
        )
    ]

    # Cached dashboards share these mappings; they must stay read-only.
    aggregate = MonthlyAggregate(
        total_by_type=MappingProxyType(total_by_type),
        fixed_by_type=MappingProxyType(fixed_by_type),
        total_revenue=total_revenue,
        revenue_by_payment_method=MappingProxyType(by_method),
        expense_by_sub_category=tuple(breakdown),
    )
    logger.debug(
        "Aggregate: revenue=%.2f professional=%.2f personal=%.2f",
        aggregate.total_revenue,
        aggregate.total_professional_expense,
        aggregate.total_personal_expense,
    )
    return aggregate
