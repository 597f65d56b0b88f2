"""Ratio KPIs and narrative derived from a monthly aggregate.

Ratios are returned unrounded; callers pick the display precision. Every
function is defined for zero revenue and returns ``0.0`` there instead of
dividing.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping

from .formatting import format_currency
from .labels import sub_category_label
from .models import ExpenseType, PaymentMethod
from .summary import MonthlyAggregate


@dataclass(frozen=True)
class CostShare:
    sub_category: str
    label: str
    amount: float
    share: float


@dataclass(frozen=True)
class Insight:
    positive: bool
    message: str


def profit_margin_percent(aggregate: MonthlyAggregate) -> float:
    if aggregate.total_revenue > 0:
        return aggregate.net_profit / aggregate.total_revenue * 100
    return 0.0


def cash_efficiency_percent(aggregate: MonthlyAggregate) -> float:
    if aggregate.total_revenue > 0:
        return 100 - (aggregate.total_professional_expense / aggregate.total_revenue * 100)
    return 0.0


def fixed_cost_target(aggregate: MonthlyAggregate) -> float:
    return aggregate.fixed_by_type[ExpenseType.PROFESSIONAL]


def payment_method_shares(aggregate: MonthlyAggregate) -> Mapping[PaymentMethod, float]:
    """Percentage of revenue received through each channel."""

    by_method = aggregate.revenue_by_payment_method
    total = max(sum(by_method.values()), 1)
    return MappingProxyType(
        {method: amount / total * 100 for method, amount in by_method.items()}
    )


def top_cost_categories(aggregate: MonthlyAggregate, limit: int = 5) -> List[CostShare]:
    """Largest professional sub-categories with their share of professional spend."""

    total = aggregate.total_professional_expense or 1
    return [
        CostShare(
            sub_category=row.sub_category,
            label=sub_category_label(row.sub_category),
            amount=row.amount,
            share=row.amount / total * 100,
        )
        for row in aggregate.expense_by_sub_category[: max(limit, 0)]
    ]


def management_insight(aggregate: MonthlyAggregate) -> Insight:
    net_profit = aggregate.net_profit
    if net_profit > 0:
        return Insight(
            positive=True,
            message=(
                f"Parabéns! Seu lucro de {format_currency(net_profit)} representa uma "
                "excelente saúde financeira. Considere reinvestir parte desse valor "
                "em novos cursos."
            ),
        )
    return Insight(
        positive=False,
        message=(
            "Atenção: Seus custos estão superando os ganhos em "
            f"{format_currency(abs(net_profit))}. Revise seus gastos variáveis "
            "para equilibrar o caixa."
        ),
    )
