"""Expand installment purchases into per-month ledger entries."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .log import get_logger
from .models import MonthlyExpense, Transaction
from .periods import month_of, months_between, shift_month

logger = get_logger(__name__)


def _occurrence(tx: Transaction, index: int) -> MonthlyExpense:
    return MonthlyExpense(
        id=f"{tx.id}-{index}",
        original_id=tx.id,
        description=tx.description,
        amount=tx.amount,
        current_installment=index + 1,
        total_installments=tx.installments,
        bank=tx.bank,
        category=tx.category,
        sub_category=tx.sub_category,
        type=tx.type,
        date=tx.date,
        custom_bank=tx.custom_bank,
    )


def occurrence_for(
    tx: Transaction, target_month: int, target_year: int
) -> Optional[MonthlyExpense]:
    """Return the occurrence of ``tx`` that falls in the target month, if any."""

    start_month, start_year = month_of(tx.date)
    index = months_between(start_month, start_year, target_month, target_year)
    if 0 <= index < tx.installments:
        return _occurrence(tx, index)
    return None


def expand_transaction(tx: Transaction) -> List[Tuple[int, int, MonthlyExpense]]:
    """Return every ``(month, year, occurrence)`` the transaction produces.

    ``installments <= 0`` produces nothing.
    """

    start_month, start_year = month_of(tx.date)
    schedule = []
    for index in range(max(tx.installments, 0)):
        month, year = shift_month(start_month, start_year, index)
        schedule.append((month, year, _occurrence(tx, index)))
    return schedule


def generate_monthly_expenses(
    transactions: Iterable[Transaction], target_month: int, target_year: int
) -> List[MonthlyExpense]:
    """Return the occurrences active in ``target_month``/``target_year``.

    Input order is preserved. Each transaction contributes at most one entry.
    """

    expenses = []
    for tx in transactions:
        occurrence = occurrence_for(tx, target_month, target_year)
        if occurrence is not None:
            expenses.append(occurrence)
    logger.debug(
        "Expanded %d occurrence(s) for %02d/%d", len(expenses), target_month + 1, target_year
    )
    return expenses
