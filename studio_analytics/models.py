"""Data models used by the studio analytics core."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class ExpenseType(str, Enum):
    PERSONAL = "PERSONAL"
    PROFESSIONAL = "PROFESSIONAL"


class Category(str, Enum):
    FIXED = "FIXED"
    VARIABLE = "VARIABLE"


class Bank(str, Enum):
    NUBANK = "NUBANK"
    BRADESCO = "BRADESCO"
    CASH = "CASH"
    OTHER = "OTHER"


class PaymentMethod(str, Enum):
    CARD = "CARD"
    CASH = "CASH"
    PIX = "PIX"


# Sub-categories are kept as plain codes; these are the known families.
PERSONAL_SUB_CATEGORIES = (
    "MORADIA",
    "ALIMENTACAO",
    "TRANSPORTE",
    "LAZER",
    "SAUDE",
    "OUTROS",
)
PROFESSIONAL_SUB_CATEGORIES = (
    "MATERIAL",
    "CURSOS",
    "MARKETING",
    "ALUGUEL",
    "IMPOSTOS",
    "OUTROS",
)


@dataclass(frozen=True)
class Transaction:
    """A stored expense. ``installments`` is the number of monthly occurrences."""

    id: str
    description: str
    amount: float
    date: date
    type: ExpenseType
    category: Category
    sub_category: str
    bank: Bank
    installments: int = 1
    custom_bank: Optional[str] = None


@dataclass(frozen=True)
class Revenue:
    id: str
    description: str
    amount: float
    date: date
    payment_method: PaymentMethod
    type: ExpenseType


@dataclass(frozen=True)
class MonthlyExpense:
    """One occurrence of a transaction inside a queried month.

    Built fresh for every query and never stored; ``original_id`` points
    back at the source :class:`Transaction`.
    """

    id: str
    original_id: str
    description: str
    amount: float
    current_installment: int
    total_installments: int
    bank: Bank
    category: Category
    sub_category: str
    type: ExpenseType
    date: date
    custom_bank: Optional[str] = None

    @property
    def is_installment(self) -> bool:
        return self.total_installments > 1

    @property
    def installment_label(self) -> str:
        if not self.is_installment:
            return ""
        return f"{self.current_installment}/{self.total_installments}"


class WithdrawalType(str, Enum):
    PRO_LABORE = "PRO_LABORE"
    PROFIT = "PROFIT"


class ProLaboreFrequency(str, Enum):
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    FIFTEEN_DAYS = "15_DAYS"
    TWENTY_DAYS = "20_DAYS"
    MONTHLY = "MONTHLY"


@dataclass(frozen=True)
class Withdrawal:
    id: str
    amount: float
    date: date
    type: WithdrawalType
    description: str


@dataclass(frozen=True)
class SmartDistributionItem:
    percent: float
    amount: float
    label: str
    items: str


@dataclass(frozen=True)
class DistributionConfig:
    is_custom: bool
    fixed: float
    variable: float
    profit: float
    investment: float
    pro_labore: float
