from datetime import date

from studio_analytics.dashboard import build_dashboard
from studio_analytics.formatting import format_currency, format_dashboard, format_percent
from studio_analytics.labels import bank_label, label_for, sub_category_label, PAYMENT_METHOD_LABELS
from studio_analytics.models import (
    Bank,
    Category,
    ExpenseType,
    PaymentMethod,
    Revenue,
    Transaction,
)


def test_format_currency_uses_brazilian_separators():
    assert format_currency(1234.5) == "R$ 1.234,50"
    assert format_currency(0) == "R$ 0,00"
    assert format_currency(-200) == "-R$ 200,00"
    assert format_currency(1234567.891) == "R$ 1.234.567,89"


def test_format_percent():
    assert format_percent(-20.0) == "-20%"
    assert format_percent(33.333, 1) == "33.3%"


def test_labels_fall_back_to_raw_code():
    assert sub_category_label("ALIMENTACAO") == "Alimentação"
    assert sub_category_label("WHATEVER") == "WHATEVER"
    assert label_for(PAYMENT_METHOD_LABELS, PaymentMethod.CARD) == "Cartão"
    assert bank_label(Bank.OTHER, "Inter") == "Inter"
    assert bank_label(Bank.OTHER) == "Outro"


def test_format_dashboard_contains_sections():
    transactions = [
        Transaction(
            id="rent",
            description="Aluguel",
            amount=1200.0,
            date=date(2024, 3, 1),
            type=ExpenseType.PROFESSIONAL,
            category=Category.FIXED,
            sub_category="ALUGUEL",
            bank=Bank.BRADESCO,
        )
    ]
    revenues = [
        Revenue(
            id="r",
            description="",
            amount=1000.0,
            date=date(2024, 3, 5),
            payment_method=PaymentMethod.CASH,
            type=ExpenseType.PROFESSIONAL,
        )
    ]

    text = format_dashboard(build_dashboard(transactions, revenues, 2, 2024))

    assert text.startswith("Performance Analysis: March 2024")
    assert "Profit Margin: -20% (-20.0%)" in text
    assert "Fixed Cost (Target): R$ 1.200,00" in text
    assert "Net Result: -R$ 200,00" in text
    assert "Oct 2023" in text and "Mar 2024" in text
    assert "Dinheiro" in text
    assert "Atenção" in text


def test_format_dashboard_without_costs():
    text = format_dashboard(build_dashboard([], [], 0, 2024))

    assert "No studio expenses recorded." in text
