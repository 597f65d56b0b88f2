from datetime import date

from openpyxl import load_workbook

from studio_analytics.dashboard import build_dashboard
from studio_analytics.excel import write_dashboard_workbook
from studio_analytics.models import (
    Bank,
    Category,
    ExpenseType,
    PaymentMethod,
    Revenue,
    Transaction,
)


def test_workbook_has_every_sheet(tmp_path):
    transactions = [
        Transaction(
            id="kit",
            description="Kit tintas",
            amount=600.0,
            date=date(2024, 1, 10),
            type=ExpenseType.PROFESSIONAL,
            category=Category.VARIABLE,
            sub_category="MATERIAL",
            bank=Bank.NUBANK,
            installments=3,
        )
    ]
    revenues = [
        Revenue(
            id="r",
            description="",
            amount=1000.0,
            date=date(2024, 2, 5),
            payment_method=PaymentMethod.PIX,
            type=ExpenseType.PROFESSIONAL,
        )
    ]
    dashboard = build_dashboard(transactions, revenues, 1, 2024)
    output = tmp_path / "dashboard.xlsx"

    write_dashboard_workbook(dashboard, output)

    wb = load_workbook(output)
    assert wb.sheetnames == ["Summary", "Trend", "Channels", "Costs", "Expenses"]
    assert wb["Summary"]["A3"].value == "Total Revenue"
    assert wb["Summary"]["B3"].value == 1000
    assert wb["Trend"].max_row == 7
    assert wb["Trend"]["A7"].value == "Feb"
    assert [row[0].value for row in wb["Channels"].iter_rows(min_row=2)] == [
        "Pix",
        "Cartão",
        "Dinheiro",
    ]
    assert wb["Costs"]["A2"].value == "Material"
    assert wb["Expenses"]["F2"].value == "2/3"
    assert wb["Expenses"]["G2"].value == 600
