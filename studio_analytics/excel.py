from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from .dashboard import Dashboard
from .labels import (
    CATEGORY_LABELS,
    PAYMENT_METHOD_LABELS,
    TYPE_LABELS,
    bank_label,
    label_for,
    sub_category_label,
)
from .log import get_logger
from .periods import month_bounds

logger = get_logger(__name__)

CURRENCY_FORMAT = '"R$" #,##0.00'
PERCENT_FORMAT = "0.0"


def _append_table(ws, headers: Sequence[str], rows: Iterable[Sequence], money_cols=(), percent_cols=()) -> None:
    from openpyxl.styles import Font

    ws.append(list(headers))
    for row in rows:
        ws.append(list(row))
        row_idx = ws.max_row
        for col in money_cols:
            ws.cell(row=row_idx, column=col).number_format = CURRENCY_FORMAT
        for col in percent_cols:
            ws.cell(row=row_idx, column=col).number_format = PERCENT_FORMAT
    for cell in ws[1]:
        cell.font = Font(bold=True)


def _fill_summary(ws, dashboard: Dashboard) -> None:
    aggregate = dashboard.aggregate
    start, end = month_bounds(dashboard.month, dashboard.year)
    ws["A1"] = "Period"
    ws["B1"] = start
    ws["C1"] = end
    rows = [
        ("Total Revenue", aggregate.total_revenue, False),
        ("Studio Costs", aggregate.total_professional_expense, False),
        ("Personal Costs", aggregate.total_personal_expense, False),
        ("Net Result", aggregate.net_profit, False),
        ("Fixed Cost (Target)", dashboard.fixed_cost_target, False),
        ("Profit Margin %", dashboard.profit_margin, True),
        ("Cash Efficiency %", dashboard.cash_efficiency, True),
    ]
    for offset, (label, value, is_percent) in enumerate(rows, start=3):
        ws.cell(row=offset, column=1).value = label
        cell = ws.cell(row=offset, column=2)
        cell.value = round(value, 2)
        cell.number_format = PERCENT_FORMAT if is_percent else CURRENCY_FORMAT
    ws.cell(row=len(rows) + 4, column=1).value = "Insight"
    ws.cell(row=len(rows) + 4, column=2).value = dashboard.insight.message


def write_dashboard_workbook(dashboard: Dashboard, output_path: Path) -> None:
    """
    Write the month's dashboard to a new workbook at ``output_path`` with
    Summary, Trend, Channels, Costs and Expenses sheets.
    """

    try:
        from openpyxl import Workbook
    except Exception as exc:  # pragma: no cover - dependency guidance
        raise SystemExit(
            "openpyxl is required for Excel output. Install with: pip install openpyxl"
        ) from exc

    wb = Workbook()
    summary_ws = wb.active
    summary_ws.title = "Summary"
    _fill_summary(summary_ws, dashboard)

    _append_table(
        wb.create_sheet("Trend"),
        ["Month", "Year", "Revenue", "Costs", "Profit"],
        (
            [p.label, p.year, round(p.revenue, 2), round(p.expense, 2), round(p.profit, 2)]
            for p in dashboard.trend
        ),
        money_cols=(3, 4, 5),
    )
    _append_table(
        wb.create_sheet("Channels"),
        ["Channel", "Amount", "Share %"],
        (
            [
                label_for(PAYMENT_METHOD_LABELS, method),
                round(amount, 2),
                round(dashboard.payment_shares[method], 2),
            ]
            for method, amount in dashboard.aggregate.revenue_by_payment_method.items()
        ),
        money_cols=(2,),
        percent_cols=(3,),
    )
    _append_table(
        wb.create_sheet("Costs"),
        ["Sub-category", "Amount", "Share %"],
        ([c.label, round(c.amount, 2), round(c.share, 2)] for c in dashboard.top_costs),
        money_cols=(2,),
        percent_cols=(3,),
    )
    _append_table(
        wb.create_sheet("Expenses"),
        ["Description", "Type", "Category", "Sub-category", "Bank", "Installment", "Amount"],
        (
            [
                e.description,
                label_for(TYPE_LABELS, e.type),
                label_for(CATEGORY_LABELS, e.category),
                sub_category_label(e.sub_category),
                bank_label(e.bank, e.custom_bank),
                e.installment_label,
                round(e.amount, 2),
            ]
            for e in dashboard.expenses
        ),
        money_cols=(7,),
    )

    wb.save(str(output_path))
    logger.info("Wrote dashboard workbook to %s", output_path)
