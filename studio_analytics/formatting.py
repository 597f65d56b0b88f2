"""Utility helpers for turning dashboard objects into text."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .labels import PAYMENT_METHOD_LABELS, label_for

if TYPE_CHECKING:
    from .dashboard import Dashboard


def format_currency(value: float) -> str:
    """Format ``value`` as Brazilian reais, e.g. ``R$ 1.234,56``."""

    text = f"{abs(value):,.2f}"
    # Swap the separators: 1,234.56 -> 1.234,56
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if round(value, 2) < 0 else ""
    return f"{sign}R$ {text}"


def format_percent(value: float, decimals: int = 0) -> str:
    return f"{value:.{decimals}f}%"


def _column_widths(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> Sequence[int]:
    widths = [len(h) for h in headers]
    for row in rows:
        for idx, cell in enumerate(row):
            widths[idx] = max(widths[idx], len(cell))
    return widths


def _format_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    widths = _column_widths(headers, rows)

    def format_row(row: Sequence[str]) -> str:
        return " | ".join(cell.ljust(widths[idx]) for idx, cell in enumerate(row))

    header_line = format_row(headers)
    separator = "-+-".join("-" * w for w in widths)
    body = "\n".join(format_row(row) for row in rows)
    return "\n".join([header_line, separator, body]) if body else "\n".join(
        [header_line, separator]
    )


def format_trend(dashboard: "Dashboard") -> str:
    rows = [
        [
            f"{point.label} {point.year}",
            format_currency(point.revenue),
            format_currency(point.expense),
            format_currency(point.profit),
        ]
        for point in dashboard.trend
    ]
    return _format_table(["Month", "Revenue", "Costs", "Profit"], rows)


def format_channels(dashboard: "Dashboard") -> str:
    by_method = dashboard.aggregate.revenue_by_payment_method
    rows = [
        [
            label_for(PAYMENT_METHOD_LABELS, method),
            format_currency(amount),
            format_percent(dashboard.payment_shares[method], 1),
        ]
        for method, amount in by_method.items()
    ]
    return _format_table(["Channel", "Amount", "Share"], rows)


def format_top_costs(dashboard: "Dashboard") -> str:
    if not dashboard.top_costs:
        return "No studio expenses recorded."
    rows = [
        [cost.label, format_currency(cost.amount), format_percent(cost.share, 1)]
        for cost in dashboard.top_costs
    ]
    return _format_table(["Sub-category", "Amount", "Share"], rows)


def format_dashboard(dashboard: "Dashboard") -> str:
    aggregate = dashboard.aggregate
    direction = "+" if aggregate.net_profit >= 0 else "-"
    header_lines = [
        f"Performance Analysis: {dashboard.title}",
        f"Profit Margin: {format_percent(dashboard.profit_margin)} "
        f"({direction}{format_percent(abs(dashboard.profit_margin), 1)})",
        f"Fixed Cost (Target): {format_currency(dashboard.fixed_cost_target)}",
        f"Cash Efficiency: {format_percent(dashboard.cash_efficiency)}",
        f"Total Revenue: {format_currency(aggregate.total_revenue)}",
        f"Studio Costs: {format_currency(aggregate.total_professional_expense)}",
        f"Personal Costs: {format_currency(aggregate.total_personal_expense)}",
        f"Net Result: {format_currency(aggregate.net_profit)}",
    ]
    sections = [
        "\n".join(header_lines),
        f"Revenue Trend (last {len(dashboard.trend)} months)\n" + format_trend(dashboard),
        "Revenue Channels\n" + format_channels(dashboard),
        "Top Costs\n" + format_top_costs(dashboard),
        "Insight\n" + dashboard.insight.message,
    ]
    return "\n\n".join(sections)
