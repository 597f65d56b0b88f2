"""Helpers for loading transactions and revenues from CSV or JSON exports."""

from __future__ import annotations

import csv
import json
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Type, TypeVar

from .log import get_logger
from .models import Bank, Category, ExpenseType, PaymentMethod, Revenue, Transaction
from .periods import month_of

logger = get_logger(__name__)

TRANSACTION_HEADER = [
    "id",
    "description",
    "amount",
    "date",
    "type",
    "category",
    "sub_category",
    "bank",
    "custom_bank",
    "installments",
]

REVENUE_HEADER = [
    "id",
    "description",
    "amount",
    "date",
    "payment_method",
    "type",
]

# JSON exports use the field names of the web app.
_JSON_KEYS = {
    "subCategory": "sub_category",
    "customBank": "custom_bank",
    "paymentMethod": "payment_method",
}

E = TypeVar("E", bound=Enum)
R = TypeVar("R", Transaction, Revenue)


def _iter_clean_rows(path: Path) -> Iterator[List[str]]:
    with path.open(newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.reader(csvfile)
        for row in reader:
            if not any(field.strip() for field in row):
                continue
            yield row


def _read_csv(path: Path, expected_header: List[str]) -> List[Dict[str, str]]:
    rows = list(_iter_clean_rows(path))
    if not rows:
        return []
    header, *data_rows = rows
    if [h.strip() for h in header] != expected_header:
        raise ValueError(f"Unexpected CSV header in {path}: {header}")
    return [dict(zip(expected_header, (cell.strip() for cell in raw))) for raw in data_rows]


def _read_json(path: Path, kind: str) -> List[Dict[str, object]]:
    with path.open(encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, list):
        raise ValueError(f"Expected a JSON list of records in {path}")
    records = []
    for line, record in enumerate(payload, start=1):
        if not isinstance(record, dict):
            raise ValueError(f"Invalid {kind} record {line} in {path}: expected an object")
        records.append({_JSON_KEYS.get(key, key): value for key, value in record.items()})
    return records


def _parse_date(value: object) -> date:
    text = str(value or "").strip()
    if not text:
        raise ValueError("missing date")
    # ISO strings may carry a time part; only the calendar day matters.
    return datetime.strptime(text[:10], "%Y-%m-%d").date()


def _parse_enum(enum_cls: Type[E], value: object) -> E:
    code = str(value or "").strip().upper()
    try:
        return enum_cls(code)
    except ValueError:
        raise ValueError(f"unknown {enum_cls.__name__} code {value!r}") from None


def _parse_transaction(record: Mapping[str, object]) -> Transaction:
    installments = record.get("installments")
    return Transaction(
        id=str(record["id"]),
        description=str(record.get("description") or ""),
        amount=float(record["amount"]),
        date=_parse_date(record.get("date")),
        type=_parse_enum(ExpenseType, record.get("type")),
        category=_parse_enum(Category, record.get("category")),
        sub_category=str(record.get("sub_category") or "").strip(),
        bank=_parse_enum(Bank, record.get("bank")),
        installments=int(installments) if installments not in (None, "") else 1,
        custom_bank=str(record["custom_bank"]) if record.get("custom_bank") else None,
    )


def _parse_revenue(record: Mapping[str, object]) -> Revenue:
    return Revenue(
        id=str(record["id"]),
        description=str(record.get("description") or ""),
        amount=float(record["amount"]),
        date=_parse_date(record.get("date")),
        payment_method=_parse_enum(PaymentMethod, record.get("payment_method")),
        type=_parse_enum(ExpenseType, record.get("type")),
    )


def _load(path: str | Path, header: List[str], parse, kind: str) -> list:
    path = Path(path)
    if path.suffix.lower() == ".json":
        records = _read_json(path, kind)
    else:
        records = _read_csv(path, header)

    items = []
    for line, record in enumerate(records, start=1):
        try:
            items.append(parse(record))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Invalid {kind} record {line} in {path}: {exc}") from exc
    logger.info("Loaded %d %s record(s) from %s", len(items), kind, path)
    return items


def load_transactions(path: str | Path) -> List[Transaction]:
    """Load expense transactions from a CSV or JSON export."""

    return _load(path, TRANSACTION_HEADER, _parse_transaction, "transaction")


def load_revenues(path: str | Path) -> List[Revenue]:
    """Load revenues from a CSV or JSON export."""

    return _load(path, REVENUE_HEADER, _parse_revenue, "revenue")


def select_month(
    revenues: Iterable[Revenue], target_month: int, target_year: int
) -> List[Revenue]:
    """Return revenues dated inside the target month, keeping input order."""

    return [r for r in revenues if month_of(r.date) == (target_month, target_year)]


def filter_by_date(records: Iterable[R], start: date, end: date) -> List[R]:
    """Return records dated between ``start`` and ``end`` (inclusive)."""

    return [r for r in records if start <= r.date <= end]
