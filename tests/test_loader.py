import json
import logging
from datetime import date

import pytest

from studio_analytics.labels import bank_label
from studio_analytics.loader import filter_by_date, load_revenues, load_transactions
from studio_analytics.models import Bank, Category, ExpenseType, PaymentMethod

TRANSACTIONS_CSV = """id,description,amount,date,type,category,sub_category,bank,custom_bank,installments
t1,Aluguel sala,300.00,2024-01-15,PROFESSIONAL,FIXED,ALUGUEL,NUBANK,,3

t2,Mercado,85.50,2024-02-02,PERSONAL,VARIABLE,ALIMENTACAO,OTHER,Inter,
"""

REVENUES_CSV = """id,description,amount,date,payment_method,type
r1,Atendimento,1000,2024-02-10,PIX,PROFESSIONAL
r2,Venda,500,2024-02-11T14:30:00.000Z,card,PROFESSIONAL
"""


def test_load_transactions_from_csv(tmp_path):
    path = tmp_path / "transactions.csv"
    path.write_text(TRANSACTIONS_CSV, encoding="utf-8")

    transactions = load_transactions(path)

    assert len(transactions) == 2
    rent, market = transactions
    assert rent.amount == 300
    assert rent.date == date(2024, 1, 15)
    assert rent.type is ExpenseType.PROFESSIONAL
    assert rent.category is Category.FIXED
    assert rent.installments == 3
    assert rent.custom_bank is None
    assert market.installments == 1
    assert market.bank is Bank.OTHER
    assert bank_label(market.bank, market.custom_bank) == "Inter"


def test_load_revenues_from_csv_accepts_datetimes_and_lowercase_codes(tmp_path):
    path = tmp_path / "revenues.csv"
    path.write_text(REVENUES_CSV, encoding="utf-8")

    revenues = load_revenues(path)

    assert [r.payment_method for r in revenues] == [PaymentMethod.PIX, PaymentMethod.CARD]
    assert revenues[1].date == date(2024, 2, 11)


def test_load_from_json_uses_app_field_names(tmp_path):
    path = tmp_path / "transactions.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": "abc",
                    "description": "Curso",
                    "amount": 450,
                    "date": "2024-03-01T00:00:00.000Z",
                    "type": "PROFESSIONAL",
                    "category": "VARIABLE",
                    "subCategory": "CURSOS",
                    "bank": "BRADESCO",
                    "installments": 2,
                }
            ]
        ),
        encoding="utf-8",
    )

    (tx,) = load_transactions(path)

    assert tx.sub_category == "CURSOS"
    assert tx.bank is Bank.BRADESCO
    assert tx.installments == 2


def test_unexpected_header_is_rejected(tmp_path):
    path = tmp_path / "revenues.csv"
    path.write_text("Date,Amount\n2024-01-01,10\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Unexpected CSV header"):
        load_revenues(path)


def test_unknown_enum_code_names_the_record(tmp_path):
    path = tmp_path / "revenues.csv"
    path.write_text(
        "id,description,amount,date,payment_method,type\nr1,x,10,2024-01-01,BOLETO,PERSONAL\n",
        encoding="utf-8",
    )

    with pytest.raises(ValueError, match="record 1"):
        load_revenues(path)


def test_empty_file_loads_nothing(tmp_path):
    path = tmp_path / "transactions.csv"
    path.write_text("", encoding="utf-8")

    assert load_transactions(path) == []


def test_filter_by_date_is_inclusive(tmp_path):
    path = tmp_path / "revenues.csv"
    path.write_text(REVENUES_CSV, encoding="utf-8")
    revenues = load_revenues(path)

    assert len(filter_by_date(revenues, date(2024, 2, 10), date(2024, 2, 11))) == 2
    assert len(filter_by_date(revenues, date(2024, 2, 11), date(2024, 2, 29))) == 1


def test_json_entries_must_be_objects(tmp_path):
    path = tmp_path / "revenues.json"
    path.write_text(json.dumps([["r", 10]]), encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid revenue record 1"):
        load_revenues(path)


def test_load_logs_record_count(tmp_path, caplog):
    path = tmp_path / "revenues.csv"
    path.write_text(REVENUES_CSV, encoding="utf-8")

    with caplog.at_level(logging.INFO, logger="studio_analytics"):
        load_revenues(path)

    assert "Loaded 2 revenue record(s)" in caplog.text
