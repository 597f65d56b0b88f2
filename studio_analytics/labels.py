"""Display labels for the codes stored on transactions and revenues."""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional, Union

from .models import Bank, Category, ExpenseType, PaymentMethod

SUB_CATEGORY_LABELS = {
    "MORADIA": "Moradia",
    "ALIMENTACAO": "Alimentação",
    "TRANSPORTE": "Transporte",
    "LAZER": "Lazer",
    "SAUDE": "Saúde",
    "MATERIAL": "Material",
    "CURSOS": "Cursos",
    "MARKETING": "Marketing",
    "ALUGUEL": "Aluguel",
    "IMPOSTOS": "Impostos",
    "OUTROS": "Outros",
}

PAYMENT_METHOD_LABELS = {
    PaymentMethod.PIX: "Pix",
    PaymentMethod.CARD: "Cartão",
    PaymentMethod.CASH: "Dinheiro",
}

BANK_LABELS = {
    Bank.NUBANK: "Nubank",
    Bank.BRADESCO: "Bradesco",
    Bank.CASH: "Dinheiro",
    Bank.OTHER: "Outro",
}

TYPE_LABELS = {
    ExpenseType.PERSONAL: "Pessoal",
    ExpenseType.PROFESSIONAL: "Estúdio",
}

CATEGORY_LABELS = {
    Category.FIXED: "Fixo",
    Category.VARIABLE: "Variável",
}


def label_for(mapping: Mapping, code: Union[str, Enum, None]) -> str:
    """Look ``code`` up in ``mapping``; unknown codes are shown as-is."""

    if code is None:
        return ""
    if code in mapping:
        return mapping[code]
    return code.value if isinstance(code, Enum) else str(code)


def sub_category_label(code: Optional[str]) -> str:
    return label_for(SUB_CATEGORY_LABELS, code)


def bank_label(bank: Bank, custom_bank: Optional[str] = None) -> str:
    if bank is Bank.OTHER and custom_bank:
        return custom_bank
    return label_for(BANK_LABELS, bank)
