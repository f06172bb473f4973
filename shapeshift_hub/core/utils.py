from __future__ import annotations

import re
from decimal import Decimal
from typing import Any

_NUMERIC_RE = re.compile(r"-?\d+(\.\d+)?", re.ASCII)
_CURRENCY_RE = re.compile(r"[a-z]{3,6}", re.IGNORECASE)


def is_numeric_like(value: Any) -> bool:
    """Строка вида 123, -0.5, 7.701 — и ничего больше."""
    return isinstance(value, str) and _NUMERIC_RE.fullmatch(value) is not None


def is_currency_like(token: Any) -> bool:
    """Похоже ли значение на код валюты: 3–6 латинских букв, регистр не важен."""
    return isinstance(token, str) and _CURRENCY_RE.fullmatch(token) is not None


def parse_decimal(text: str) -> Decimal:
    """Парсер чисел по умолчанию: произвольная точность через Decimal."""
    return Decimal(text)
