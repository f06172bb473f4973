from __future__ import annotations

from typing import Sequence, Tuple

# Каноническая пара: два кода в верхнем регистре, например ("LTC", "BTC").
CurrencyPair = Tuple[str, str]

PAIR_SEPARATOR = "_"


def pair_to_wire(pair: Sequence[str]) -> str:
    """Пара → строка для API: ("LTC", "BTC") → "ltc_btc"."""
    if isinstance(pair, str) or len(pair) != 2:
        raise ValueError(
            f"Валютная пара должна состоять из двух кодов, получено: {pair!r}",
        )
    left, right = (str(code).strip().lower() for code in pair)
    return f"{left}{PAIR_SEPARATOR}{right}"


def pair_from_wire(text: str) -> CurrencyPair:
    """Строка API → каноническая пара: "ltc_btc" → ("LTC", "BTC").

    Повторный разбор уже разобранной строки даёт тот же результат.
    """
    try:
        left, right = text.split(PAIR_SEPARATOR, 1)
    except ValueError as exc:
        raise ValueError(f"Некорректная валютная пара: {text!r}") from exc
    return left.strip().upper(), right.strip().upper()
