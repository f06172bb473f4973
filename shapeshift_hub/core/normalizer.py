from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Any, Callable, Dict

from ..infra.settings import SettingsLoader
from .currencies import PAIR_SEPARATOR, pair_from_wire, pair_to_wire
from .naming import to_canonical_key, to_wire_key
from .utils import is_currency_like, is_numeric_like, parse_decimal

NumberParser = Callable[[str], Any]

PAIR_KEY = "pair"
STATUS_KEY = "status"


def _default_currency_value_keys() -> AbstractSet[str]:
    return SettingsLoader().get("currency_value_keys", frozenset())


@dataclass(frozen=True)
class NormalizeOptions:
    """Параметры одного прохода нормализации.

    Передаются явно в каждый рекурсивный вызов:
    - parse_number: парсер строк вида "1.23" (по умолчанию Decimal);
    - currency_value_keys: канонические ключи, значения которых — коды валют.
    """

    parse_number: NumberParser = parse_decimal
    currency_value_keys: AbstractSet[str] = field(
        default_factory=_default_currency_value_keys,
    )


def _tidy_key(key: Any) -> Any:
    if not isinstance(key, str) or is_currency_like(key):
        return key
    return to_canonical_key(key)


def _rule_key(raw_key: Any) -> Any:
    # Правила для значений сверяются с ключом ответа в каноническом виде,
    # даже если сам ключ в результате сохранён как есть ("curIn" → "cur-in").
    if not isinstance(raw_key, str):
        return raw_key
    return to_canonical_key(raw_key)


def _tidy_value(key: Any, value: Any, options: NormalizeOptions) -> Any:
    if key == PAIR_KEY and isinstance(value, str) and PAIR_SEPARATOR in value:
        return pair_from_wire(value)
    if key == STATUS_KEY and isinstance(value, str):
        return to_canonical_key(value)
    if key in options.currency_value_keys and isinstance(value, str):
        return value.upper()
    return tidy_in(value, options)


def tidy_in(value: Any, options: NormalizeOptions | None = None) -> Any:
    """Ответ API → канонический вид (рекурсивно, в глубину).

    Для словаря каждый ключ приводится к виду "incoming-coin", если только
    сам ключ не похож на код валюты (ключи ответа getcoins — "BTC", "LTC").
    Значение обрабатывается по первому подошедшему правилу:
    1. поле pair — строка "ltc_btc" превращается в ("LTC", "BTC");
    2. поле status — строка в виде "no-deposits";
    3. поле с кодом валюты — значение в верхнем регистре;
    4. строка-число — через options.parse_number;
    5. остальное — без изменений (списки и словари обходятся рекурсивно).
    """
    if options is None:
        options = NormalizeOptions()

    if isinstance(value, dict):
        result: Dict[Any, Any] = {}
        for raw_key, raw_value in value.items():
            result[_tidy_key(raw_key)] = _tidy_value(
                _rule_key(raw_key),
                raw_value,
                options,
            )
        return result
    if isinstance(value, list):
        return [tidy_in(item, options) for item in value]
    if is_numeric_like(value):
        return options.parse_number(value)
    return value


def tidy_out(value: Any) -> Any:
    """Канонический вид → тело запроса: ключи в camelCase, пара — строкой."""
    if isinstance(value, dict):
        result: Dict[Any, Any] = {}
        for raw_key, raw_value in value.items():
            key = to_wire_key(raw_key) if isinstance(raw_key, str) else raw_key
            if key == PAIR_KEY and isinstance(raw_value, (list, tuple)):
                result[key] = pair_to_wire(raw_value)
            else:
                result[key] = tidy_out(raw_value)
        return result
    if isinstance(value, (list, tuple)):
        return [tidy_out(item) for item in value]
    return value
