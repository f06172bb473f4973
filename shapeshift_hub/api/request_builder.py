from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Tuple
from urllib.parse import quote

from ..core.currencies import PAIR_SEPARATOR, pair_from_wire, pair_to_wire
from ..core.normalizer import tidy_out
from ..core.operations import TX_BY_ADDRESS, VALIDATE_ADDRESS, Tag, has_tag


@dataclass(frozen=True)
class RequestDescriptor:
    """Описание HTTP-запроса, не зависящее от транспорта."""

    path: Tuple[str, ...]
    method: str = "GET"
    body: Any = None

    def url(self, base_url: str) -> str:
        return base_url.rstrip("/") + "/" + "/".join(self.path)


def _segment(value: Any) -> str:
    """Произвольная строка (адрес, ключ API) как экранированный сегмент пути."""
    if value is None:
        return ""
    return quote(str(value), safe="")


def _pair_segment(pair: Any) -> str:
    # Некорректную пару не отклоняем: ошибку вернёт сам сервис.
    if isinstance(pair, str):
        if PAIR_SEPARATOR in pair:
            return pair_to_wire(pair_from_wire(pair))
        return pair.lower()
    if isinstance(pair, (list, tuple)) and len(pair) == 2:
        return pair_to_wire(pair)
    return _segment(pair)


def _field(arg: Any, *names: str) -> Any:
    if not isinstance(arg, Mapping):
        return None
    for name in names:
        if name in arg:
            return arg[name]
    return None


def _build_validate_address(op: str, arg: Any) -> RequestDescriptor:
    address = _field(arg, "address")
    currency = _field(arg, "currency", "symbol")
    code = currency.strip().upper() if isinstance(currency, str) else ""
    return RequestDescriptor(path=(op, _segment(address), _segment(code)))


def _build_tx_by_address(op: str, arg: Any) -> RequestDescriptor:
    address = _field(arg, "address")
    api_key = _field(arg, "api-key", "apiKey")
    return RequestDescriptor(path=(op, _segment(address), _segment(api_key)))


_OVERRIDES = {
    VALIDATE_ADDRESS: _build_validate_address,
    TX_BY_ADDRESS: _build_tx_by_address,
}


def build_request(op: str, arg: Any = None) -> RequestDescriptor:
    """Построить запрос для операции op с аргументом arg.

    Порядок выбора (от частного к общему):
    1. собственный обработчик операции (validateAddress, txbyaddress);
    2. Pairwise — /op[/ltc_btc], без аргумента запрашиваются все пары;
    3. Post — POST /op, тело — аргумент в виде API (camelCase);
    4. по умолчанию — /op[/arg].
    """
    override = _OVERRIDES.get(op)
    if override is not None:
        return override(op, arg)

    if has_tag(op, Tag.PAIRWISE):
        if arg is None:
            return RequestDescriptor(path=(op,))
        return RequestDescriptor(path=(op, _pair_segment(arg)))

    if has_tag(op, Tag.POST):
        body = tidy_out(arg) if arg is not None else {}
        return RequestDescriptor(path=(op,), method="POST", body=body)

    if arg is None:
        return RequestDescriptor(path=(op,))
    return RequestDescriptor(path=(op, _segment(arg)))
