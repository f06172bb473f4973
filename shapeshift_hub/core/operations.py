from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, List


class Tag(Enum):
    """Категория операции, по которой выбирается обработка."""

    PAIRWISE = "pairwise"
    POST = "post"
    NUMERIC_RESPONSE = "numeric_response"


# Операции с собственной обработкой запроса или ответа.
VALIDATE_ADDRESS = "validateAddress"
TX_BY_ADDRESS = "txbyaddress"
SEND_AMOUNT = "sendamount"
MAIL = "mail"

# ---------- Таблица операций ----------

OPERATION_TAGS: Dict[str, FrozenSet[Tag]] = {
    "rate": frozenset({Tag.PAIRWISE, Tag.NUMERIC_RESPONSE}),
    "limit": frozenset({Tag.PAIRWISE, Tag.NUMERIC_RESPONSE}),
    "marketinfo": frozenset({Tag.PAIRWISE}),
    "shift": frozenset({Tag.POST}),
    "mail": frozenset({Tag.POST}),
    "sendamount": frozenset({Tag.POST}),
    "cancelpending": frozenset({Tag.POST}),
    "txStat": frozenset(),
    "timeRemaining": frozenset(),
    "getcoins": frozenset(),
    "recenttx": frozenset(),
    "txbyapikey": frozenset(),
    "txbyaddress": frozenset(),
    "validateAddress": frozenset(),
}


def tags_of(op: str) -> FrozenSet[Tag]:
    """Категории операции; у неизвестной операции категорий нет."""
    return OPERATION_TAGS.get(op, frozenset())


def has_tag(op: str, tag: Tag) -> bool:
    return tag in tags_of(op)


def known_operations() -> List[str]:
    return sorted(OPERATION_TAGS)
