from __future__ import annotations

import re
from typing import AbstractSet, List

from ..infra.settings import SettingsLoader

# Слова внутри camelCase / snake_case / kebab-case идентификатора:
# "incomingCoin" → incoming, Coin; "txURI" → tx, URI; "no_deposits" → no, deposits.
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z]+|[0-9]+")


def split_words(identifier: str) -> List[str]:
    return _WORD_RE.findall(identifier)


def to_canonical_key(key: str) -> str:
    """Ключ в каноническом виде: слова в нижнем регистре через дефис.

    Ключи, в которых не нашлось ни одного слова, возвращаются как есть.
    """
    words = split_words(key)
    if not words:
        return key
    return "-".join(word.lower() for word in words)


def to_wire_key(key: str) -> str:
    """Ключ в виде API: camelCase ("return-address" → "returnAddress")."""
    words = split_words(key)
    if not words:
        return key
    first, *rest = words
    return first.lower() + "".join(word.capitalize() for word in rest)


def resolve_operation(
    identifier: str,
    no_camel: AbstractSet[str] | None = None,
) -> str:
    """Вернуть имя операции API по идентификатору.

    Идентификатор — либо уже имя операции ("txStat", "marketinfo"),
    либо алиас через дефис ("tx-stat", "market-info").

    Правила:
    - без дефисов — имя возвращается без изменений;
    - алиас из набора no_camel — только удаляем дефисы
      ("market-info" → "marketinfo");
    - остальные алиасы — camelCase ("tx-stat" → "txStat").
    """
    if not isinstance(identifier, str):
        raise TypeError("Идентификатор операции должен быть строкой.")

    name = identifier.strip()
    if not name:
        raise ValueError("Идентификатор операции не может быть пустым.")
    if "-" not in name:
        return name

    if no_camel is None:
        no_camel = SettingsLoader().get("no_camel_aliases", frozenset())

    alias = name.lower()
    words = [word for word in alias.split("-") if word]
    if alias in no_camel or not words:
        return "".join(words)

    first, *rest = words
    return first + "".join(word.capitalize() for word in rest)
