from __future__ import annotations

import json
import shlex
from typing import Any, Dict, List, Optional

from ..api.client import ShapeShiftClient
from ..core.exceptions import RemoteError, TransportError, ValidationError
from ..core.naming import resolve_operation
from ..core.operations import OPERATION_TAGS, known_operations

_client: Optional[ShapeShiftClient] = None


def _get_client() -> ShapeShiftClient:
    global _client
    if _client is None:
        _client = ShapeShiftClient()
    return _client


def _parse_call_args(args: List[str]) -> tuple[str, Any, bool]:
    """Разбор аргументов для команды call.

    call <operation> [--pair LTC_BTC] [--arg VALUE] [--field key=value ...]
                     [--raw-numbers]
    """
    if not args:
        raise ValueError("Укажите операцию: call <operation> [параметры].")

    operation, *rest = args
    pair: str | None = None
    value: str | None = None
    fields: Dict[str, Any] = {}
    raw_numbers = False

    i = 0
    while i < len(rest):
        arg = rest[i]
        if arg == "--pair" and i + 1 < len(rest):
            pair = rest[i + 1]
            i += 2
            continue
        if arg == "--arg" and i + 1 < len(rest):
            value = rest[i + 1]
            i += 2
            continue
        if arg == "--field" and i + 1 < len(rest):
            key, sep, field_value = rest[i + 1].partition("=")
            if not sep or not key:
                raise ValueError(
                    f"Параметр --field ожидает key=value, получено: {rest[i + 1]}",
                )
            fields[key] = field_value
            i += 2
            continue
        if arg == "--raw-numbers":
            raw_numbers = True
            i += 1
            continue
        raise ValueError(f"Неизвестный аргумент для call: {arg}")

    given = [item for item in (pair, value, fields or None) if item is not None]
    if len(given) > 1:
        raise ValueError("Используйте только один из --pair, --arg или --field.")

    if pair is not None:
        return operation, pair, raw_numbers
    if fields:
        return operation, fields, raw_numbers
    return operation, value, raw_numbers


def _format_result(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, indent=2, default=str)


def _handle_call(args: List[str]) -> None:
    """Обработчик команды call."""
    try:
        operation, arg, raw_numbers = _parse_call_args(args)
    except ValueError as exc:
        print(str(exc))
        return

    parse_number = str if raw_numbers else None

    try:
        result = _get_client().call(operation, arg, parse_number=parse_number)
    except RemoteError as exc:
        print(f"shapeshift.io вернул ошибку: {exc.message}")
        return
    except ValidationError as exc:
        print(f"Неожиданный формат ответа: {exc.message}")
        return
    except TransportError as exc:
        print(str(exc))
        print(
            "Попробуйте повторить запрос позже или "
            "проверьте подключение к сети.",
        )
        return

    print(_format_result(result))


def _handle_ops(args: List[str]) -> None:
    """Обработчик команды ops: список операций и их категорий."""
    if args:
        for alias in args:
            op = resolve_operation(alias)
            tags = OPERATION_TAGS.get(op)
            if tags is None:
                print(f"- {alias} → {op} (неизвестная операция)")
            else:
                names = ", ".join(sorted(tag.value for tag in tags)) or "default"
                print(f"- {alias} → {op} [{names}]")
        return

    for op in known_operations():
        names = ", ".join(sorted(tag.value for tag in OPERATION_TAGS[op]))
        print(f"- {op}: {names or 'default'}")


def _dispatch_command(command: str, args: List[str]) -> None:
    """Диспетчер команд CLI."""
    if command == "call":
        _handle_call(args)
    elif command == "ops":
        _handle_ops(args)
    elif command in {"exit", "quit"}:
        print("Выход из ShapeShift Hub.")
        raise SystemExit
    else:
        print(
            "Неизвестная команда "
            f"'{command}'. Попробуйте: call, ops, exit.",
        )


def run_cli() -> None:
    """Основной цикл CLI."""
    print("ShapeShift Hub CLI. Введите команду или 'exit' для выхода.")
    while True:
        try:
            raw = input("> ").strip()
        except EOFError:
            print()
            break

        if not raw:
            continue

        try:
            parts = shlex.split(raw)
        except ValueError as exc:
            print(f"Ошибка разбора команды: {exc}")
            continue

        command, *arg_tokens = parts
        try:
            _dispatch_command(command, arg_tokens)
        except SystemExit:
            break
