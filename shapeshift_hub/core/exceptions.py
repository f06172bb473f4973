from __future__ import annotations

from typing import Any


class ShapeShiftError(Exception):
    """Базовое исключение для ошибок обращения к shapeshift.io.

    Хранит операцию, на которой произошла ошибка, и сырой ответ
    (если он есть) — для диагностики.
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        response: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.response = response

    def __str__(self) -> str:
        if self.operation:
            return f"[{self.operation}] {self.message}"
        return self.message


class RemoteError(ShapeShiftError):
    """Сервис явно сообщил об ошибке (поле error в ответе)."""


class ValidationError(ShapeShiftError):
    """В успешном на вид ответе отсутствует обязательное поле."""


class TransportError(ShapeShiftError):
    """Ошибка транспорта: сеть, некорректный JSON, HTTP не 2xx."""
