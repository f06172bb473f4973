from __future__ import annotations

import asyncio
from time import monotonic
from typing import Any

import requests

from ..core.exceptions import TransportError
from ..core.naming import resolve_operation
from ..core.normalizer import NormalizeOptions, NumberParser
from ..decorators import log_call
from ..logging_config import get_api_logger, get_transport_logger
from .config import ClientConfig
from .request_builder import RequestDescriptor, build_request
from .responses import ERROR_KEY, ApiResult, classify_response


class ShapeShiftClient:
    """Клиент shapeshift.io.

    Полный цикл вызова операции:
    алиас → имя операции → запрос → HTTP → разбор ответа → результат.

    Повторов, кеширования и ограничения частоты запросов нет.
    """

    def __init__(self, config: ClientConfig | None = None) -> None:
        self.config = config or ClientConfig()
        self._logger = get_api_logger()
        self._transport_logger = get_transport_logger()

    @log_call("SEND")
    def send(self, op: str, *, request: RequestDescriptor) -> Any:
        """Отправить запрос и вернуть разобранный JSON-ответ.

        Любая проблема транспорта (сеть, не-JSON, HTTP не 2xx без поля
        error в теле) поднимается как TransportError.
        """
        url = request.url(self.config.base_url)

        start = monotonic()
        try:
            response = requests.request(
                request.method,
                url,
                json=request.body if request.method == "POST" else None,
                timeout=self.config.request_timeout,
            )
        except requests.exceptions.RequestException as exc:
            raise TransportError(
                f"Ошибка при обращении к shapeshift.io: {exc}",
                operation=op,
            ) from exc
        elapsed_ms = int((monotonic() - start) * 1000)
        self._transport_logger.info(
            "HTTP %s %s operation='%s' status=%s elapsed_ms=%d",
            request.method,
            url,
            op,
            response.status_code,
            elapsed_ms,
        )

        try:
            payload = response.json()
        except ValueError as exc:
            raise TransportError(
                "Некорректный JSON-ответ от shapeshift.io: "
                f"HTTP {response.status_code} — {response.text[:200]}",
                operation=op,
                response=response.text,
            ) from exc

        # Ошибку сервиса в теле ответа разбирает classify_response.
        if not response.ok and not (
            isinstance(payload, dict) and ERROR_KEY in payload
        ):
            raise TransportError(
                f"Ошибка shapeshift.io: HTTP {response.status_code}",
                operation=op,
                response=payload,
            )

        return payload

    def request(
        self,
        operation: str,
        arg: Any = None,
        *,
        parse_number: NumberParser | None = None,
    ) -> ApiResult:
        """Выполнить операцию и вернуть ApiResult, не поднимая ошибок сервиса.

        operation — имя операции или алиас ("market-info").
        parse_number — парсер строк-чисел для этого ответа
        (по умолчанию Decimal).
        """
        op = resolve_operation(operation)
        descriptor = build_request(op, arg)
        body = self.send(op, request=descriptor)

        options = (
            NormalizeOptions(parse_number=parse_number)
            if parse_number is not None
            else NormalizeOptions()
        )
        result = classify_response(op, body, options)
        if not result.ok:
            self._logger.warning(
                "CALL operation='%s' result=ERROR error_type='%s' "
                "error_message='%s'",
                op,
                type(result.error).__name__,
                result.error,
            )
        return result

    def call(
        self,
        operation: str,
        arg: Any = None,
        *,
        parse_number: NumberParser | None = None,
    ) -> Any:
        """Выполнить операцию и вернуть канонический результат.

        Ошибки сервиса поднимаются как RemoteError / ValidationError,
        ошибки транспорта — как TransportError.
        """
        return self.request(operation, arg, parse_number=parse_number).unwrap()

    async def acall(
        self,
        operation: str,
        arg: Any = None,
        *,
        parse_number: NumberParser | None = None,
    ) -> Any:
        """Асинхронный вариант call: HTTP-запрос выполняется в потоке."""
        return await asyncio.to_thread(
            self.call,
            operation,
            arg,
            parse_number=parse_number,
        )
