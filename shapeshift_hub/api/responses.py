from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict

from ..core.exceptions import RemoteError, ShapeShiftError, ValidationError
from ..core.normalizer import NormalizeOptions, tidy_in
from ..core.operations import MAIL, SEND_AMOUNT, VALIDATE_ADDRESS, Tag, has_tag

EMPTY_REMOTE_ERROR = "<Empty remote error message>"

ERROR_KEY = "error"
IS_VALID_KEY = "isvalid"
SUCCESS_KEY = "success"


@dataclass(frozen=True)
class ApiResult:
    """Результат разбора ответа: либо значение, либо ошибка.

    response — сырой ответ сервиса, для диагностики.
    """

    operation: str
    value: Any = None
    error: ShapeShiftError | None = None
    response: Any = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Вернуть значение или поднять сохранённую ошибку."""
        if self.error is not None:
            raise self.error
        return self.value


def build_remote_error(op: str, body: Any) -> RemoteError:
    """Ошибка сервиса с его сообщением (или заглушкой, если оно пустое)."""
    message = body.get(ERROR_KEY) if isinstance(body, dict) else None
    if message is None or message == "":
        message = EMPTY_REMOTE_ERROR
    return RemoteError(str(message), operation=op, response=body)


def _has_remote_error(body: Any) -> bool:
    return isinstance(body, dict) and ERROR_KEY in body


_TRUE_STRINGS = {"true", "1", "yes"}


def _is_valid(value: Any) -> bool:
    # isvalid иногда приходит строкой: "false" → False.
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _numeric_field(op: str, body: Any, options: NormalizeOptions) -> ApiResult:
    if not isinstance(body, dict) or op not in body:
        return ApiResult(
            operation=op,
            error=ValidationError(
                f"В ответе нет поля '{op}'.",
                operation=op,
                response=body,
            ),
            response=body,
        )
    value = body[op]
    if isinstance(value, str):
        value = options.parse_number(value)
    return ApiResult(operation=op, value=value, response=body)


def _send_amount(op: str, body: Any, options: NormalizeOptions) -> ApiResult:
    payload = body.get(SUCCESS_KEY, body) if isinstance(body, dict) else body
    return ApiResult(operation=op, value=tidy_in(payload, options), response=body)


def _mail(op: str, body: Any, options: NormalizeOptions) -> ApiResult:
    # Содержимое ответа mail — свободный текст, типизировать нечего.
    value = body
    if isinstance(body, dict):
        value = {str(key): item for key, item in body.items()}
    return ApiResult(operation=op, value=value, response=body)


def _default(op: str, body: Any, options: NormalizeOptions) -> ApiResult:
    return ApiResult(operation=op, value=tidy_in(body, options), response=body)


Handler = Callable[[str, Any, NormalizeOptions], ApiResult]

_OVERRIDES: Dict[str, Handler] = {
    SEND_AMOUNT: _send_amount,
    MAIL: _mail,
}


def classify_response(
    op: str,
    body: Any,
    options: NormalizeOptions | None = None,
) -> ApiResult:
    """Разобрать тело ответа операции op.

    1. Поле error в ответе — ошибка сервиса (кроме validateAddress).
    2. validateAddress: если есть isvalid, возвращается оно, даже рядом
       с error — сервис иногда присылает оба поля.
    3. Дальше по операции и её категориям:
       - NumericResponse: одно число из поля с именем операции;
       - sendamount: полезная нагрузка из вложенного success;
       - mail: поля ответа как есть;
       - остальные: tidy_in по всему ответу.
    """
    if options is None:
        options = NormalizeOptions()

    if op == VALIDATE_ADDRESS:
        if isinstance(body, dict) and IS_VALID_KEY in body:
            return ApiResult(
                operation=op,
                value=_is_valid(body[IS_VALID_KEY]),
                response=body,
            )

    if _has_remote_error(body):
        return ApiResult(
            operation=op,
            error=build_remote_error(op, body),
            response=body,
        )

    if has_tag(op, Tag.NUMERIC_RESPONSE):
        return _numeric_field(op, body, options)

    handler = _OVERRIDES.get(op, _default)
    return handler(op, body, options)
