from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Optional

from .logging_config import get_api_logger

FuncType = Callable[..., Any]


def _describe_request(request: Any) -> str:
    if request is None:
        return "method=- path=-"
    # RequestDescriptor.path уже экранирован, склеиваем как есть.
    method = getattr(request, "method", "-")
    path = "/".join(getattr(request, "path", ()) or ()) or "-"
    return f"method={method} path=/{path}"


def log_call(
    action: Optional[str] = None,
) -> Callable[[FuncType], FuncType]:
    """Декоратор для логирования вызовов операций API.

    Ожидает, что декорируемый метод принимает первым позиционным
    аргументом после self имя операции, а именованным request —
    описание запроса (RequestDescriptor).

    Логируем на уровне INFO:
    - action (CALL/SEND)
    - operation, method, path
    - result (OK/ERROR)
    - error_type и error_message при исключениях

    Декоратор не глотает исключения — только фиксирует их в логах.
    """

    def decorator(func: FuncType) -> FuncType:
        @wraps(func)
        def wrapper(self: Any, op: str, *args: Any, **kwargs: Any) -> Any:
            logger = get_api_logger()
            act = action or func.__name__.upper()
            request_repr = _describe_request(kwargs.get("request"))

            try:
                result = func(self, op, *args, **kwargs)
            except Exception as exc:  # noqa: BLE001
                logger.error(
                    "%s operation='%s' %s result=ERROR "
                    "error_type='%s' error_message='%s'",
                    act,
                    op,
                    request_repr,
                    type(exc).__name__,
                    exc,
                )
                raise

            logger.info(
                "%s operation='%s' %s result=OK",
                act,
                op,
                request_repr,
            )
            return result

        return wrapper  # type: ignore[return-value]

    return decorator
