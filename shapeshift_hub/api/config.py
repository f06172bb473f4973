from __future__ import annotations

import os
from dataclasses import dataclass, field

from ..infra.settings import SettingsLoader

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class ClientConfig:
    """Конфигурация клиента shapeshift.io.

    Здесь фиксируем:
    - base_host: хост API (из SettingsLoader, по умолчанию shapeshift.io);
    - use_cors_proxy: ходить ли через CORS-прокси. Решение принимает
      вызывающий код; по умолчанию читается из SHAPESHIFT_USE_CORS_PROXY;
    - cors_proxy_subdomain: поддомен прокси (cors.shapeshift.io);
    - scheme: схема URL;
    - request_timeout: таймаут одного HTTP-запроса в секундах.
    """

    base_host: str = field(
        default_factory=lambda: SettingsLoader().get("base_host"),
    )
    use_cors_proxy: bool = field(
        default_factory=lambda: _env_flag("SHAPESHIFT_USE_CORS_PROXY"),
    )
    cors_proxy_subdomain: str = field(
        default_factory=lambda: SettingsLoader().get("cors_proxy_subdomain"),
    )
    scheme: str = field(
        default_factory=lambda: SettingsLoader().get("scheme"),
    )
    request_timeout: float = field(
        default_factory=lambda: SettingsLoader().get("request_timeout"),
    )

    @property
    def host(self) -> str:
        if self.use_cors_proxy and self.cors_proxy_subdomain:
            return f"{self.cors_proxy_subdomain}.{self.base_host}"
        return self.base_host

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}"
