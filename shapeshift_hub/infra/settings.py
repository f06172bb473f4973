from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

BASE_DIR = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class _Defaults:
    """Значения по умолчанию для конфигурации проекта."""

    base_host: str = "shapeshift.io"
    cors_proxy_subdomain: str = "cors"
    scheme: str = "https"
    request_timeout: float = 10.0
    logs_dir: Path = BASE_DIR / "logs"
    log_level: str = "INFO"
    log_format: str = (
        "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
    )
    # Алиасы, которые превращаются в имя операции только удалением дефисов.
    no_camel_aliases: Tuple[str, ...] = field(
        default=(
            "market-info",
            "get-coins",
            "send-amount",
            "cancel-pending",
            "recent-tx",
            "tx-by-address",
            "tx-by-api-key",
        ),
    )
    # Поля ответа, значение которых само является кодом валюты.
    currency_value_keys: Tuple[str, ...] = field(
        default=(
            "deposit-type",
            "withdrawal-type",
            "incoming-type",
            "outgoing-type",
            "symbol",
            "input-currency",
            "output-currency",
            "cur-in",
            "cur-out",
        ),
    )


class SettingsLoader:
    """Singleton для загрузки и кеширования конфигурации проекта.

    Источник конфигурации:
    - pyproject.toml → секция [tool.shapeshift_hub]
    - при отсутствии ключа используется значение по умолчанию.

    Доступные ключи:
    - base_host: хост API (shapeshift.io)
    - cors_proxy_subdomain: поддомен CORS-прокси (cors)
    - scheme: схема URL (https)
    - request_timeout: таймаут HTTP-запроса в секундах
    - logs_dir: путь к каталогу логов
    - log_level / log_format: настройки логирования
    - log_levels: уровни по каналам логирования ({"transport": "DEBUG"})
    - no_camel_aliases: алиасы операций без camelCase
    - currency_value_keys: поля, значения которых — коды валют
    """

    _instance: "SettingsLoader | None" = None
    _initialized: bool = False

    def __new__(cls, *args: Any, **kwargs: Any) -> "SettingsLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if self.__class__._initialized:
            return
        self.__class__._initialized = True

        self._defaults = _Defaults()
        self._config: Dict[str, Any] = {}
        self.reload()

    def _load_from_pyproject(self) -> Dict[str, Any]:
        """Загрузка конфигурации из pyproject.toml (секция [tool.shapeshift_hub])."""
        pyproject_path = BASE_DIR / "pyproject.toml"
        if not pyproject_path.exists():
            return {}

        with pyproject_path.open("rb") as f:
            data = tomllib.load(f)

        tool_section = data.get("tool", {})
        return tool_section.get("shapeshift_hub", {}) or {}

    def reload(self) -> None:
        """Полная перезагрузка конфигурации из pyproject.toml."""
        raw = self._load_from_pyproject()
        defaults = self._defaults

        cfg: Dict[str, Any] = {}

        cfg["base_host"] = str(raw.get("base_host", defaults.base_host)).lower()
        cfg["cors_proxy_subdomain"] = str(
            raw.get("cors_proxy_subdomain", defaults.cors_proxy_subdomain),
        )
        cfg["scheme"] = str(raw.get("scheme", defaults.scheme)).lower()
        cfg["request_timeout"] = float(
            raw.get("request_timeout", defaults.request_timeout),
        )
        logs_dir = Path(raw.get("logs_dir", defaults.logs_dir))
        if not logs_dir.is_absolute():
            logs_dir = BASE_DIR / logs_dir
        cfg["logs_dir"] = logs_dir
        cfg["log_level"] = str(
            raw.get("log_level", defaults.log_level),
        ).upper()
        cfg["log_format"] = str(raw.get("log_format", defaults.log_format))
        cfg["log_levels"] = {
            str(channel): str(level).upper()
            for channel, level in (raw.get("log_levels") or {}).items()
        }

        # Списки храним как frozenset: порядок не важен, нужен только поиск.
        cfg["no_camel_aliases"] = frozenset(
            str(alias).lower()
            for alias in raw.get("no_camel_aliases", defaults.no_camel_aliases)
        )
        cfg["currency_value_keys"] = frozenset(
            str(key)
            for key in raw.get(
                "currency_value_keys",
                defaults.currency_value_keys,
            )
        )

        self._config = cfg

    def get(self, key: str, default: Any | None = None) -> Any:
        """Получить значение конфигурации по ключу.

        Если ключ не найден, возвращается default.
        """
        return self._config.get(key, default)
