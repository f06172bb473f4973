"""Unit тесты для SettingsLoader."""

import pytest

from shapeshift_hub.infra import settings as settings_module
from shapeshift_hub.infra.settings import SettingsLoader


@pytest.fixture
def fresh_settings(monkeypatch, tmp_path):
    """SettingsLoader, читающий pyproject.toml из временного каталога."""
    monkeypatch.setattr(settings_module, "BASE_DIR", tmp_path)
    loader = SettingsLoader()
    yield loader, tmp_path
    monkeypatch.undo()
    loader.reload()


def test_singleton():
    assert SettingsLoader() is SettingsLoader()


def test_defaults_without_pyproject(fresh_settings):
    loader, tmp_path = fresh_settings
    loader.reload()

    assert loader.get("base_host") == "shapeshift.io"
    assert loader.get("request_timeout") == 10.0
    assert "market-info" in loader.get("no_camel_aliases")
    assert "deposit-type" in loader.get("currency_value_keys")
    assert loader.get("missing", "fallback") == "fallback"


def test_values_from_pyproject(fresh_settings):
    loader, tmp_path = fresh_settings
    (tmp_path / "pyproject.toml").write_text(
        "[tool.shapeshift_hub]\n"
        'base_host = "Example.org"\n'
        "request_timeout = 3\n"
        'logs_dir = "var/logs"\n'
        'no_camel_aliases = ["Tx-Stat"]\n'
        'currency_value_keys = ["coin"]\n',
        encoding="utf-8",
    )
    loader.reload()

    assert loader.get("base_host") == "example.org"
    assert loader.get("request_timeout") == 3.0
    assert loader.get("logs_dir") == tmp_path / "var" / "logs"
    assert loader.get("no_camel_aliases") == frozenset({"tx-stat"})
    assert loader.get("currency_value_keys") == frozenset({"coin"})
