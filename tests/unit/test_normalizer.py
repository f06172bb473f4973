"""Unit тесты для нормализации ключей и значений (tidy_in / tidy_out).

Coverage:
- ключи → canonical, ключи-коды валют сохраняются
- приоритет правил для значений: pair → status → код валюты → число
- рекурсия по вложенным словарям и спискам
- подключаемый парсер чисел
- tidy_out: camelCase и кодирование пары
"""

from decimal import Decimal

import pytest

from shapeshift_hub.core.normalizer import NormalizeOptions, tidy_in, tidy_out


@pytest.fixture
def tx_stat_body():
    """Ответ txStat из документации shapeshift.io."""
    return {
        "status": "complete",
        "address": "1HB5XMLmzFVj8ALj6mfBsbifRoD4miY36v",
        "incomingCoin": "1.23",
        "incomingType": "btc",
        "outgoingCoin": 3.21,
        "outgoingType": "LTC",
        "transaction": "abc123",
    }


def test_tx_stat_scenario(tx_stat_body):
    result = tidy_in(tx_stat_body)

    assert result["status"] == "complete"
    assert result["incoming-type"] == "BTC"
    assert result["outgoing-type"] == "LTC"
    assert result["incoming-coin"] == Decimal("1.23")
    assert isinstance(result["incoming-coin"], Decimal)
    assert result["outgoing-coin"] == 3.21
    assert isinstance(result["outgoing-coin"], float)
    assert result["transaction"] == "abc123"


def test_market_info_list_of_pairs():
    body = [{"pair": "doge_ltc"}, {"pair": "btc_ltc"}]
    assert tidy_in(body) == [{"pair": ("DOGE", "LTC")}, {"pair": ("BTC", "LTC")}]


def test_currency_like_keys_are_preserved():
    body = {
        "BTC": {"name": "Bitcoin", "symbol": "btc", "status": "available"},
        "doge": {"name": "Dogecoin", "symbol": "DOGE", "status": "unavailable"},
    }
    result = tidy_in(body)

    assert set(result) == {"BTC", "doge"}
    assert result["BTC"]["symbol"] == "BTC"
    assert result["doge"]["symbol"] == "DOGE"
    assert result["doge"]["status"] == "unavailable"


def test_status_value_is_canonicalized():
    assert tidy_in({"status": "no_deposits"}) == {"status": "no-deposits"}


def test_status_is_not_parsed_as_number():
    assert tidy_in({"status": "42"}) == {"status": "42"}


def test_pair_without_separator_left_unchanged():
    assert tidy_in({"pair": "btcltc"}) == {"pair": "btcltc"}


def test_numeric_strings_parsed_at_any_depth():
    body = {"outer": {"innerList": [{"minerFee": "0.0001"}, "5", "x"]}}
    result = tidy_in(body)
    inner = result["outer"]["inner-list"]

    assert inner[0] == {"miner-fee": Decimal("0.0001")}
    assert inner[1] == Decimal("5")
    assert inner[2] == "x"


def test_non_numeric_strings_left_unchanged():
    assert tidy_in({"address": "1.2.3", "note": "abc"}) == {
        "address": "1.2.3",
        "note": "abc",
    }


def test_scalars_pass_through():
    assert tidy_in(None) is None
    assert tidy_in(True) is True
    assert tidy_in(7) == 7
    assert tidy_in("text") == "text"


def test_custom_number_parser_applied_uniformly():
    options = NormalizeOptions(parse_number=float)
    result = tidy_in({"rate": "0.5", "nested": [{"limit": "2"}]}, options)

    assert result == {"rate": 0.5, "nested": [{"limit": 2.0}]}
    assert isinstance(result["nested"][0]["limit"], float)


def test_identity_parser_keeps_strings():
    options = NormalizeOptions(parse_number=lambda text: text)
    assert tidy_in({"incomingCoin": "1.23"}, options) == {"incoming-coin": "1.23"}


def test_currency_value_keys_are_configurable():
    options = NormalizeOptions(currency_value_keys=frozenset({"coin"}))
    result = tidy_in({"coin": "eth", "depositType": "btc"}, options)

    assert result == {"coin": "ETH", "deposit-type": "btc"}


def test_default_currency_value_keys():
    body = {
        "depositType": "btc",
        "withdrawalType": "ltc",
        "inputCurrency": "eth",
        "outputCurrency": "doge",
        "curIn": "btc",
        "curOut": "xmr",
    }
    assert set(tidy_in(body).values()) == {"BTC", "LTC", "ETH", "DOGE", "XMR"}


def test_tidy_out_camel_cases_and_encodes_pair():
    arg = {
        "withdrawal": "LTCaddr",
        "pair": ("BTC", "LTC"),
        "return-address": "BTCaddr",
        "api-key": "secret",
    }
    assert tidy_out(arg) == {
        "withdrawal": "LTCaddr",
        "pair": "btc_ltc",
        "returnAddress": "BTCaddr",
        "apiKey": "secret",
    }


def test_tidy_out_leaves_string_pair_alone():
    assert tidy_out({"pair": "btc_ltc"}) == {"pair": "btc_ltc"}


def test_tidy_out_recurses():
    arg = {"outer-key": [{"inner-key": 1}]}
    assert tidy_out(arg) == {"outerKey": [{"innerKey": 1}]}


def test_recent_tx_short_keys_keep_casing_and_uppercase_codes():
    body = [{"curIn": "btc", "curOut": "xmr", "amount": "0.5", "txid": "ab"}]
    assert tidy_in(body) == [
        {"curIn": "BTC", "curOut": "XMR", "amount": Decimal("0.5"), "txid": "ab"},
    ]
