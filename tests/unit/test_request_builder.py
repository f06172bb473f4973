"""Unit тесты для построения запросов."""

import pytest

from shapeshift_hub.api.request_builder import RequestDescriptor, build_request


def test_rate_with_pair():
    request = build_request("rate", ("ltc", "btc"))

    assert request.method == "GET"
    assert request.path == ("rate", "ltc_btc")
    assert request.body is None


def test_pair_given_as_wire_string():
    assert build_request("limit", "LTC_BTC").path == ("limit", "ltc_btc")


def test_pairwise_without_argument_requests_all_pairs():
    assert build_request("marketinfo").path == ("marketinfo",)


def test_validate_address_override():
    request = build_request(
        "validateAddress",
        {"address": "1abc/def", "currency": "btc"},
    )
    assert request.method == "GET"
    assert request.path == ("validateAddress", "1abc%2Fdef", "BTC")


def test_tx_by_address_override():
    request = build_request(
        "txbyaddress",
        {"address": "addr 1", "api-key": "k/ey"},
    )
    assert request.path == ("txbyaddress", "addr%201", "k%2Fey")


def test_override_does_not_reject_missing_fields():
    request = build_request("txbyaddress", {"address": "addr"})
    assert request.path == ("txbyaddress", "addr", "")


def test_post_operation_body_is_wire_form():
    request = build_request(
        "shift",
        {"withdrawal": "LTCaddr", "pair": ["BTC", "LTC"], "return-address": "r"},
    )

    assert request.method == "POST"
    assert request.path == ("shift",)
    assert request.body == {
        "withdrawal": "LTCaddr",
        "pair": "btc_ltc",
        "returnAddress": "r",
    }


def test_post_without_argument_sends_empty_body():
    request = build_request("cancelpending")
    assert request.method == "POST"
    assert request.body == {}


@pytest.mark.parametrize(
    "op, arg, expected",
    [
        ("txStat", "1HB5X", ("txStat", "1HB5X")),
        ("recenttx", 5, ("recenttx", "5")),
        ("timeRemaining", "a b", ("timeRemaining", "a%20b")),
        ("getcoins", None, ("getcoins",)),
    ],
)
def test_default_operations(op, arg, expected):
    request = build_request(op, arg)
    assert request.method == "GET"
    assert request.path == expected


def test_descriptor_url():
    request = RequestDescriptor(path=("rate", "ltc_btc"))
    assert request.url("https://shapeshift.io/") == "https://shapeshift.io/rate/ltc_btc"
    assert request.url("https://shapeshift.io") == "https://shapeshift.io/rate/ltc_btc"


def test_pair_with_non_string_code_is_not_rejected():
    assert build_request("rate", ["ltc", 5]).path == ("rate", "ltc_5")
