# -*- coding: utf-8 -*-
# tests/test_market.py

import pytest

from coinbridge.core.kernel.errors import (
    InsufficientDepth,
    NetworkFailure,
    ParseFailure,
    UnknownInstrument,
    UnknownPeriod,
)
from coinbridge.drivers.okcoin.driver import PERIOD_MAP, STOCK_MAP
from coinbridge.drivers.okcoin.market import OkcoinMarket, parse_depth, parse_kline


@pytest.fixture
def market(fake_rest):
    return OkcoinMarket(fake_rest, STOCK_MAP, PERIOD_MAP)


def test_parse_depth_reverses_asks():
    ticker = parse_depth({
        "bids": [[99, 1], [98, 2]],
        "asks": [[102, 3], [101, 2], [100, 1]],
    })
    assert ticker.buy == 99.0
    assert ticker.sell == 100.0
    assert ticker.mid == 99.5
    assert [a.price for a in ticker.asks] == [100.0, 101.0, 102.0]


def test_parse_depth_accepts_numeric_strings():
    ticker = parse_depth({"bids": [["3000.5", "0.1"]], "asks": [["3001", "2"]]})
    assert ticker.buy == 3000.5
    assert ticker.asks[0].amount == 2.0


@pytest.mark.parametrize("doc", [
    {"bids": [], "asks": [[100, 1]]},
    {"bids": [[99, 1]], "asks": []},
    {"bids": [[99, 1]]},
])
def test_parse_depth_one_sided_book(doc):
    with pytest.raises(InsufficientDepth):
        parse_depth(doc)


def test_parse_depth_rejects_garbage():
    with pytest.raises(ParseFailure):
        parse_depth([1, 2, 3])
    with pytest.raises(ParseFailure):
        parse_depth({"bids": [[99]], "asks": [[100, 1]]})


def test_parse_kline_converts_ms_to_seconds():
    rows = [[1417449600000, 2339.11, 2383.15, 2322, 2369.85, 83850.06]]
    record = parse_kline(rows)[0]
    assert record.time == 1417449600
    assert record.open == 2339.11
    assert record.low == 2322.0
    assert record.volume == 83850.06


def test_parse_kline_short_row():
    with pytest.raises(ParseFailure):
        parse_kline([[1417449600000, 1, 2]])


def test_symbol_mapping(market):
    assert market.symbol("BTC") == "btc_cny"
    assert market.symbol("LTC") == "ltc_cny"
    with pytest.raises(UnknownInstrument):
        market.symbol("ETH")


def test_get_ticker_uses_size_and_defaults(market, fake_rest):
    ticker = market.get_ticker("BTC", 5)
    assert (ticker.buy, ticker.sell) == (99.0, 100.0)
    market.get_ticker("LTC", 0)
    assert fake_rest.calls == [("depth", "btc_cny", 5), ("depth", "ltc_cny", 20)]


def test_get_ticker_unknown_stock_makes_no_request(market, fake_rest):
    with pytest.raises(UnknownInstrument):
        market.get_ticker("XRP")
    assert fake_rest.calls == []


def test_get_records_unknown_period(market, fake_rest):
    with pytest.raises(UnknownPeriod):
        market.get_records("BTC", "M3")
    assert fake_rest.calls == []


def test_get_records_merges_across_calls(market, fake_rest):
    fake_rest.klines["btc_cny"] = [
        [[60000, 1, 1, 1, 1, 1], [120000, 1, 2, 1, 2, 1]],
        [[120000, 1, 3, 1, 3, 5], [180000, 3, 3, 3, 3, 1]],
    ]
    first = market.get_records("BTC", "M", 50)
    assert [r.time for r in first] == [60, 120]
    second = market.get_records("BTC", "M", 50)
    assert [r.time for r in second] == [60, 120, 180]
    assert second[1].close == 3.0
    assert fake_rest.calls[-1] == ("kline", "btc_cny", "1min", 50)


def test_get_records_error_propagates_and_keeps_cache(market, fake_rest):
    fake_rest.klines["btc_cny"] = [[[60000, 1, 1, 1, 1, 1]]]
    market.get_records("BTC", "M")
    with pytest.raises(NetworkFailure):
        market.get_records("BTC", "M")
    assert [r.time for r in market.cached_records("BTC", "M")] == [60]


@pytest.mark.parametrize("rows", [None, 42, True, {"data": []}])
def test_parse_kline_rejects_non_list(rows):
    with pytest.raises(ParseFailure):
        parse_kline(rows)
