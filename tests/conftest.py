# -*- coding: utf-8 -*-
# tests/conftest.py

import sys
from pathlib import Path

import pytest

# Ensure project root (which contains the `coinbridge/` package directory) is on sys.path
_THIS_FILE = Path(__file__).resolve()
_PROJECT_ROOT = _THIS_FILE.parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from coinbridge.core.kernel.errors import ExchangeRejected, NetworkFailure  # noqa: E402
from coinbridge.drivers.okcoin.limiter import RateLimiter  # noqa: E402
from coinbridge.utils.logger import TradeLogger  # noqa: E402


class FakeRest:
    """
    Scripted stand-in for OkcoinRest.
    depth:   {symbol: {'bids': [...], 'asks': [...]}} or an exception instance
    klines:  {symbol: [rows, rows, ...]} consumed one list per call
    private: {endpoint: response dict or exception}
    """

    host = "https://fake.okcoin.test/api/v1/"

    def __init__(self):
        self.limiter = RateLimiter(10, clock=lambda: 0, sleep=lambda s: None)
        self.depth = {}
        self.klines = {}
        self.private = {}
        self.calls = []

    def set_book(self, symbol, bid, ask):
        # raw feed: asks highest first
        self.depth[symbol] = {
            "bids": [[bid, 1.0], [bid - 1, 2.0]],
            "asks": [[ask + 1, 2.0], [ask, 1.0]],
        }

    def _answer(self, value):
        if isinstance(value, Exception):
            raise value
        return value

    def get_depth(self, symbol, size=20):
        self.calls.append(("depth", symbol, size))
        if symbol not in self.depth:
            raise NetworkFailure("no route to " + symbol)
        return self._answer(self.depth[symbol])

    def get_kline(self, symbol, type, size=200):
        self.calls.append(("kline", symbol, type, size))
        queue = self.klines.get(symbol) or []
        if not queue:
            raise NetworkFailure("kline unavailable")
        return self._answer(queue.pop(0))

    def _private(self, endpoint, *args):
        self.calls.append((endpoint,) + args)
        if endpoint not in self.private:
            raise ExchangeRejected(10000)
        return self._answer(self.private[endpoint])

    def userinfo(self):
        return self._private("userinfo")

    def trade(self, params):
        return self._private("trade", list(params))

    def order_info(self, symbol, order_id):
        return self._private("order_info", symbol, order_id)

    def order_history(self, symbol, status=1, current_page=1, page_length=200):
        return self._private("order_history", symbol, status, current_page, page_length)

    def cancel_order(self, symbol, order_id):
        return self._private("cancel_order", symbol, order_id)


@pytest.fixture
def fake_rest():
    rest = FakeRest()
    rest.set_book("btc_cny", 99.0, 100.0)
    rest.set_book("ltc_cny", 9.0, 10.0)
    return rest


@pytest.fixture
def trade_logger():
    return TradeLogger(trader_id=7, exchange_type="okcoin.cn")
