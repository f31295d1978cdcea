# -*- coding: utf-8 -*-
# tests/test_live_engine.py

import pytest

from coinbridge.core.kernel.errors import ExchangeRejected, OrderNotFound, ParseFailure, UnknownInstrument
from coinbridge.core.kernel.models import Order
from coinbridge.drivers.okcoin.driver import ORDER_TYPE_MAP, STOCK_MAP
from coinbridge.drivers.okcoin.live import LiveEngine

USERINFO = {
    "result": True,
    "info": {
        "funds": {
            "asset": {"net": "8000.5", "total": "9000"},
            "free": {"btc": "1.5", "cny": "3000", "ltc": "20"},
            "freezed": {"btc": "0.5", "cny": "100", "ltc": "0"},
        }
    },
}


@pytest.fixture
def main_stock():
    return {"value": "BTC"}


@pytest.fixture
def engine(fake_rest, trade_logger, main_stock):
    return LiveEngine(fake_rest, STOCK_MAP, ORDER_TYPE_MAP, trade_logger, lambda: main_stock["value"])


def test_get_account_maps_funds(engine, fake_rest):
    fake_rest.private["userinfo"] = USERINFO
    account = engine.get_account()
    assert account.total == 9000.0
    assert account.net == 8000.5
    assert account.balance == 3000.0
    assert account.frozen_balance == 100.0
    assert account.stocks == {"BTC": 1.5, "LTC": 20.0}
    assert account.frozen_stocks == {"BTC": 0.5, "LTC": 0.0}
    assert (account.stock, account.frozen_stock) == (1.5, 0.5)


def test_get_account_follows_main_stock(engine, fake_rest, main_stock):
    fake_rest.private["userinfo"] = USERINFO
    main_stock["value"] = "LTC"
    account = engine.get_account()
    assert (account.stock, account.frozen_stock) == (20.0, 0.0)


def test_get_account_missing_funds(engine, fake_rest):
    fake_rest.private["userinfo"] = {"result": True, "info": {}}
    with pytest.raises(ParseFailure):
        engine.get_account()


def test_limit_buy_params(engine, fake_rest):
    fake_rest.private["trade"] = {"result": True, "order_id": 123}
    assert engine.buy("BTC", 3000, 0.01) == "123"
    assert fake_rest.calls[-1] == ("trade", ["symbol=btc_cny", "price=3000", "type=buy", "amount=0.01"])


def test_market_buy_spends_quote_amount(engine, fake_rest):
    fake_rest.private["trade"] = {"result": True, "order_id": 124}
    engine.buy("BTC", -1, 50)
    assert fake_rest.calls[-1] == ("trade", ["symbol=btc_cny", "type=buy_market", "price=50"])


def test_limit_sell_params(engine, fake_rest):
    fake_rest.private["trade"] = {"result": True, "order_id": 125}
    engine.sell("LTC", 25.5, 2)
    assert fake_rest.calls[-1] == ("trade", ["symbol=ltc_cny", "amount=2", "price=25.5", "type=sell"])


def test_market_sell_params(engine, fake_rest):
    fake_rest.private["trade"] = {"result": True, "order_id": 126}
    engine.sell("BTC", 0, 0.3)
    assert fake_rest.calls[-1] == ("trade", ["symbol=btc_cny", "amount=0.3", "type=sell_market"])


def test_rejected_trade_is_not_logged(engine, fake_rest, caplog):
    fake_rest.private["trade"] = ExchangeRejected(10010)
    with caplog.at_level("INFO", logger="coinbridge.trade"):
        with pytest.raises(ExchangeRejected) as info:
            engine.buy("BTC", 3000, 1)
    assert info.value.code == 10010
    assert "BUY" not in caplog.text


def test_unknown_stock_makes_no_request(engine, fake_rest):
    with pytest.raises(UnknownInstrument):
        engine.sell("DOGE", 1, 1)
    assert fake_rest.calls == []


def test_get_order_maps_fields(engine, fake_rest):
    fake_rest.private["order_info"] = {
        "result": True,
        "orders": [{
            "order_id": 15088,
            "price": 3000.0,
            "amount": 0.1,
            "deal_amount": 0.05,
            "type": "sell",
            "status": 1,
        }],
    }
    order = engine.get_order("BTC", "15088")
    assert order == Order(id="15088", price=3000.0, amount=0.1, deal_amount=0.05,
                          order_type=-1, stock_type="BTC")
    assert fake_rest.calls[-1] == ("order_info", "btc_cny", "15088")


def test_get_order_empty_list(engine, fake_rest):
    fake_rest.private["order_info"] = {"result": True, "orders": []}
    with pytest.raises(OrderNotFound):
        engine.get_order("BTC", "1")


def test_get_orders_requests_all_open(engine, fake_rest):
    fake_rest.private["order_info"] = {
        "result": True,
        "orders": [
            {"order_id": 1, "price": 10, "amount": 1, "deal_amount": 0, "type": "buy_market"},
            {"order_id": 2, "price": 11, "amount": 2, "deal_amount": 1, "type": "weird"},
        ],
    }
    orders = engine.get_orders("LTC")
    assert [o.id for o in orders] == ["1", "2"]
    assert [o.order_type for o in orders] == [2, 0]
    assert fake_rest.calls[-1] == ("order_info", "ltc_cny", -1)


def test_get_trades_uses_history(engine, fake_rest):
    fake_rest.private["order_history"] = {"result": True, "orders": []}
    assert engine.get_trades("BTC") == []
    assert fake_rest.calls[-1] == ("order_history", "btc_cny", 1, 1, 200)


def test_cancel_order(engine, fake_rest, caplog):
    fake_rest.private["cancel_order"] = {"result": True, "order_id": "9"}
    order = Order(id="9", price=3000.0, amount=1.0, deal_amount=0.25, stock_type="BTC")
    with caplog.at_level("INFO", logger="coinbridge.trade"):
        assert engine.cancel_order(order) is True
    assert fake_rest.calls[-1] == ("cancel_order", "btc_cny", "9")
    assert "CANCEL|3000.0|0.75|" in caplog.text
