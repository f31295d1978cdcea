# -*- coding: utf-8 -*-
# coinbridge/core/kernel/models.py
# Plain value objects shared by drivers and runtime engines.
# No dataclasses, same as the syscall layer.

import copy

BTC = "BTC"
LTC = "LTC"


class ExchangeOption(object):
    """
    交易所实例配置
    :param type: exchange type, e.g. 'okcoin.cn'
    :param name: display name chosen by the user
    :param access_key / secret_key: API credentials
    :param main_stock: instrument used for Account.stock / frozen_stock
    :param trader_id: owner id written into every trade log line
    """

    def __init__(self, type="okcoin.cn", name="okcoin.cn", access_key="", secret_key="",
                 main_stock=BTC, trader_id=0):
        self.type = type
        self.name = name
        self.access_key = access_key
        self.secret_key = secret_key
        self.main_stock = main_stock
        self.trader_id = trader_id

    def __repr__(self):
        return "ExchangeOption(type=%r, name=%r, main_stock=%r, trader_id=%r)" % (
            self.type, self.name, self.main_stock, self.trader_id)


class OrderBook(object):
    """One depth level."""

    def __init__(self, price=0.0, amount=0.0):
        self.price = price
        self.amount = amount

    def __eq__(self, other):
        return isinstance(other, OrderBook) and (self.price, self.amount) == (other.price, other.amount)

    def __repr__(self):
        return "OrderBook(price=%r, amount=%r)" % (self.price, self.amount)


class Ticker(object):
    """
    Best bid (buy), best ask (sell), mid and the depth used to derive them.
    bids are sorted by price descending, asks ascending.
    """

    def __init__(self, bids, asks):
        self.bids = list(bids)
        self.asks = list(asks)
        self.buy = self.bids[0].price
        self.sell = self.asks[0].price
        self.mid = (self.buy + self.sell) / 2

    def to_dict(self):
        return {
            'buy': self.buy,
            'sell': self.sell,
            'mid': self.mid,
            'bids': [[b.price, b.amount] for b in self.bids],
            'asks': [[a.price, a.amount] for a in self.asks],
        }

    def __repr__(self):
        return "Ticker(buy=%r, sell=%r, mid=%r, depth=%d/%d)" % (
            self.buy, self.sell, self.mid, len(self.bids), len(self.asks))


class Record(object):
    """OHLCV bar; time is in seconds at the period boundary."""

    __slots__ = ('time', 'open', 'high', 'low', 'close', 'volume')

    def __init__(self, time, open=0.0, high=0.0, low=0.0, close=0.0, volume=0.0):
        self.time = int(time)
        self.open = open
        self.high = high
        self.low = low
        self.close = close
        self.volume = volume

    def to_dict(self):
        return {k: getattr(self, k) for k in self.__slots__}

    def copy(self):
        return Record(self.time, self.open, self.high, self.low, self.close, self.volume)

    def __eq__(self, other):
        return isinstance(other, Record) and self.to_dict() == other.to_dict()

    def __repr__(self):
        return "Record(time=%d, open=%r, high=%r, low=%r, close=%r, volume=%r)" % (
            self.time, self.open, self.high, self.low, self.close, self.volume)


class Order(object):
    """
    order_type: +1 limit buy, -1 limit sell, +2 market buy, -2 market sell
    (0 when unknown, e.g. simulated placeholders).
    """

    def __init__(self, id="", price=0.0, amount=0.0, deal_amount=0.0, order_type=0, stock_type=""):
        self.id = id
        self.price = price
        self.amount = amount
        self.deal_amount = deal_amount
        self.order_type = order_type
        self.stock_type = stock_type

    def to_dict(self):
        return {
            'id': self.id,
            'price': self.price,
            'amount': self.amount,
            'dealAmount': self.deal_amount,
            'orderType': self.order_type,
            'stockType': self.stock_type,
        }

    def __eq__(self, other):
        return isinstance(other, Order) and self.to_dict() == other.to_dict()

    def __repr__(self):
        return "Order(%s)" % ", ".join("%s=%r" % kv for kv in self.to_dict().items())


class Account(object):
    """
    账户快照
    stocks / frozen_stocks: {instrument: quantity}
    stock / frozen_stock: view of the main instrument
    """

    def __init__(self, balance=0.0, frozen_balance=0.0, stocks=None, frozen_stocks=None,
                 total=0.0, net=0.0, stock=0.0, frozen_stock=0.0):
        self.total = total
        self.net = net
        self.balance = balance
        self.frozen_balance = frozen_balance
        self.stocks = dict(stocks or {})
        self.frozen_stocks = dict(frozen_stocks or {})
        self.stock = stock
        self.frozen_stock = frozen_stock

    def select(self, main_stock):
        self.stock = self.stocks.get(main_stock, 0.0)
        self.frozen_stock = self.frozen_stocks.get(main_stock, 0.0)
        return self

    def copy(self):
        return copy.deepcopy(self)

    def to_dict(self):
        d = {
            'Total': self.total,
            'Net': self.net,
            'Balance': self.balance,
            'FrozenBalance': self.frozen_balance,
            'Stock': self.stock,
            'FrozenStock': self.frozen_stock,
        }
        for stock, qty in self.stocks.items():
            d[stock] = qty
            d['Frozen' + stock] = self.frozen_stocks.get(stock, 0.0)
        return d

    def __repr__(self):
        return "Account(%r)" % self.to_dict()
