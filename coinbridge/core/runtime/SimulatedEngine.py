#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SimulatedEngine - 模拟盘撮合
在内存账户上按当前盘口即时成交，接口与实盘引擎一致：

- 买单价格必须 >= 卖一价，按卖一价成交
- 卖单价格必须 <= 买一价，按买一价成交
- 先做全部检查，检查通过后一次性修改账户
- 没有挂单概念：成交即终结，撤单只记日志
"""

import time

from coinbridge.core.kernel.errors import (
    AdapterError,
    InsufficientBalance,
    InsufficientInventory,
    InvalidAmount,
    PriceTooHigh,
    PriceTooLow,
    PricingUnavailable,
    UnknownInstrument,
)
from coinbridge.core.kernel.models import Account, Order
from coinbridge.core.kernel.syscalls import TradingEngine
from coinbridge.utils.logger import BUY, CANCEL, SELL

# 估值时使用的盘口深度
VALUATION_DEPTH = 10


class SimulatedEngine(TradingEngine):
    """
    :param market: 提供 get_ticker(stock, size) 的行情对象
    :param stocks: 可交易品种列表
    :param trade_logger: TradeLogger
    :param main_stock: 返回当前主品种的函数
    :param clock: 秒级时间函数，用于生成订单号
    """

    simulated = True

    def __init__(self, market, stocks, trade_logger, main_stock, balance=0.0, amounts=None, clock=None):
        self.market = market
        self.stocks = list(stocks)
        self.trade_logger = trade_logger
        self._main_stock = main_stock
        self._clock = clock or time.time
        self._last_id = 0
        amounts = amounts or {}
        self.account = Account(
            balance=float(balance),
            stocks={s: float(amounts.get(s, 0.0)) for s in self.stocks},
            frozen_stocks={s: 0.0 for s in self.stocks},
        )

    def _check_stock(self, stock):
        if stock not in self.stocks:
            raise UnknownInstrument(stock)

    def _ticker(self, stock, size=VALUATION_DEPTH):
        try:
            return self.market.get_ticker(stock, size)
        except AdapterError as e:
            raise PricingUnavailable(stock, e) from e

    def next_order_id(self):
        """以秒为单位的时间戳作订单号，同一秒内递增保证不重复"""
        order_id = max(int(self._clock()), self._last_id + 1)
        self._last_id = order_id
        return str(order_id)

    def get_account(self):
        account = self.account
        total = account.balance + account.frozen_balance
        for stock in self.stocks:
            held = account.stocks.get(stock, 0.0) + account.frozen_stocks.get(stock, 0.0)
            total += self._ticker(stock).mid * held
        account.total = total
        account.net = total
        account.select(self._main_stock())
        return account.copy()

    def buy(self, stock, price, amount, *msgs):
        self._check_stock(stock)
        price = float(price)
        amount = float(amount)
        if amount <= 0:
            raise InvalidAmount(amount)
        ticker = self._ticker(stock)
        if price < ticker.sell:
            raise PriceTooLow()
        if price * amount > self.account.balance:
            raise InsufficientBalance()
        self.account.balance -= ticker.sell * amount
        self.account.stocks[stock] += amount
        self.trade_logger.log(BUY, price, amount, *msgs)
        return self.next_order_id()

    def sell(self, stock, price, amount, *msgs):
        self._check_stock(stock)
        price = float(price)
        amount = float(amount)
        if amount <= 0:
            raise InvalidAmount(amount)
        ticker = self._ticker(stock)
        if price > ticker.buy:
            raise PriceTooHigh()
        if amount > self.account.stocks[stock]:
            raise InsufficientInventory()
        self.account.stocks[stock] -= amount
        self.account.balance += ticker.buy * amount
        self.trade_logger.log(SELL, price, amount, *msgs)
        return self.next_order_id()

    def get_order(self, stock, order_id):
        return Order(id=order_id, stock_type=stock)

    def get_orders(self, stock):
        self._check_stock(stock)
        return []

    def get_trades(self, stock):
        self._check_stock(stock)
        return []

    def cancel_order(self, order):
        self.trade_logger.log(CANCEL, order.price, order.amount - order.deal_amount, order)
        return True
