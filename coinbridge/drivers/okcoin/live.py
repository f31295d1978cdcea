# -*- coding: utf-8 -*-
# coinbridge/drivers/okcoin/live.py
# Live trading engine: one signed endpoint per operation, responses mapped
# into Account / Order. Errors propagate as AdapterError; nothing is retried.

from coinbridge.core.kernel.errors import OrderNotFound, ParseFailure, UnknownInstrument
from coinbridge.core.kernel.models import Account, Order
from coinbridge.core.kernel.syscalls import TradingEngine
from coinbridge.drivers.okcoin.util import fmt_num, to_float
from coinbridge.utils.logger import BUY, CANCEL, SELL


class LiveEngine(TradingEngine):
    """
    :param rest: OkcoinRest
    :param stock_map: {'BTC': 'btc', ...}
    :param order_type_map: {'buy': 1, 'sell': -1, 'buy_market': 2, 'sell_market': -2}
    :param trade_logger: TradeLogger
    :param main_stock: callable returning the current main instrument
    """

    def __init__(self, rest, stock_map, order_type_map, trade_logger, main_stock, quote="cny"):
        self.rest = rest
        self.stock_map = stock_map
        self.order_type_map = order_type_map
        self.trade_logger = trade_logger
        self._main_stock = main_stock
        self.quote = quote

    def _symbol(self, stock):
        if stock not in self.stock_map:
            raise UnknownInstrument(stock)
        return self.stock_map[stock] + "_" + self.quote

    def _order(self, od, stock):
        if not isinstance(od, dict):
            raise ParseFailure(f"bad order {od!r}")
        return Order(
            id=str(od.get("order_id")),
            price=to_float(od.get("price")),
            amount=to_float(od.get("amount")),
            deal_amount=to_float(od.get("deal_amount")),
            order_type=self.order_type_map.get(od.get("type"), 0),
            stock_type=stock,
        )

    def _orders(self, doc, stock):
        orders = doc.get("orders") or []
        if not isinstance(orders, list):
            raise ParseFailure("orders is not a list")
        return [self._order(od, stock) for od in orders]

    # -------------- account --------------
    def get_account(self):
        doc = self.rest.userinfo()
        try:
            funds = doc["info"]["funds"]
            free = funds.get("free", {})
            freezed = funds.get("freezed", {})
            asset = funds.get("asset", {})
        except (KeyError, TypeError, AttributeError) as e:
            raise ParseFailure(f"userinfo.do: missing {e}") from e

        account = Account(
            total=to_float(asset.get("total")),
            net=to_float(asset.get("net")),
            balance=to_float(free.get(self.quote)),
            frozen_balance=to_float(freezed.get(self.quote)),
            stocks={s: to_float(free.get(code)) for s, code in self.stock_map.items()},
            frozen_stocks={s: to_float(freezed.get(code)) for s, code in self.stock_map.items()},
        )
        return account.select(self._main_stock())

    # -------------- trading --------------
    def buy(self, stock, price, amount, *msgs):
        """
        price > 0: limit buy of `amount` instruments
        price <= 0: market buy spending `amount` of quote currency (sent as price=)
        """
        params = ["symbol=" + self._symbol(stock)]
        price = float(price)
        if price > 0:
            params += ["price=" + fmt_num(price), "type=buy", "amount=" + fmt_num(amount)]
        else:
            params += ["type=buy_market", "price=" + fmt_num(amount)]
        doc = self.rest.trade(params)
        self.trade_logger.log(BUY, price, amount, *msgs)
        return str(doc.get("order_id"))

    def sell(self, stock, price, amount, *msgs):
        """
        price > 0: limit sell; price <= 0: market sell. amount is the
        instrument quantity either way.
        """
        params = ["symbol=" + self._symbol(stock), "amount=" + fmt_num(amount)]
        price = float(price)
        if price > 0:
            params += ["price=" + fmt_num(price), "type=sell"]
        else:
            params.append("type=sell_market")
        doc = self.rest.trade(params)
        self.trade_logger.log(SELL, price, amount, *msgs)
        return str(doc.get("order_id"))

    def get_order(self, stock, order_id):
        doc = self.rest.order_info(self._symbol(stock), order_id)
        orders = self._orders(doc, stock)
        if not orders:
            raise OrderNotFound(order_id)
        return orders[0]

    def get_orders(self, stock):
        # order_id=-1 返回全部未成交订单
        doc = self.rest.order_info(self._symbol(stock), -1)
        return self._orders(doc, stock)

    def get_trades(self, stock):
        doc = self.rest.order_history(self._symbol(stock), status=1, current_page=1, page_length=200)
        return self._orders(doc, stock)

    def cancel_order(self, order):
        self.rest.cancel_order(self._symbol(order.stock_type), order.id)
        self.trade_logger.log(CANCEL, order.price, order.amount - order.deal_amount, order)
        return True
