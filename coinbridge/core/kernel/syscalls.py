# -*- coding: utf-8 -*-
# coinbridge/core/kernel/syscalls.py
# A minimal syscall interface shared by every exchange driver.
# No Protocol/dataclasses; plain base classes with NotImplementedError.
#
# Every driver method returns (result, error). error is None on success;
# on failure result is the method's sentinel and error an AdapterError.


class TradingEngine(object):
    """
    Order/account capability behind a driver. A driver holds exactly one
    engine (live or simulated); engines raise AdapterError on failure.
    """

    simulated = False

    def get_account(self):
        """Return an Account"""
        raise NotImplementedError

    def buy(self, stock, price, amount, *msgs):
        """Place a buy order, return the order id (str)"""
        raise NotImplementedError

    def sell(self, stock, price, amount, *msgs):
        """Place a sell order, return the order id (str)"""
        raise NotImplementedError

    def get_order(self, stock, order_id):
        """Return an Order"""
        raise NotImplementedError

    def get_orders(self, stock):
        """Return list of unfilled Orders"""
        raise NotImplementedError

    def get_trades(self, stock):
        """Return list of recently filled Orders"""
        raise NotImplementedError

    def cancel_order(self, order):
        """Cancel an Order, return True"""
        raise NotImplementedError


class ExchangeSyscalls(object):
    # ---- Ref-data / meta ----
    def get_type(self):
        """Return the exchange type string, e.g. 'okcoin.cn'"""
        raise NotImplementedError

    def get_name(self):
        """Return the user-facing exchange name"""
        raise NotImplementedError

    def symbols(self):
        """Return list of configured instruments, e.g. ['BTC', 'LTC']"""
        raise NotImplementedError

    def get_main_stock(self):
        raise NotImplementedError

    def set_main_stock(self, stock):
        """Switch the main instrument; unknown values keep the current one.
           Returns the main instrument after the attempt.
        """
        raise NotImplementedError

    def set_limit(self, times):
        """Set max authenticated calls per second, return the active limit"""
        raise NotImplementedError

    def auto_sleep(self):
        """Block until the configured call rate is respected"""
        raise NotImplementedError

    def get_min_amount(self, stock):
        """Return minimum order size of an instrument (0.0 if unknown)"""
        raise NotImplementedError

    def log(self, *msgs):
        """Write an INFO event to the trade log"""
        raise NotImplementedError

    # ---- Mode ----
    def simulate(self, balance, *amounts, **named_amounts):
        """Switch to paper trading with the given starting balances (one-way)"""
        raise NotImplementedError

    # ---- Market data ----
    def get_ticker(self, stock, size=20):
        """Return (Ticker, err)"""
        raise NotImplementedError

    def get_records(self, stock, period, size=200):
        """Return (list[Record], err); on error the previous history is returned"""
        raise NotImplementedError

    def get_klines(self, stock, period, size=200):
        """Return (DataFrame, err) with columns trade_date/open/high/low/close/vol"""
        raise NotImplementedError

    # ---- Account / trading ----
    def get_account(self):
        """Return (Account, err)"""
        raise NotImplementedError

    def buy(self, stock, price, amount, *msgs):
        """Return (order_id, err). price <= 0 places a market order
           :param amount: instrument quantity for limit orders,
                          quote-currency spend for market orders
        """
        raise NotImplementedError

    def sell(self, stock, price, amount, *msgs):
        """Return (order_id, err). price <= 0 places a market order
           :param amount: instrument quantity in both cases
        """
        raise NotImplementedError

    def get_order(self, stock, order_id):
        """Return (Order, err)"""
        raise NotImplementedError

    def get_orders(self, stock):
        """Return (list[Order], err) of unfilled orders"""
        raise NotImplementedError

    def get_trades(self, stock):
        """Return (list[Order], err) of recently filled orders"""
        raise NotImplementedError

    def cancel_order(self, order):
        """Return (True, None) or (False, err)"""
        raise NotImplementedError
