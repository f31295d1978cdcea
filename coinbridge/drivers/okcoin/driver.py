# -*- coding: utf-8 -*-
# coinbridge/drivers/okcoin/driver.py
# okcoin.cn spot driver. Same surface whether trading live or paper-trading
# (simulate()), so strategies run unchanged against both.

import logging
import os
import threading
from functools import wraps

from coinbridge.core.kernel.errors import AdapterError
from coinbridge.core.kernel.models import BTC, LTC, ExchangeOption
from coinbridge.core.kernel.syscalls import ExchangeSyscalls
from coinbridge.core.runtime.RecordCache import RecordCache
from coinbridge.core.runtime.SimulatedEngine import SimulatedEngine
from coinbridge.drivers.okcoin.live import LiveEngine
from coinbridge.drivers.okcoin.market import DEFAULT_DEPTH_SIZE, DEFAULT_RECORD_SIZE, OkcoinMarket
from coinbridge.drivers.okcoin.rest import OkcoinRest
from coinbridge.drivers.okcoin.util import records_to_dataframe, to_float
from coinbridge.utils.logger import ERROR, TradeLogger

logger = logging.getLogger(__name__)

EXCHANGE_TYPE = "okcoin.cn"

STOCK_MAP = {
    BTC: "btc",
    LTC: "ltc",
}

ORDER_TYPE_MAP = {
    "buy": 1,
    "sell": -1,
    "buy_market": 2,
    "sell_market": -2,
}

PERIOD_MAP = {
    "M": "1min",
    "M5": "5min",
    "M15": "15min",
    "M30": "30min",
    "H": "1hour",
    "D": "1day",
    "W": "1week",
}

MIN_AMOUNT_MAP = {
    BTC: 0.01,
    LTC: 0.1,
}


def syscall(label, failure=None):
    """
    Run a driver method under the driver lock and return (result, err).
    AdapterErrors are logged once as ERROR events; anything else is logged
    with its traceback. Nothing is re-raised.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            with self._lock:
                try:
                    return func(self, *args, **kwargs), None
                except AdapterError as e:
                    self.trade_logger.log(ERROR, 0.0, 0.0, f"{label}() error, {e}")
                    return failure, e
                except Exception as e:
                    logger.exception("%s() unexpected error", label)
                    self.trade_logger.log(ERROR, 0.0, 0.0, f"{label}() error, {e}")
                    return failure, e
        return wrapper
    return decorator


class OkcoinDriver(ExchangeSyscalls):
    """
    coinbridge okcoin.cn driver.
      - live by default, simulate(balance, btc, ltc) switches to paper trading
      - every trading/market method returns (result, err)
    """

    def __init__(self, option=None, rest=None, trade_logger=None, host=None, limit=10.0, timeout=10,
                 log_dir=None, depth_size=DEFAULT_DEPTH_SIZE, record_size=DEFAULT_RECORD_SIZE):
        """
        :param option: ExchangeOption; credentials, names and main stock
        :param rest: Optional. A prepared OkcoinRest; built from option otherwise.
        :param trade_logger: Optional. TradeLogger for BUY/SELL/CANCEL/ERROR events.
        :param host: API base url, defaults to okcoin.cn v1
        :param limit: max signed calls per second
        :param depth_size / record_size: defaults for get_ticker / get_records
        """
        self.option = option or ExchangeOption(type=EXCHANGE_TYPE, name=EXCHANGE_TYPE)
        if self.option.main_stock not in STOCK_MAP:
            self.option.main_stock = BTC
        self.stock_map = dict(STOCK_MAP)
        self.order_type_map = dict(ORDER_TYPE_MAP)
        self.period_map = dict(PERIOD_MAP)
        self.min_amount_map = dict(MIN_AMOUNT_MAP)
        self.depth_size = depth_size
        self.record_size = record_size

        self.rest = rest or OkcoinRest(
            access_key=self.option.access_key,
            secret_key=self.option.secret_key,
            host=host,
            limit=limit,
            timeout=timeout,
        )
        self.trade_logger = trade_logger or TradeLogger(
            trader_id=self.option.trader_id,
            exchange_type=self.option.type,
            log_dir=log_dir,
        )
        self.market = OkcoinMarket(self.rest, self.stock_map, self.period_map, records=RecordCache())
        self.engine = LiveEngine(self.rest, self.stock_map, self.order_type_map, self.trade_logger,
                                 self.get_main_stock)
        self._lock = threading.RLock()
        logger.info("OkcoinDriver ready: name=%s host=%s", self.option.name, self.rest.host)

    # -------------- meta --------------
    def log(self, *msgs):
        self.trade_logger.info(*msgs)

    def get_type(self):
        return self.option.type

    def get_name(self):
        return self.option.name

    def symbols(self):
        return list(self.stock_map)

    def get_main_stock(self):
        return self.option.main_stock

    def set_main_stock(self, stock):
        if stock in self.stock_map:
            self.option.main_stock = stock
        return self.option.main_stock

    def set_limit(self, times):
        return self.rest.limiter.set_limit(to_float(times))

    def auto_sleep(self):
        self.rest.limiter.throttle()

    def get_min_amount(self, stock):
        return self.min_amount_map.get(stock, 0.0)

    @property
    def simulated(self):
        return self.engine.simulated

    # -------------- mode --------------
    def simulate(self, balance, *amounts, **named_amounts):
        """
        切换为模拟盘并重置账户，切换后不可回到实盘
        simulate(10000, 1.5, 20)  ->  BTC=1.5, LTC=20 (按 symbols() 顺序)
        simulate(10000, LTC=20)
        """
        initial = dict(zip(self.symbols(), (to_float(a) for a in amounts)))
        for stock, qty in named_amounts.items():
            initial[stock.upper()] = to_float(qty)
        with self._lock:
            self.engine = SimulatedEngine(self.market, self.symbols(), self.trade_logger,
                                          self.get_main_stock, balance=to_float(balance), amounts=initial)
        return True

    # -------------- market data --------------
    @syscall("get_ticker")
    def get_ticker(self, stock, size=None):
        return self.market.get_ticker(stock, size or self.depth_size)

    def get_records(self, stock, period, size=None):
        # 失败时返回已缓存的K线，行情拉取是轮询的，不应打断调用方
        with self._lock:
            try:
                return self.market.get_records(stock, period, size or self.record_size), None
            except AdapterError as e:
                self.trade_logger.log(ERROR, 0.0, 0.0, f"get_records() error, {e}")
                return self.market.cached_records(stock, period), e
            except Exception as e:
                logger.exception("get_records() unexpected error")
                self.trade_logger.log(ERROR, 0.0, 0.0, f"get_records() error, {e}")
                return self.market.cached_records(stock, period), e

    def get_klines(self, stock, period, size=None):
        records, err = self.get_records(stock, period, size)
        return records_to_dataframe(records), err

    # -------------- account / trading --------------
    @syscall("get_account")
    def get_account(self):
        return self.engine.get_account()

    @syscall("buy")
    def buy(self, stock, price, amount, *msgs):
        return self.engine.buy(stock, price, amount, *msgs)

    @syscall("sell")
    def sell(self, stock, price, amount, *msgs):
        return self.engine.sell(stock, price, amount, *msgs)

    @syscall("get_order")
    def get_order(self, stock, order_id):
        return self.engine.get_order(stock, order_id)

    @syscall("get_orders")
    def get_orders(self, stock):
        return self.engine.get_orders(stock)

    @syscall("get_trades")
    def get_trades(self, stock):
        return self.engine.get_trades(stock)

    @syscall("cancel_order", failure=False)
    def cancel_order(self, order):
        return self.engine.cancel_order(order)


def init_OkcoinDriver(account="main", config_dir=None, trader_id=0, show=False):
    """
    按配置文件初始化 okcoin driver

    Args:
        account: account.yaml 中 accounts.okcoin 下的账户名
        config_dir: 配置目录，默认 configs/
        trader_id: 写入交易日志的ID
        show: 是否打印调试信息

    Returns:
        OkcoinDriver
    """
    from configs.account_reader import get_okcoin_credentials
    from configs.config_reader import get_exchange_config

    cfg = get_exchange_config("okcoin", config_dir)
    try:
        credentials = get_okcoin_credentials(account, config_dir)
    except FileNotFoundError:
        # 没有 account.yaml 时回退到环境变量
        credentials = {
            'access_key': os.getenv("OKCOIN_ACCESS_KEY", ""),
            'secret_key': os.getenv("OKCOIN_SECRET_KEY", ""),
        }
    if show:
        logger.info("okcoin account: %s, fields: %s", account, list(credentials))

    option = ExchangeOption(
        type=EXCHANGE_TYPE,
        name=cfg.get("name", EXCHANGE_TYPE),
        access_key=credentials.get("access_key", ""),
        secret_key=credentials.get("secret_key", ""),
        main_stock=cfg.get("main_stock", BTC),
        trader_id=trader_id,
    )
    return OkcoinDriver(
        option=option,
        host=cfg.get("host"),
        limit=cfg.get("limit", 10.0),
        timeout=cfg.get("timeout", 10),
        log_dir=cfg.get("log_dir"),
        depth_size=cfg.get("depth_size", DEFAULT_DEPTH_SIZE),
        record_size=cfg.get("record_size", DEFAULT_RECORD_SIZE),
    )
