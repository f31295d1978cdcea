# -*- coding: utf-8 -*-
# coinbridge/drivers/okcoin/market.py
# Public market data: depth -> Ticker, kline -> Record history.

import logging

from coinbridge.core.kernel.errors import InsufficientDepth, ParseFailure, UnknownInstrument, UnknownPeriod
from coinbridge.core.kernel.models import OrderBook, Record, Ticker
from coinbridge.core.runtime.RecordCache import RecordCache
from coinbridge.drivers.okcoin.util import to_float, to_int

logger = logging.getLogger(__name__)

DEFAULT_DEPTH_SIZE = 20
DEFAULT_RECORD_SIZE = 200


def _levels(rows):
    levels = []
    for row in rows or []:
        if not isinstance(row, (list, tuple)) or len(row) < 2:
            raise ParseFailure(f"bad depth level {row!r}")
        levels.append(OrderBook(price=to_float(row[0]), amount=to_float(row[1])))
    return levels


def parse_depth(doc):
    """
    depth.do -> Ticker
    bids arrive best first; asks arrive highest first and are reversed so the
    best ask leads.
    """
    if not isinstance(doc, dict):
        raise ParseFailure("depth.do: expected an object")
    bids = _levels(doc.get("bids"))
    asks = _levels(doc.get("asks"))
    asks.reverse()
    if len(bids) < 1 or len(asks) < 1:
        raise InsufficientDepth()
    return Ticker(bids, asks)


def parse_kline(rows):
    """kline.do rows [time_ms, o, h, l, c, v] -> list[Record] (same order)"""
    if not isinstance(rows, (list, tuple)):
        raise ParseFailure("kline.do: expected a list of bars")
    records = []
    for row in rows:
        if not isinstance(row, (list, tuple)) or len(row) < 6:
            raise ParseFailure(f"bad kline row {row!r}")
        records.append(Record(
            time=to_int(row[0]) // 1000,
            open=to_float(row[1]),
            high=to_float(row[2]),
            low=to_float(row[3]),
            close=to_float(row[4]),
            volume=to_float(row[5]),
        ))
    return records


class OkcoinMarket:
    """
    Market data over the public endpoints.
    :param rest: OkcoinRest (anything with get_depth / get_kline)
    :param stock_map: {'BTC': 'btc', ...}
    :param period_map: {'M': '1min', ...}
    :param quote: quote currency suffix of exchange symbols
    """

    def __init__(self, rest, stock_map, period_map, quote="cny", records=None):
        self.rest = rest
        self.stock_map = stock_map
        self.period_map = period_map
        self.quote = quote
        self.records = records if records is not None else RecordCache()

    def symbol(self, stock):
        if stock not in self.stock_map:
            raise UnknownInstrument(stock)
        return self.stock_map[stock] + "_" + self.quote

    def get_ticker(self, stock, size=DEFAULT_DEPTH_SIZE):
        symbol = self.symbol(stock)
        size = to_int(size)
        if size <= 0:
            size = DEFAULT_DEPTH_SIZE
        return parse_depth(self.rest.get_depth(symbol, size))

    def get_records(self, stock, period, size=DEFAULT_RECORD_SIZE):
        """
        拉取K线并合并进缓存，返回合并后的序列
        异常直接抛出，由 driver 负责记录并回退到旧数据
        """
        symbol = self.symbol(stock)
        if period not in self.period_map:
            raise UnknownPeriod(period)
        size = to_int(size)
        if size <= 0:
            size = DEFAULT_RECORD_SIZE
        fresh = parse_kline(self.rest.get_kline(symbol, self.period_map[period], size))
        merged = self.records.merge(stock, period, fresh, size)
        logger.debug("%s %s: %d fetched, %d cached", stock, period, len(fresh), len(merged))
        return merged

    def cached_records(self, stock, period):
        return self.records.get(stock, period)
