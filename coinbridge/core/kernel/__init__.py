# -*- coding: utf-8 -*-
# coinbridge/core/kernel/__init__.py

from .errors import *  # noqa: F401,F403
from .models import BTC, LTC, Account, ExchangeOption, Order, OrderBook, Record, Ticker  # noqa: F401
from .syscalls import ExchangeSyscalls, TradingEngine  # noqa: F401
