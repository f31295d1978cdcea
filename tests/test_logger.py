# -*- coding: utf-8 -*-
# tests/test_logger.py

import logging

from coinbridge.utils.logger import BUY, ERROR, SELL, TradeLogger


def test_format_event():
    tl = TradeLogger(trader_id=1, exchange_type="okcoin.cn")
    assert tl.format_event(BUY, 3000.0, 0.5, "a", 1) == "1|okcoin.cn|BUY|3000.0|0.5|a 1"
    assert tl.format_event(SELL, 1, 2) == "1|okcoin.cn|SELL|1|2|"


def test_error_kind_logs_at_error_level(caplog):
    tl = TradeLogger(trader_id=2, exchange_type="okcoin.cn")
    with caplog.at_level(logging.INFO, logger="coinbridge.trade"):
        tl.log(ERROR, 0.0, 0.0, "boom")
        tl.info("fine")
    levels = [r.levelno for r in caplog.records if r.name == "coinbridge.trade"]
    assert levels == [logging.ERROR, logging.INFO]


def test_file_handler_attached_once(tmp_path):
    log_name = "trade_file_test"
    first = TradeLogger(trader_id=3, exchange_type="okcoin.cn", log_dir=tmp_path, log_name=log_name)
    TradeLogger(trader_id=3, exchange_type="okcoin.cn", log_dir=tmp_path, log_name=log_name)
    handlers = [h for h in first.logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(handlers) == 1

    first.log(BUY, 10.0, 1.0, "probe")
    handlers[0].flush()
    line = (tmp_path / f"{log_name}.log").read_text(encoding="utf-8").strip()
    assert line.endswith("|3|okcoin.cn|BUY|10.0|1.0|probe")

    for h in handlers:
        first.logger.removeHandler(h)
        h.close()
