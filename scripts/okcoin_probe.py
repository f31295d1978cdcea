#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# scripts/okcoin_probe.py
# 连通性检查 + 公共行情 + 模拟盘下单演示，不需要 API key
#
#   python scripts/okcoin_probe.py            # BTC, period M
#   python scripts/okcoin_probe.py LTC M5

import os
import socket
import sys
import time
from urllib.parse import urlparse

# 添加项目路径
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(current_dir)
sys.path.insert(0, project_root)

from coinbridge.drivers.okcoin.driver import init_OkcoinDriver  # noqa: E402


def dns_lookup(host: str, timeout: float = 3.0):
    t0 = time.time()
    try:
        socket.setdefaulttimeout(timeout)
        infos = socket.getaddrinfo(host, 443, proto=socket.IPPROTO_TCP)
        ips = list({info[4][0] for info in infos})
        return {"ok": True, "ips": ips, "ms": int((time.time() - t0) * 1000)}
    except OSError as e:
        return {"ok": False, "error": str(e), "ms": int((time.time() - t0) * 1000)}


def tcp_connect(host: str, port: int = 443, timeout: float = 3.0):
    t0 = time.time()
    try:
        with socket.create_connection((host, port), timeout=timeout):
            return {"ok": True, "ms": int((time.time() - t0) * 1000)}
    except OSError as e:
        return {"ok": False, "error": str(e), "ms": int((time.time() - t0) * 1000)}


def main(stock="BTC", period="M"):
    driver = init_OkcoinDriver()
    host = urlparse(driver.rest.host).hostname
    print(f"[PROBE] {driver.get_name()} ({driver.get_type()}) host={host}")

    dns = dns_lookup(host)
    print(f"[PROBE] dns -> {dns}")
    tcp = tcp_connect(host)
    print(f"[PROBE] tcp -> {tcp}")
    if not (dns["ok"] and tcp["ok"]):
        print("[PROBE] 网络不可达，检查 DNS / 代理设置")
        return 1

    ticker, err = driver.get_ticker(stock)
    if err:
        print(f"[PROBE] get_ticker failed: {err}")
        return 1
    print(f"[PROBE] ticker -> buy={ticker.buy} sell={ticker.sell} mid={ticker.mid}")

    records, err = driver.get_records(stock, period, 20)
    print(f"[PROBE] records -> {len(records)} bars, err={err}")
    if records:
        print(f"[PROBE] last bar -> {records[-1]}")

    # 模拟盘：按卖一价买入最小单位
    driver.simulate(10000, 0, 0)
    order_id, err = driver.buy(stock, ticker.sell, driver.get_min_amount(stock), "probe")
    print(f"[PROBE] simulated buy -> id={order_id} err={err}")
    account, err = driver.get_account()
    print(f"[PROBE] simulated account -> {account} err={err}")
    return 0


if __name__ == '__main__':
    sys.exit(main(*sys.argv[1:3]))
