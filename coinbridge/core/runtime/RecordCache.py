#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
RecordCache - K线增量缓存
按 (品种, 周期) 维护有序、有上限的K线序列，每次拉取后合并：

- 新收盘的K线追加到末尾
- 尚未收盘的最后一根K线（时间戳与缓存末尾相同）原地覆盖
- 遇到比缓存末尾更早的K线即停止扫描

序列长度上限为最近一次请求的 size，超出部分从头部丢弃。
"""

import threading
from collections import deque


class RecordSeries:
    """单个 (品种, 周期) 的K线序列，容量由 deque 的 maxlen 保证"""

    def __init__(self, size=200):
        self._items = deque(maxlen=size)

    @property
    def size(self):
        return self._items.maxlen

    @property
    def last_time(self):
        """末尾K线时间戳，空序列返回 0"""
        return self._items[-1].time if self._items else 0

    def resize(self, size):
        if size != self._items.maxlen:
            # deque(iterable, maxlen) 保留最后 size 条
            self._items = deque(self._items, maxlen=size)

    def merge(self, fresh, size=None):
        """
        合并新拉取的K线

        Args:
            fresh: 交易所返回的K线，按时间从旧到新排列
            size: 合并后保留的最大条数，None 表示沿用当前容量

        Returns:
            list: 合并后的序列副本
        """
        last_time = self.last_time
        pending = []
        # 从最新一根往回扫
        for bar in reversed(fresh):
            if bar.time > last_time:
                if pending and bar.time >= pending[-1].time:
                    continue
                pending.append(bar)
            elif last_time > 0 and bar.time == last_time:
                self._items[-1] = bar
            else:
                break

        if size is not None:
            self.resize(size)
        self._items.extend(reversed(pending))
        return self.to_list()

    def to_list(self):
        # 返回副本，调用方修改不影响缓存
        return [bar.copy() for bar in self._items]

    def __len__(self):
        return len(self._items)


class RecordCache:
    """
    K线缓存容器
    每个 driver 实例独占一个 RecordCache，不在实例间共享
    """

    def __init__(self):
        self._series = {}
        self._lock = threading.Lock()

    def merge(self, stock, period, fresh, size=200):
        with self._lock:
            series = self._series.get((stock, period))
            if series is None:
                series = self._series[(stock, period)] = RecordSeries(size)
            return series.merge(fresh, size)

    def get(self, stock, period):
        """当前缓存的序列副本，未缓存时返回空列表"""
        with self._lock:
            series = self._series.get((stock, period))
            return series.to_list() if series is not None else []
