#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
AccountManager - Driver实例管理器
按 (交易所, 账户名) 管理 driver 实例，策略通过它拿 driver 而不是自己 new

- 每个 (交易所, 账户) 只有一个 driver，实例之间不共享账户或K线缓存
- driver 按需创建，创建函数可注入（测试时替换为假 driver）
"""

import logging
import threading
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union


class ExchangeType(Enum):
    """支持的交易所类型"""
    OKCOIN = "okcoin"


def _create_okcoin_driver(account: str, config_dir: Optional[str] = None):
    from coinbridge.drivers.okcoin.driver import init_OkcoinDriver
    return init_OkcoinDriver(account=account, config_dir=config_dir)


DEFAULT_FACTORIES = {
    ExchangeType.OKCOIN: _create_okcoin_driver,
}


class AccountManager:
    """
    Driver实例管理器
    负责创建、缓存和提供不同交易所的Driver实例
    """

    def __init__(self, config_dir: Optional[str] = None,
                 factories: Optional[Dict[ExchangeType, Callable[..., Any]]] = None):
        """
        初始化AccountManager

        Args:
            config_dir: 配置目录，传给 driver 的初始化函数
            factories: {ExchangeType: factory(account, config_dir)}，默认使用内置工厂
        """
        self.config_dir = config_dir
        self.factories = dict(DEFAULT_FACTORIES)
        self.factories.update(factories or {})
        self._drivers: Dict[str, Any] = {}  # key: f"{exchange_type}_{account}"
        self._lock = threading.RLock()
        self.logger = logging.getLogger('AccountManager')

    @staticmethod
    def _parse_type(exchange_type: Union[ExchangeType, str]) -> ExchangeType:
        if isinstance(exchange_type, ExchangeType):
            return exchange_type
        return ExchangeType(str(exchange_type).lower())

    @staticmethod
    def _get_driver_key(exchange_type: ExchangeType, account: str) -> str:
        """生成Driver的唯一标识"""
        return f"{exchange_type.value}_{account}"

    def get_driver(self, exchange_type: Union[ExchangeType, str] = ExchangeType.OKCOIN,
                   account: str = 'main', auto_create: bool = True) -> Optional[Any]:
        """
        获取Driver实例

        Args:
            exchange_type: 交易所类型
            account: 账户名称
            auto_create: 是否自动创建Driver（如果不存在）

        Returns:
            Driver实例或None
        """
        try:
            exchange_type = self._parse_type(exchange_type)
        except ValueError:
            self.logger.error(f"Invalid exchange type: {exchange_type}")
            return None

        driver_key = self._get_driver_key(exchange_type, account)
        with self._lock:
            if driver_key in self._drivers:
                return self._drivers[driver_key]
            if not auto_create:
                return None

            try:
                driver = self.factories[exchange_type](account, self.config_dir)
            except Exception as e:
                self.logger.error(f"Failed to create driver {driver_key}: {e}")
                return None
            self._drivers[driver_key] = driver
            self.logger.info(f"Driver {driver_key} created and ready")
            return driver

    def remove_driver(self, exchange_type: Union[ExchangeType, str], account: str = 'main') -> bool:
        """移除Driver实例，返回是否存在"""
        driver_key = self._get_driver_key(self._parse_type(exchange_type), account)
        with self._lock:
            if self._drivers.pop(driver_key, None) is None:
                self.logger.warning(f"Driver {driver_key} not found")
                return False
            self.logger.info(f"Driver {driver_key} removed")
            return True

    def list_drivers(self):
        with self._lock:
            return sorted(self._drivers)

    def shutdown(self):
        """关闭AccountManager，清理所有Driver"""
        with self._lock:
            self.logger.info(f"Shutting down AccountManager, cleaning up {len(self._drivers)} drivers")
            self._drivers.clear()
