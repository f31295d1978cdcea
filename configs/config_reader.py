#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
配置文件读取器
读取 coinbridge.yaml 中各交易所的运行参数（host、限频、默认品种等）
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any
import logging

CONFIG_FILE = 'coinbridge.yaml'

# 文件缺项时使用的默认值
EXCHANGE_DEFAULTS = {
    'okcoin': {
        'name': 'okcoin.cn',
        'host': 'https://www.okcoin.cn/api/v1/',
        'limit': 10.0,
        'timeout': 10,
        'main_stock': 'BTC',
        'depth_size': 20,
        'record_size': 200,
        'log_dir': None,
    },
}


class ConfigReader:
    """配置文件读取器类"""

    def __init__(self, config_dir: str = None):
        """
        初始化配置读取器

        Args:
            config_dir: 配置文件目录路径，默认为当前文件所在目录
        """
        if config_dir is None:
            config_dir = os.path.dirname(os.path.abspath(__file__))

        self.config_dir = Path(config_dir)
        self._configs = {}
        self._logger = logging.getLogger(__name__)

    def load_yaml(self, filename: str) -> Dict[str, Any]:
        """
        加载YAML配置文件

        Args:
            filename: 配置文件名（不包含路径）

        Returns:
            dict: 解析后的配置字典，空文件返回 {}

        Raises:
            FileNotFoundError: 配置文件不存在
            yaml.YAMLError: YAML解析错误
        """
        file_path = self.config_dir / filename

        if not file_path.exists():
            raise FileNotFoundError(f"配置文件不存在: {file_path}")

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            self._logger.error(f"YAML解析错误 {filename}: {e}")
            raise

        self._configs[filename] = config
        self._logger.info(f"成功加载配置文件: {filename}")
        return config

    def get_config(self, filename: str = CONFIG_FILE, key_path: str = None) -> Any:
        """
        获取配置文件中的指定值

        Args:
            filename: 配置文件名
            key_path: 键路径，用点分隔，如 'exchanges.okcoin.limit'

        Returns:
            配置值，键不存在时返回 None
        """
        if filename not in self._configs:
            self.load_yaml(filename)

        value = self._configs[filename]
        if key_path is None:
            return value

        try:
            for key in key_path.split('.'):
                value = value[key]
            return value
        except (KeyError, TypeError):
            self._logger.warning(f"配置键不存在: {key_path}")
            return None

    def get_exchange_config(self, exchange: str) -> Dict[str, Any]:
        """
        获取交易所运行参数，文件中的值覆盖默认值

        Args:
            exchange: 交易所名称 (okcoin)

        Returns:
            dict: 合并后的配置；配置文件不存在时返回默认值
        """
        merged = dict(EXCHANGE_DEFAULTS.get(exchange, {}))
        try:
            section = self.get_config(CONFIG_FILE, f'exchanges.{exchange}')
        except FileNotFoundError:
            self._logger.warning(f"未找到 {CONFIG_FILE}，使用默认配置")
            section = None
        if isinstance(section, dict):
            merged.update(section)
        return merged


# 创建全局配置读取器实例
config_reader = ConfigReader()


def get_exchange_config(exchange: str = 'okcoin', config_dir: str = None) -> Dict[str, Any]:
    """获取交易所配置的便捷函数"""
    reader = config_reader if config_dir is None else ConfigReader(config_dir)
    return reader.get_exchange_config(exchange)
