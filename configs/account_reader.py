#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
账户配置文件读取器
专门用于读取account.yaml配置文件，提供简洁的接口

account.yaml 格式:
    accounts:
      okcoin:
        main:
          access_key: '...'
          secret_key: '...'
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any


class AccountReader:
    """账户配置读取器"""

    def __init__(self, config_dir: str = None):
        """
        初始化账户配置读取器

        Args:
            config_dir: 配置文件目录，默认为当前文件所在目录
        """
        if config_dir is None:
            config_dir = os.path.dirname(os.path.abspath(__file__))

        self.config_dir = Path(config_dir)
        self.account_file = self.config_dir / 'account.yaml'
        self._config = None

    def _load_config(self) -> Dict[str, Any]:
        """加载配置文件"""
        if self._config is not None:
            return self._config

        if not self.account_file.exists():
            raise FileNotFoundError(f"账户配置文件不存在: {self.account_file}")

        try:
            with open(self.account_file, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}
            return self._config
        except yaml.YAMLError as e:
            raise ValueError(f"YAML解析错误: {e}")

    def get_exchange_accounts(self, exchange: str) -> Dict[str, Dict[str, Any]]:
        """
        获取指定交易所的所有账户

        Args:
            exchange: 交易所名称 (okcoin)

        Returns:
            dict: 格式为 {account: {credentials}}
        """
        config = self._load_config()
        return (config.get('accounts') or {}).get(exchange) or {}

    def get_account(self, exchange: str, account: str) -> Dict[str, Any]:
        """
        获取指定账户的配置

        Args:
            exchange: 交易所名称
            account: 账户名称

        Returns:
            dict: 账户配置信息，不存在时为空字典
        """
        return self.get_exchange_accounts(exchange).get(account) or {}

    def get_okcoin_credentials(self, account: str = 'main') -> Dict[str, str]:
        """
        获取OKCoin账户认证信息

        Args:
            account: 账户名称，默认为'main'

        Returns:
            dict: 包含access_key, secret_key的字典
        """
        account_config = self.get_account('okcoin', account)
        return {
            'access_key': str(account_config.get('access_key', '') or ''),
            'secret_key': str(account_config.get('secret_key', '') or ''),
        }


# 创建全局实例
account_reader = AccountReader()


def _reader(config_dir: str = None) -> AccountReader:
    return account_reader if config_dir is None else AccountReader(config_dir)


def get_okcoin_credentials(account: str = 'main', config_dir: str = None) -> Dict[str, str]:
    """获取OKCoin认证信息的便捷函数"""
    return _reader(config_dir).get_okcoin_credentials(account)
