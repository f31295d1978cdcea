# -*- coding: utf-8 -*-
# coinbridge/drivers/okcoin/__init__.py
# okcoin.cn spot driver package

from .driver import OkcoinDriver, init_OkcoinDriver  # noqa: F401
from .rest import OkcoinRest  # noqa: F401

__all__ = [
    'OkcoinDriver',
    'OkcoinRest',
    'init_OkcoinDriver',
]
