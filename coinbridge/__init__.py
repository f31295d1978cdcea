# -*- coding: utf-8 -*-
# coinbridge: uniform trading syscalls over exchange REST APIs,
# live or paper-traded.

__version__ = "0.1.0"
