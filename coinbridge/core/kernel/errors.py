# -*- coding: utf-8 -*-
# coinbridge/core/kernel/errors.py
# Error kinds raised inside drivers and engines. The driver facade turns them
# into (result, error) tuples, so they never reach strategy code as raises.


class AdapterError(Exception):
    """Base class for every failure reported by an exchange driver."""

    kind = "AdapterError"

    def __init__(self, message=""):
        self.message = message
        super().__init__(message)

    def __str__(self):
        return self.message or self.kind


class UnknownInstrument(AdapterError):
    kind = "UnknownInstrument"

    def __init__(self, stock):
        self.stock = stock
        super().__init__(f"unrecognized stockType: {stock}")


class UnknownPeriod(AdapterError):
    kind = "UnknownPeriod"

    def __init__(self, period):
        self.period = period
        super().__init__(f"unrecognized period: {period}")


class NetworkFailure(AdapterError):
    kind = "NetworkFailure"


class ParseFailure(AdapterError):
    kind = "ParseFailure"


class InsufficientDepth(AdapterError):
    kind = "InsufficientDepth"

    def __init__(self, message="can not get enough Bids or Asks"):
        super().__init__(message)


class ExchangeRejected(AdapterError):
    """交易所返回 result=false，code 为交易所原始错误码"""

    kind = "ExchangeRejected"

    def __init__(self, code):
        self.code = code
        super().__init__(f"the error number is {code}")


class OrderNotFound(AdapterError):
    kind = "OrderNotFound"

    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__(f"order {order_id} not found")


class PricingUnavailable(AdapterError):
    kind = "PricingUnavailable"

    def __init__(self, stock, cause=None):
        self.stock = stock
        self.cause = cause
        super().__init__(f"can not price {stock}: {cause}")


class PriceTooLow(AdapterError):
    kind = "PriceTooLow"

    def __init__(self, message="order price must be greater than market sell price"):
        super().__init__(message)


class PriceTooHigh(AdapterError):
    kind = "PriceTooHigh"

    def __init__(self, message="order price must be lesser than market buy price"):
        super().__init__(message)


class InsufficientBalance(AdapterError):
    kind = "InsufficientBalance"

    def __init__(self, message="balance is not enough"):
        super().__init__(message)


class InvalidAmount(AdapterError):
    kind = "InvalidAmount"

    def __init__(self, amount):
        self.amount = amount
        super().__init__(f"order amount must be positive, got {amount}")


class InsufficientInventory(AdapterError):
    kind = "InsufficientInventory"

    def __init__(self, message="stock is not enough"):
        super().__init__(message)
