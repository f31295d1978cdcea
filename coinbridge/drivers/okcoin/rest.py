"""
REST adapter for okcoin.cn (API v1).
Responsibilities:
- GET public endpoints, POST signed private endpoints (form encoded)
- Handle authentication/signature (signer.Signer)
- Respect rate limits on signed calls (limiter.RateLimiter)
- Turn transport/decoding failures into NetworkFailure / ParseFailure and
  result=false envelopes into ExchangeRejected
"""
import json
import logging
from urllib.parse import urljoin

import requests

from coinbridge.core.kernel.errors import ExchangeRejected, NetworkFailure, ParseFailure
from coinbridge.drivers.okcoin.limiter import RateLimiter
from coinbridge.drivers.okcoin.signer import Signer
from coinbridge.drivers.okcoin.util import to_int

logger = logging.getLogger(__name__)

DEFAULT_HOST = "https://www.okcoin.cn/api/v1/"


class OkcoinRest:
    """okcoin.cn REST API client."""

    def __init__(self, access_key="", secret_key="", host=None, limit=10.0, timeout=10, limiter=None):
        self._host = host or DEFAULT_HOST
        self.signer = Signer(access_key, secret_key)
        self.limiter = limiter or RateLimiter(limit)
        self.timeout = timeout

    @property
    def host(self):
        return self._host

    def request(self, method, uri, params=None, auth=False):
        """Initiate network request
       @param method: GET / POST
       @param uri: endpoint relative to host, e.g. 'depth.do'
       @param params: list of "key=value" strings
       @param auth: sign the params and count the call against the limiter
       @return: decoded JSON document
       """
        params = list(params or [])
        url = urljoin(self._host, uri)
        headers = None
        body = None
        if auth:
            self.limiter.acquire()
            body = "&".join(self.signer.sign(params))
            headers = {"Content-Type": "application/x-www-form-urlencoded"}
        elif params:
            url += "?" + "&".join(params)

        try:
            resp = requests.request(method, url, data=body, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.debug("%s %s failed: %s", method, uri, e)
            raise NetworkFailure(f"{method} {uri}: {e}") from e

        try:
            return json.loads(resp.content)
        except (TypeError, ValueError) as e:
            raise ParseFailure(f"{uri}: invalid JSON, {e}") from e

    @staticmethod
    def check_result(doc):
        """Private endpoints answer {'result': true, ...}; anything else is a rejection."""
        if not isinstance(doc, dict):
            raise ParseFailure(f"unexpected response {type(doc).__name__}")
        if doc.get("result") is not True:
            raise ExchangeRejected(to_int(doc.get("error_code"), -1))
        return doc

    # -------------- public --------------
    def get_depth(self, symbol, size=20):
        """
       Get depth data.
       *  asks 卖方深度，价格从高到低
       *  bids 买方深度，价格从高到低
       *  each level: [price, amount]
       """
        doc = self.request("GET", "depth.do", ["symbol=" + symbol, "size=%d" % size])
        if isinstance(doc, dict) and doc.get("result") is False:
            raise ExchangeRejected(to_int(doc.get("error_code"), -1))
        return doc

    def get_kline(self, symbol, type, size=200):
        """
       Get kline data, oldest bar first.
       each row: [time_ms, open, high, low, close, volume]
       """
        doc = self.request("GET", "kline.do", ["symbol=" + symbol, "type=" + type, "size=%d" % size])
        if isinstance(doc, dict) and doc.get("result") is False:
            raise ExchangeRejected(to_int(doc.get("error_code"), -1))
        if not isinstance(doc, list):
            raise ParseFailure("kline.do: expected a list of bars")
        return doc

    # -------------- private --------------
    def userinfo(self):
        return self.check_result(self.request("POST", "userinfo.do", [], auth=True))

    def trade(self, params):
        return self.check_result(self.request("POST", "trade.do", params, auth=True))

    def order_info(self, symbol, order_id):
        params = ["symbol=" + symbol, "order_id=" + str(order_id)]
        return self.check_result(self.request("POST", "order_info.do", params, auth=True))

    def order_history(self, symbol, status=1, current_page=1, page_length=200):
        params = [
            "symbol=" + symbol,
            "status=%d" % status,
            "current_page=%d" % current_page,
            "page_length=%d" % page_length,
        ]
        return self.check_result(self.request("POST", "order_history.do", params, auth=True))

    def cancel_order(self, symbol, order_id):
        params = ["symbol=" + symbol, "order_id=" + str(order_id)]
        return self.check_result(self.request("POST", "cancel_order.do", params, auth=True))
