"""
Request signer for okcoin.cn v1 private endpoints.
- MD5 over the sorted "key=value" list joined by '&', secret appended last
"""
import hashlib


def sign_md5(params):
    """Upper-case MD5 hex digest of '&'.join(params)."""
    return hashlib.md5("&".join(params).encode("utf-8")).hexdigest().upper()


class Signer:
    def __init__(self, access_key, secret_key):
        self.access_key = access_key
        self.secret_key = secret_key

    def sign(self, params):
        """
        :param params: iterable of "key=value" strings (any order)
        :return: list ready to be posted:
                 sorted(params + api_key), then secret_key, then sign
        """
        signed = list(params) + ["api_key=" + self.access_key]
        signed.sort()
        signed.append("secret_key=" + self.secret_key)
        signed.append("sign=" + sign_md5(signed))
        return signed
