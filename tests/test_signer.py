# -*- coding: utf-8 -*-
# tests/test_signer.py

import itertools

from coinbridge.drivers.okcoin.signer import Signer, sign_md5


def test_sign_layout_and_digest():
    signer = Signer("ak", "sk")
    signed = signer.sign(["type=buy", "symbol=btc_cny"])
    assert signed == [
        "api_key=ak",
        "symbol=btc_cny",
        "type=buy",
        "secret_key=sk",
        "sign=FA28CB1BB433689FDC35DE7D67908CAC",
    ]


def test_sign_md5_is_upper_hex():
    digest = sign_md5(["a=1", "b=2"])
    assert len(digest) == 32
    assert digest == digest.upper()


def test_sign_independent_of_input_order():
    signer = Signer("key", "secret")
    params = ["symbol=ltc_cny", "price=10.5", "amount=2", "type=sell"]
    results = {tuple(signer.sign(list(p))) for p in itertools.permutations(params)}
    assert len(results) == 1


def test_sign_does_not_mutate_input():
    params = ["symbol=btc_cny"]
    Signer("k", "s").sign(params)
    assert params == ["symbol=btc_cny"]


def test_empty_params_still_signed():
    signed = Signer("k", "s").sign([])
    assert signed[:2] == ["api_key=k", "secret_key=s"]
    assert signed[2] == "sign=" + sign_md5(["api_key=k", "secret_key=s"])
