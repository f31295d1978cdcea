import math

import pandas as pd


def to_float(v, default=0.0):
    """数值宽松转换：字符串/数字 -> float，失败返回 default"""
    if isinstance(v, bool):
        return float(v)
    try:
        f = float(v)
    except (TypeError, ValueError):
        return default
    if math.isnan(f):
        return default
    return f


def to_int(v, default=0):
    try:
        return int(to_float(v, default))
    except (OverflowError, ValueError):
        return default


def fmt_num(x):
    """
    请求参数里的数字格式：整数不带小数点，其余取最短表示
    fmt_num(3000.0) -> '3000', fmt_num(0.01) -> '0.01'
    """
    x = to_float(x)
    if x.is_integer():
        return str(int(x))
    return repr(x)


def records_to_dataframe(records):
    """list[Record] -> DataFrame, 列名与 get_kline 一致"""
    rows = [[r.time * 1000, r.open, r.high, r.low, r.close, r.volume] for r in records]
    df = pd.DataFrame(data=rows, columns=['trade_date', 'open', 'high', 'low', 'close', 'vol'])
    df['trade_date'] = df['trade_date'].astype('int64')
    return df
