import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

INFO = "INFO"
ERROR = "ERROR"
BUY = "BUY"
SELL = "SELL"
CANCEL = "CANCEL"

EVENT_KINDS = (INFO, ERROR, BUY, SELL, CANCEL)


class TradeLogger:
    """交易事件日志记录类"""

    def __init__(self, trader_id=0, exchange_type="", log_dir=None, log_name="trade"):
        """
        初始化交易日志记录器

        Args:
            trader_id: 策略/交易员ID，写入每一行
            exchange_type: 交易所类型，写入每一行
            log_dir: 日志目录，None 时只走 logging 的已有 handler
            log_name: 日志文件名前缀
        """
        self.trader_id = trader_id
        self.exchange_type = exchange_type
        self.logger = logging.getLogger(f"coinbridge.{log_name}")
        self.logger.setLevel(logging.INFO)

        if log_dir:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)
            log_file = (log_path / f"{log_name}.log").resolve()

            # 避免重复添加handler
            attached = any(
                isinstance(h, TimedRotatingFileHandler) and Path(h.baseFilename) == log_file
                for h in self.logger.handlers
            )
            if not attached:
                # 日志格式: 时间|交易员|交易所|类型|价格|数量|附加信息
                formatter = logging.Formatter(
                    '%(asctime)s|%(message)s',
                    datefmt='%Y-%m-%d %H:%M:%S'
                )

                # 按天轮转的文件处理器,保留90天
                handler = TimedRotatingFileHandler(
                    filename=log_file,
                    when='midnight',
                    interval=1,
                    backupCount=90,
                    encoding='utf-8'
                )
                handler.setFormatter(formatter)
                self.logger.addHandler(handler)

    def format_event(self, kind, price, amount, *msgs):
        context = " ".join(str(m) for m in msgs)
        return f"{self.trader_id}|{self.exchange_type}|{kind}|{price}|{amount}|{context}"

    def log(self, kind, price=0.0, amount=0.0, *msgs):
        """
        记录一条交易事件

        Args:
            kind: INFO / ERROR / BUY / SELL / CANCEL
            price: 成交或委托价格
            amount: 数量
            msgs: 附加信息
        """
        level = logging.ERROR if kind == ERROR else logging.INFO
        message = self.format_event(kind, price, amount, *msgs)
        self.logger.log(level, message)
        return message

    def info(self, *msgs):
        return self.log(INFO, 0.0, 0.0, *msgs)

    def error(self, *msgs):
        return self.log(ERROR, 0.0, 0.0, *msgs)
