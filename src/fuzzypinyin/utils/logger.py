"""
日誌與計時工具

所有 logger 都掛在 "fuzzypinyin" 命名空間下，預設只裝 NullHandler，
函式庫本身保持靜默，由使用者透過標準 logging 或 enable_* 函式開啟輸出。

使用方式:
    from fuzzypinyin.utils.logger import get_logger, TimingContext

    logger = get_logger("index.registry")
    with TimingContext("build(file)", logger):
        ...
"""

import logging
import time
from functools import wraps
from typing import Any, Callable, Optional

ROOT_LOGGER_NAME = "fuzzypinyin"
TIMING_LOGGER_NAME = f"{ROOT_LOGGER_NAME}.timing"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 fuzzypinyin 命名空間下的 logger

    Args:
        name: 子 logger 名稱（如 "index.registry"），
              已帶 "fuzzypinyin." 前綴的名稱會原樣使用

    Returns:
        logging.Logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """
    為根 logger 安裝輸出 handler（重複呼叫不會重複安裝）

    Args:
        level: 日誌等級
        fmt: 格式字串
        handler: 自訂 handler，預設輸出到 stderr
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if handler is None:
        for existing in logger.handlers:
            if getattr(existing, "_fuzzypinyin_default", False):
                existing.setLevel(level)
                return logger
        handler = logging.StreamHandler()
        handler._fuzzypinyin_default = True  # type: ignore[attr-defined]

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    return logger


def enable_debug_logging() -> None:
    """開啟 DEBUG 等級輸出（包含每筆轉換失敗的細節）"""
    setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> None:
    """只開啟計時 logger 的輸出"""
    setup_logger(level=logging.INFO)
    logging.getLogger(TIMING_LOGGER_NAME).setLevel(logging.DEBUG)


class TimingContext:
    """
    計時 context manager

    離開區塊時記錄耗時，並呼叫 callback(operation, elapsed)。
    區塊內拋出的例外不會被吞掉。

    Attributes:
        operation: 操作名稱
        elapsed: 耗時（秒），離開區塊後才有值
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or logging.getLogger(TIMING_LOGGER_NAME)
        self.level = level
        self.callback = callback
        self.start_time = 0.0
        self.elapsed = 0.0

    def __enter__(self) -> "TimingContext":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.elapsed = time.perf_counter() - self.start_time
        if exc_type is None:
            self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed:.4f}s")
        else:
            self.logger.log(
                self.level,
                f"[Timing] {self.operation}: failed after {self.elapsed:.4f}s",
            )
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    函式計時裝飾器

    範例:
        >>> @log_timing("load_pinyin_dict")
        ... def load():
        ...     ...
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with TimingContext(name, level=level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
