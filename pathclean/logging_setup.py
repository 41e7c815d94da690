"""pathclean 的日志初始化：rich 控制台输出到 stderr，可选追加日志文件。"""

from __future__ import annotations

import logging
from logging import Logger
from pathlib import Path
from typing import Optional, Union

from rich.console import Console  # stdout 留给清理结果
from rich.logging import RichHandler

LOGGER_NAME = "pathclean"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: str) -> int:
    """把 "debug"/"INFO" 等名称转换为 logging 级别，未知名称按 INFO 处理。"""

    value = getattr(logging, str(level).upper(), None)
    return value if isinstance(value, int) else logging.INFO


def _file_handler(logfile: Union[str, Path], level: int) -> logging.Handler:
    """创建 UTF-8 文件处理器，日志目录不存在时自动创建。"""

    target = Path(logfile).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(target, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def init_logging(level: str, logfile: Optional[Union[str, Path]] = None) -> Logger:
    """配置根 logger 的 RichHandler，并返回 pathclean logger。

    重复调用时 ``basicConfig`` 不会再添加控制台处理器，但级别与文件处理器仍会更新。
    """

    numeric = _resolve_level(level)
    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, markup=False)],
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric)
    if logfile:
        logger.addHandler(_file_handler(logfile, numeric))

    logger.debug("Logging initialized at level %s", logging.getLevelName(numeric))
    return logger
