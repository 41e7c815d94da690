"""让 ``pathlib`` 路径对象与 ``os.PathLike`` 复用同一套清理规则。"""

from __future__ import annotations

import logging
import os
from pathlib import PurePath
from typing import TypeVar, Union

from .clean import clean, clean_bytes

__all__ = ["PathTextError", "clean_path", "clean_fspath"]

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=PurePath)


class PathTextError(ValueError):
    """路径对象无法表示为 UTF-8 文本时抛出（仅 strict 模式）。"""


def _path_text(path: PurePath, strict: bool) -> str:
    """取出路径的文本形式；无法编码时按策略降级为空字符串。"""

    text = str(path)  # 反斜杠等内容不做转换，按普通字符处理
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        if strict:
            raise PathTextError(f"path {text!r} has no UTF-8 text form") from exc
        logger.warning("Path %r is not representable as text, cleaning it as an empty path", text)
        return ""
    return text


def clean_path(path: P, *, strict: bool = False) -> P:
    """清理 ``PurePath`` 及其子类，并返回同类型的新对象。

    例如 ``PurePosixPath("/test/../path/")`` 清理后得到 ``PurePosixPath("/path")``。
    """

    return type(path)(clean(_path_text(path, strict)))


def clean_fspath(
    value: Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"],
    *,
    strict: bool = False,
) -> Union[str, bytes, PurePath]:
    """按宿主路径类型分派：str、bytes、PurePath 及其他 ``os.PathLike``。"""

    if isinstance(value, str):
        return clean(value)
    if isinstance(value, bytes):
        return clean_bytes(value)
    if isinstance(value, PurePath):
        return clean_path(value, strict=strict)
    if isinstance(value, os.PathLike):
        raw = os.fspath(value)
        return clean_bytes(raw) if isinstance(raw, bytes) else clean(raw)
    raise TypeError(f"expected str, bytes or os.PathLike, got {type(value).__name__}")
