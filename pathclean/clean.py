"""pathclean.clean
=================

纯词法的路径清理，规则与 Plan 9 的 ``cleanname`` 以及 Go 的 ``path.Clean`` 一致：

1. 连续的 ``/`` 合并为一个；
2. 删除 ``.`` 路径元素；
3. ``..`` 与其前面的普通元素相互抵消；
4. 根路径开头的 ``..`` 直接丢弃，即 ``/..`` 变为 ``/``；
5. 相对路径开头无法抵消的 ``..`` 原样保留。

若处理后为空字符串，则返回 ``"."``。整个过程不访问文件系统，也不解析符号链接。

示例::

    >>> clean("hello/world/..")
    'hello'
    >>> clean("/../test")
    '/test'
    >>> clean("test/path/../../../..")
    '../..'
"""

from __future__ import annotations

from typing import Any, MutableSequence, Sequence

from .constants import DOT, DOT_BYTE, SEP, SEP_BYTE

__all__ = ["clean", "clean_bytes", "is_clean"]


def _clean_into(path: Sequence[Any], out: MutableSequence[Any], sep: Any, dot: Any) -> None:
    """对 ``path`` 做一次从左到右的扫描，把结果写入 ``out``。

    ``path`` 可以是 ``str``（元素为单字符）或 ``bytes``（元素为整数），
    ``sep``/``dot`` 与其元素类型一致。只有分隔符和点号会被识别，
    其余内容按原样复制，因此非 ASCII 文本不会被改变。
    """

    if not path:
        out.append(dot)
        return

    n = len(path)
    rooted = path[0] == sep

    # r 是下一个待读取的位置；dotdot 是 out 中 ".." 回退不能越过的下标，
    # 要么是根分隔符之后，要么是已保留的 "../.." 前缀之后。
    r = 0
    dotdot = 0
    if rooted:
        out.append(sep)
        r = 1
        dotdot = 1

    while r < n:
        if path[r] == sep or (path[r] == dot and (r + 1 == n or path[r + 1] == sep)):
            # 空元素或 "." 元素：跳过
            r += 1
        elif path[r] == dot and path[r + 1] == dot and (r + 2 == n or path[r + 2] == sep):
            # ".." 元素：回退到上一个分隔符
            r += 2
            if len(out) > dotdot:
                w = len(out) - 1
                while w > dotdot and out[w] != sep:
                    w -= 1
                del out[w:]
            elif not rooted:
                # 无法回退且不是根路径，保留 ".."
                if out:
                    out.append(sep)
                out.append(dot)
                out.append(dot)
                dotdot = len(out)
        else:
            # 普通元素，必要时先补分隔符
            if (rooted and len(out) != 1) or (not rooted and out):
                out.append(sep)
            while r < n and path[r] != sep:
                out.append(path[r])
                r += 1

    if not out:
        out.append(dot)


def clean(path: str) -> str:
    """返回 ``path`` 的最短等价写法。

    对任意字符串都有定义，不会抛出异常；空字符串返回 ``"."``。
    """

    if not isinstance(path, str):
        raise TypeError(f"clean() expects str, got {type(path).__name__}")
    out: list[str] = []
    _clean_into(path, out, SEP, DOT)
    return "".join(out)


def clean_bytes(path: bytes) -> bytes:
    """``clean`` 的 bytes 版本，适用于 ``os.fsencode`` 得到的路径。"""

    if not isinstance(path, (bytes, bytearray)):
        raise TypeError(f"clean_bytes() expects bytes, got {type(path).__name__}")
    out = bytearray()
    _clean_into(path, out, SEP_BYTE, DOT_BYTE)
    return bytes(out)


def is_clean(path: str) -> bool:
    """判断 ``path`` 是否已经是清理后的形式。"""

    return clean(path) == path
