"""
项目: pathclean
用途: 纯词法的路径清理（Plan 9 ``cleanname`` / Go ``path.Clean`` 规则），不访问文件系统。
依赖: 核心仅使用 Python 标准库；CLI 使用 rich 与 PyYAML。
示例用法:
    from pathclean import clean, clean_path
    clean("a/b/../c")            # 'a/c'
    clean_path(Path("/x/../y"))  # PosixPath('/y')
"""

from __future__ import annotations

from .adapter import PathTextError, clean_fspath, clean_path
from .clean import clean, clean_bytes, is_clean

__all__ = [
    "__version__",
    "PathTextError",
    "clean",
    "clean_bytes",
    "clean_fspath",
    "clean_path",
    "is_clean",
]

__version__: str = "0.1.0"
"""当前版本号。"""
