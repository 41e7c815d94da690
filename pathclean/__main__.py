"""`python -m pathclean` 的入口模块，调用 CLI。"""

from __future__ import annotations  # 未来兼容性

import sys  # 允许设置进程退出码

from .cli import main  # CLI 主入口


if __name__ == "__main__":  # 当模块被直接执行时
    sys.exit(main())  # 使用 main 的返回值作为退出码
