"""pathclean CLI 入口，使用 argparse 解析子命令并执行对应逻辑。"""

from __future__ import annotations  # 确保未来兼容性

import argparse  # 标准库 CLI 解析器
import logging  # 子命令内部记录调试信息
import sys  # 控制退出码与标准输入输出
from pathlib import Path  # 文件路径操作
from typing import Iterable, List, Tuple  # 类型注解

from rich.console import Console  # 优化控制台输出
from rich.markup import escape  # 路径中的方括号不应被当作样式标记
from rich.table import Table  # 用于格式化检查结果

from . import __version__  # 版本号
from .clean import clean, clean_bytes  # 核心清理函数
from .config import AppConfig, ConfigError, load_config  # 导入配置加载函数
from .constants import SAMPLE_CONFIG_FILE  # 示例配置文件名
from .logging_setup import init_logging  # 日志初始化函数

console = Console()  # 全局控制台实例，方便输出
err_console = Console(stderr=True, soft_wrap=True)  # 错误信息写入 stderr，不折行

logger = logging.getLogger(__name__)


def _emit(lines: Iterable[str]) -> None:
    """逐行写出结果，保持原样，不经过 rich 的换行与高亮。"""

    for line in lines:  # 遍历结果
        sys.stdout.write(line + "\n")  # 每个结果占一行


def cmd_clean(args: argparse.Namespace, config: AppConfig) -> int:
    """处理 clean 子命令，按参数顺序输出清理结果。"""

    _emit(clean(path) for path in args.paths)  # 输出每个参数的清理结果
    return 0  # 返回成功


def cmd_check(args: argparse.Namespace, config: AppConfig) -> int:
    """处理 check 子命令，列出尚未清理的路径。"""

    results: List[Tuple[str, str]] = [(path, clean(path)) for path in args.paths]  # 原路径与清理结果
    dirty = [(path, cleaned) for path, cleaned in results if path != cleaned]  # 需要清理的条目
    rows = results if config.check.show_clean else dirty  # 按配置决定展示范围

    if rows:  # 有内容时才绘制表格
        table = Table(title="pathclean check")  # 创建表格
        table.add_column("Path")  # 原始路径
        table.add_column("Cleaned")  # 清理结果
        table.add_column("Status")  # 状态
        for path, cleaned in rows:  # 填充表格
            status = "[green]clean[/green]" if path == cleaned else "[red]unclean[/red]"
            table.add_row(escape(repr(path)), escape(repr(cleaned)), status)
        console.print(table)  # 输出表格

    logger.debug("check: %d of %d paths need cleaning", len(dirty), len(results))
    if dirty:  # 存在未清理路径
        console.print(f"[yellow]{len(dirty)} 个路径需要清理。[/yellow]")
        return 1  # 返回非零退出码
    console.print("[bold green]所有路径均已清理。[/bold green]")  # 输出成功消息
    return 0  # 返回成功


def _read_lines(source: str) -> List[bytes]:
    """从文件或标准输入按字节读取路径，每行只去掉一个结尾的 \\n 或 \\r\\n。"""

    if source == "-":  # 读取标准输入
        data = sys.stdin.buffer.read()
    else:
        data = Path(source).read_bytes()  # 不做解码，非 UTF-8 路径原样保留
    if not data:  # 空输入没有任何行
        return []
    lines = data.split(b"\n")  # 只按 \n 切分
    if lines[-1] == b"":  # 结尾换行留下的空元素
        lines.pop()
    return [line[:-1] if line.endswith(b"\r") else line for line in lines]


def cmd_batch(args: argparse.Namespace, config: AppConfig) -> int:
    """处理 batch 子命令，逐行清理输入中的路径。"""

    try:
        lines = _read_lines(args.file)  # 读取输入
    except OSError as exc:  # 文件不存在、是目录或无权限
        err_console.print(f"[red]无法读取输入 {escape(args.file)}: {escape(exc.strerror or str(exc))}[/red]")
        return 1  # 返回非零退出码

    skip_blank = config.batch.skip_blank  # 是否跳过空行
    sys.stdout.flush()  # 先清空文本层缓冲，再写字节层
    out = sys.stdout.buffer
    for line in lines:
        if line or not skip_blank:
            out.write(clean_bytes(line) + b"\n")
    out.flush()
    logger.debug("batch: processed %d lines from %s", len(lines), args.file)
    return 0  # 返回成功


def build_parser() -> argparse.ArgumentParser:
    """构建顶级 argparse 解析器。"""

    parser = argparse.ArgumentParser(prog="pathclean", description="Lexical path cleaning")  # 创建解析器
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")  # 版本信息
    parser.add_argument(
        "--config",
        default=None,
        help="指定配置文件路径 (默认: 当前目录下的 pathclean.yaml)",
    )  # 全局配置文件参数
    parser.add_argument(
        "--log-level",
        default=None,
        help="覆盖配置中的日志级别 (debug/info/warning/error)",
    )  # 日志级别覆盖

    subparsers = parser.add_subparsers(dest="command", required=True)  # 注册子命令

    clean_parser = subparsers.add_parser("clean", help="输出清理后的路径")  # clean 子命令
    clean_parser.add_argument("paths", nargs="+", metavar="PATH")
    clean_parser.set_defaults(func=cmd_clean)

    check_parser = subparsers.add_parser("check", help="检查路径是否已清理")  # check 子命令
    check_parser.add_argument("paths", nargs="+", metavar="PATH")
    check_parser.set_defaults(func=cmd_check)

    batch_parser = subparsers.add_parser("batch", help="逐行清理文件或标准输入中的路径")  # batch 子命令
    batch_parser.add_argument("file", nargs="?", default="-", metavar="FILE")
    batch_parser.set_defaults(func=cmd_batch)

    return parser  # 返回解析器供 main 使用


def main(argv: list[str] | None = None) -> int:
    """CLI 入口函数，加载配置、初始化日志并派发子命令。"""

    parser = build_parser()  # 构建解析器
    args = parser.parse_args(argv)  # 解析参数

    try:
        config = load_config(args.config)  # 加载配置
    except ConfigError as exc:  # 捕获配置错误
        err_console.print(f"[red]配置加载失败: {escape(str(exc))}[/red]")  # 输出错误
        err_console.print(f"[yellow]可参考 {SAMPLE_CONFIG_FILE} 编写配置。[/yellow]")  # 提示示例配置
        return 2  # 配置错误使用独立退出码

    level = args.log_level or config.logging.level  # 命令行优先
    init_logging(level, config.logging.file)  # 初始化日志系统
    return args.func(args, config)  # 调用子命令处理函数


if __name__ == "__main__":  # 允许直接运行模块
    sys.exit(main())  # 调用 main 并使用返回值作为退出码
