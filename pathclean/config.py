"""配置加载与校验模块，负责解析 pathclean.yaml 并提供结构化数据。"""

from __future__ import annotations  # 兼容未来类型注解

from dataclasses import dataclass, field  # 使用 dataclass 表示配置结构
from pathlib import Path  # 统一路径处理
from typing import Any, Dict, Optional  # 类型注解辅助

import yaml  # 解析 YAML 配置

from .constants import (  # 导入常量方便使用默认值
    DEFAULT_BATCH_SKIP_BLANK,
    DEFAULT_CHECK_SHOW_CLEAN,
    DEFAULT_CONFIG_FILE,
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_LEVEL,
)


@dataclass
class LoggingConfig:
    """描述日志配置。"""

    level: str = DEFAULT_LOG_LEVEL  # 日志级别
    file: Optional[Path] = DEFAULT_LOG_FILE  # 日志文件路径


@dataclass
class CheckConfig:
    """描述 check 子命令的输出选项。"""

    show_clean: bool = DEFAULT_CHECK_SHOW_CLEAN  # 是否列出已干净的路径


@dataclass
class BatchConfig:
    """描述 batch 子命令的输入处理选项。"""

    skip_blank: bool = DEFAULT_BATCH_SKIP_BLANK  # 是否跳过空行


@dataclass
class AppConfig:
    """聚合所有配置段。"""

    logging: LoggingConfig = field(default_factory=LoggingConfig)  # 日志配置
    check: CheckConfig = field(default_factory=CheckConfig)  # check 配置
    batch: BatchConfig = field(default_factory=BatchConfig)  # batch 配置
    config_path: Optional[Path] = None  # 配置文件所在路径，None 表示使用默认值


class ConfigError(Exception):
    """配置解析相关的自定义异常。"""


def _load_yaml(path: Path) -> Dict[str, Any]:
    """内部函数：加载 YAML 并返回字典。"""

    try:
        with path.open("r", encoding="utf-8") as fh:  # 打开配置文件
            data = yaml.safe_load(fh) or {}  # 使用 safe_load 解析，空文件回退空 dict
    except FileNotFoundError as exc:  # 捕获文件不存在异常
        raise ConfigError(f"找不到配置文件: {path}") from exc  # 包装为 ConfigError
    except yaml.YAMLError as exc:  # 捕获 YAML 语法错误
        raise ConfigError(f"解析 YAML 失败: {exc}") from exc  # 转换异常类型

    if not isinstance(data, dict):  # 确保根节点是字典
        raise ConfigError("配置文件顶层必须是映射类型")  # 给出明确错误
    return data  # 返回解析后的字典


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """读取一个可选的映射段落，缺失时返回空字典。"""

    value = data.get(name) or {}  # 缺失或 null 视为空段
    if not isinstance(value, dict):  # 校验类型
        raise ConfigError(f"{name} 必须是映射")  # 报错
    return value


def _read_bool(section: Dict[str, Any], section_name: str, key: str, default: bool) -> bool:
    """读取布尔字段，拒绝字符串等含糊写法。"""

    value = section.get(key, default)  # 读取原值
    if not isinstance(value, bool):  # 只接受 YAML 布尔
        raise ConfigError(f"{section_name}.{key} 必须是布尔值")  # 报错
    return value


def _parse_logging(data: Dict[str, Any], base_dir: Path) -> LoggingConfig:
    """解析 logging 段落并归一化文件路径。"""

    logging_data = _section(data, "logging")  # 获取 logging 数据
    level = logging_data.get("level", DEFAULT_LOG_LEVEL)  # 日志级别
    if not isinstance(level, str):  # 级别必须是名称
        raise ConfigError("logging.level 必须是字符串")
    file_value = logging_data.get("file", DEFAULT_LOG_FILE)  # 文件路径
    if file_value is not None and not isinstance(file_value, str):  # 路径必须是字符串
        raise ConfigError("logging.file 必须是字符串或 null")
    file_path = (base_dir / Path(file_value).expanduser()) if file_value else None  # 相对路径以配置目录为基准

    return LoggingConfig(level=level, file=file_path)  # 返回 dataclass


def _parse_check(data: Dict[str, Any]) -> CheckConfig:
    """解析 check 段落。"""

    check_data = _section(data, "check")
    show_clean = _read_bool(check_data, "check", "show_clean", DEFAULT_CHECK_SHOW_CLEAN)
    return CheckConfig(show_clean=show_clean)


def _parse_batch(data: Dict[str, Any]) -> BatchConfig:
    """解析 batch 段落。"""

    batch_data = _section(data, "batch")
    skip_blank = _read_bool(batch_data, "batch", "skip_blank", DEFAULT_BATCH_SKIP_BLANK)
    return BatchConfig(skip_blank=skip_blank)


def load_config(path: str | Path | None = None) -> AppConfig:
    """加载配置；未显式指定且默认文件不存在时返回默认配置。"""

    if path is None:  # 未指定配置文件
        default_path = Path.cwd() / DEFAULT_CONFIG_FILE  # 查找当前目录的默认文件
        if not default_path.exists():  # 默认文件缺失时直接使用默认值
            return AppConfig()
        path = default_path

    config_path = Path(path).expanduser().resolve()  # 解析配置文件路径
    data = _load_yaml(config_path)  # 加载 YAML 数据
    base_dir = config_path.parent  # 获取配置文件所在目录

    return AppConfig(  # 返回聚合配置
        logging=_parse_logging(data, base_dir),
        check=_parse_check(data),
        batch=_parse_batch(data),
        config_path=config_path,
    )


__all__ = [  # 导出公开 API
    "AppConfig",
    "BatchConfig",
    "CheckConfig",
    "ConfigError",
    "LoggingConfig",
    "load_config",
]
