"""YAML 配置文件读取工具

仅用于 .build-deps.yml 这类可选配置：文件不存在视为空配置。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from buildeps.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# 配置文件最大大小限制 (1MB)
MAX_YAML_SIZE = 1024 * 1024


def load_yaml(path: str | Path, *, required: bool = False) -> dict[str, Any]:
    """安全读取 YAML 文件

    参数:
        path: YAML 文件路径
        required: 为 True 时文件不存在视为错误（用户显式指定的配置文件）

    返回:
        dict: 解析后的字典。文件不存在（且非必需）或为空时返回空字典

    异常:
        ConfigError: 文件缺失（required）、不可读、过大、YAML 格式错误或顶层不是映射
    """
    p = Path(path)
    if not p.exists():
        if required:
            raise ConfigError(f"配置文件不存在: {p}")
        return {}

    try:
        file_size = p.stat().st_size
        if file_size > MAX_YAML_SIZE:
            raise ConfigError(
                f"YAML 文件过大: {p} ({file_size} 字节), "
                f"超过限制 {MAX_YAML_SIZE} 字节"
            )
        with open(p, encoding="utf-8") as f:
            result = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error("解析 YAML 文件失败: %s, 错误: %s", p, e)
        raise ConfigError(f"配置文件格式错误: {p}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        logger.error("读取文件失败: %s, 错误: %s", p, e)
        raise ConfigError(f"无法读取配置文件 {p}: {e}") from e

    if result is None:
        return {}
    if not isinstance(result, dict):
        raise ConfigError(
            f"{p} 内容不是映射类型 (实际类型: {type(result).__name__})"
        )
    return result
