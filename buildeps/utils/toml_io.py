"""TOML 文件统一读取工具

Cargo.toml / Cargo.lock 只读一次，读取后不再修改。
与 load_yaml 不同，这里不做空值保护：文件缺失或格式错误都直接抛出。
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from buildeps.core.exceptions import DocumentParseError, DocumentReadError

logger = logging.getLogger(__name__)


def load_toml(path: str | Path) -> dict[str, Any]:
    """读取整个文件并解析为 TOML 键值树

    参数:
        path: TOML 文件路径

    返回:
        dict: 解析后的根表

    异常:
        DocumentReadError: 文件不存在、无权限或不是 UTF-8 文本
        DocumentParseError: 内容不是合法 TOML

    示例:
        >>> doc = load_toml("Cargo.toml")
        >>> doc["package"]["name"]
        'foo'
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("读取文件失败: %s, 错误: %s", p, e)
        raise DocumentReadError(f"无法读取 {p}: {e}", path=str(p)) from e

    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        logger.error("解析 TOML 文件失败: %s, 错误: %s", p, e)
        raise DocumentParseError(f"failed to parse toml: {p}: {e}", path=str(p)) from e
