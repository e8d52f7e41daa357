"""集中配置管理

提供统一的配置入口，支持从 YAML 文件加载 + 环境变量覆盖。
所有字段都有默认值，配置文件可选。
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from typing import Any

from buildeps.core.exceptions import ConfigError
from buildeps.utils.yaml_io import load_yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".build-deps.yml"


@dataclass
class Config:
    """全局配置"""

    # 输入文件（相对当前工作目录）
    manifest_path: str = "Cargo.toml"
    lockfile_path: str = "Cargo.lock"

    # 构建命令
    cargo: str = "cargo"

    # 日志
    log_level: str = "WARNING"

    # 自定义扩展 (放不到字段里的配置项)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_file(cls, path: str = DEFAULT_CONFIG_FILE, *, required: bool = False) -> Config:
        """从 YAML 文件加载配置

        默认配置文件不存在时返回默认值；required=True（用户显式指定路径）时缺失即报错。
        """
        data = load_yaml(path, required=required)
        if not data:
            return cls()
        known = {f.name for f in fields(cls)} - {"extra"}
        matched = {k: v for k, v in data.items() if k in known}
        for k, v in matched.items():
            if not isinstance(v, str):
                raise ConfigError(f"配置项 {k} 必须是字符串: {path}")
        cfg = cls(**matched)
        cfg.extra = {k: v for k, v in data.items() if k not in known}
        return cfg

    def apply_env(self, environ: dict[str, str] | None = None) -> Config:
        """用环境变量覆盖配置（CARGO 由 cargo 调用子命令时设置）"""
        env = os.environ if environ is None else environ
        if env.get("CARGO"):
            self.cargo = env["CARGO"]
        if env.get("BUILDEPS_LOG_LEVEL"):
            self.log_level = env["BUILDEPS_LOG_LEVEL"]
        return self


def load_config(path: str | None = None) -> Config:
    """加载配置文件并应用环境变量覆盖

    path 为 None 时使用默认配置文件（可缺失），否则要求文件存在。
    """
    required = path is not None
    if path is None:
        path = DEFAULT_CONFIG_FILE
    cfg = Config.from_file(path, required=required).apply_env()
    logger.info("配置已加载: %s", path)
    return cfg
