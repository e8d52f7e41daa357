"""核心数据模型

- DependencySpec: Cargo.lock 中的一条依赖
- BuildArgs: 转发给每次 cargo build 的参数
- RunState: 单次运行的状态机
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

# 布尔开关与带值参数的转发顺序，决定子进程参数的排列
FORWARDED_FLAGS: tuple[str, ...] = ("release", "frozen")
FORWARDED_OPTIONS: tuple[str, ...] = (
    "manifest-path", "target-dir", "bin", "lib", "target",
)


@dataclass(frozen=True)
class DependencySpec:
    """单个直接依赖（来自 dependencies 列表的一项）"""

    name: str
    version: str
    source: str = ""  # 第三段，如 "(registry+https://...)"，仅用于日志

    @property
    def identifier(self) -> str:
        """cargo --package 使用的 name:version 选择器"""
        return f"{self.name}:{self.version}"


@dataclass(frozen=True)
class BuildArgs:
    """转发给 cargo build 的参数，同一次运行内对每个依赖保持一致"""

    tokens: tuple[str, ...] = ()

    @classmethod
    def from_options(
        cls,
        flags: dict[str, bool] | None = None,
        options: dict[str, str | None] | None = None,
    ) -> BuildArgs:
        """按固定顺序生成参数：先布尔开关，再 flag/value 对

        键使用命令行形式（如 "target-dir"），未知键忽略。
        """
        flags = flags or {}
        options = options or {}
        tokens: list[str] = []
        for name in FORWARDED_FLAGS:
            if flags.get(name):
                tokens.append(f"--{name}")
        for name in FORWARDED_OPTIONS:
            value = options.get(name)
            if value is not None:
                tokens.extend((f"--{name}", value))
        return cls(tokens=tuple(tokens))

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)


class RunState(str, Enum):
    """单次运行状态"""
    IDLE = "idle"
    LOADING_MANIFEST = "loading_manifest"
    LOADING_LOCKFILE = "loading_lockfile"
    RESOLVED = "resolved"
    BUILDING = "building"
    DONE = "done"
    ABORTED = "aborted"
