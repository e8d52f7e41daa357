"""子进程执行工具

通过 CommandExecutor 协议抽象子进程执行，方便测试替换。
cargo 的输出直接继承到当前终端，不做捕获；调用方阻塞直到子进程结束，不设超时。
"""

from __future__ import annotations

import logging
import signal
import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol

from buildeps.core.exceptions import SpawnError

logger = logging.getLogger(__name__)


# =========================================================================
# 命令执行结果
# =========================================================================

@dataclass(frozen=True)
class CommandResult:
    """命令执行结果（与 subprocess 解耦）

    returncode 与 signal 二者仅其一有值。
    """

    returncode: int | None
    signal: int | None = None

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @classmethod
    def from_returncode(cls, returncode: int) -> CommandResult:
        """subprocess 约定：负数返回码表示被对应信号终止"""
        if returncode < 0:
            return cls(returncode=None, signal=-returncode)
        return cls(returncode=returncode)

    def describe(self) -> str:
        if self.signal is not None:
            try:
                name = signal.Signals(self.signal).name
            except ValueError:
                name = "unknown"
            return f"process terminated by signal {self.signal} ({name})"
        return f"exited with status code: {self.returncode}"


# =========================================================================
# 命令执行器协议
# =========================================================================

class CommandExecutor(Protocol):
    """命令执行器协议 — 抽象子进程调用

    测试时可注入 mock 实现，无需 patch subprocess。
    """

    def execute(
        self,
        cmd: Sequence[str],
        *,
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        """同步执行命令，返回结束状态；无法启动时抛 SpawnError"""
        ...


# =========================================================================
# 默认实现: 本地执行器
# =========================================================================

class LocalExecutor:
    """本地子进程执行器（默认实现）"""

    def execute(
        self,
        cmd: Sequence[str],
        *,
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        args = list(cmd)
        logger.debug("执行: %s", subprocess.list2cmdline(args))
        try:
            r = subprocess.run(
                args, env=dict(env) if env is not None else None, check=False,
            )
        except OSError as e:
            logger.error("启动失败 %s: %s", args[0], e)
            raise SpawnError(f"failed to execute process {args[0]!r}: {e}") from e
        return CommandResult.from_returncode(r.returncode)


# =========================================================================
# 全局默认执行器（可替换）
# =========================================================================

_default_executor: CommandExecutor = LocalExecutor()


def get_executor() -> CommandExecutor:
    """获取全局默认命令执行器"""
    return _default_executor


def set_executor(executor: CommandExecutor) -> None:
    """替换全局默认命令执行器（用于测试）"""
    global _default_executor  # noqa: PLW0603
    _default_executor = executor
