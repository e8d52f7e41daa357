"""构建编排器

对每个依赖依次执行 `cargo build --package <name:version> <转发参数>`：
- 严格按输入顺序串行执行，前一个成功后才开始下一个
- 首个失败立即终止，剩余依赖不再尝试，不做汇总
- 子进程继承完整环境变量（以显式映射传入，便于测试替换）
"""

from __future__ import annotations

import json
import logging
import os
import subprocess
import time
from collections.abc import Iterable, Mapping

import click

from buildeps.core.exceptions import ChildProcessFailure
from buildeps.core.models import BuildArgs
from buildeps.utils.shell import CommandExecutor, get_executor

logger = logging.getLogger(__name__)


class BuildOrchestrator:
    """逐个依赖驱动 cargo build"""

    def __init__(
        self,
        executor: CommandExecutor | None = None,
        env: Mapping[str, str] | None = None,
        cargo: str = "cargo",
        dry_run: bool = False,
    ) -> None:
        self.executor = executor if executor is not None else get_executor()
        self.env = dict(os.environ if env is None else env)
        self.cargo = cargo
        self.dry_run = dry_run

    def command_for(self, identifier: str, build_args: BuildArgs) -> list[str]:
        return [self.cargo, "build", "--package", identifier, *build_args]

    def build_one(self, identifier: str, build_args: BuildArgs) -> None:
        """构建单个依赖，失败抛 SpawnError / ChildProcessFailure"""
        click.echo(f"building package: {json.dumps(identifier, ensure_ascii=False)}")
        cmd = self.command_for(identifier, build_args)

        if self.dry_run:
            click.echo(f"[dry-run] {subprocess.list2cmdline(cmd)}")
            return

        start = time.monotonic()
        result = self.executor.execute(cmd, env=self.env)
        duration = time.monotonic() - start
        if not result.success:
            logger.error("构建失败 %s: %s", identifier, result.describe())
            raise ChildProcessFailure(
                f"{identifier}: {result.describe()}",
                returncode=result.returncode, signal=result.signal,
            )
        logger.info("构建完成: %s (%.1fs)", identifier, duration)

    def run_all(self, identifiers: Iterable[str], build_args: BuildArgs) -> None:
        """按顺序构建全部依赖，首个失败即终止"""
        identifiers = list(identifiers)
        click.echo(f"building packages: {json.dumps(identifiers, ensure_ascii=False)}")
        for identifier in identifiers:
            self.build_one(identifier, build_args)
        click.echo("done")
