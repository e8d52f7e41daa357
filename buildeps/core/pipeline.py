"""运行流水线 — 读取清单 → 解析依赖 → 逐个构建

状态流转:
  IDLE → LOADING_MANIFEST → LOADING_LOCKFILE → RESOLVED → BUILDING → DONE
  任一阶段出错 → ABORTED（终态，异常继续向上抛出）
"""

from __future__ import annotations

import logging

from buildeps.core.exceptions import BuildDepsError
from buildeps.core.manifest import ManifestReader
from buildeps.core.models import BuildArgs, DependencySpec, RunState
from buildeps.core.orchestrator import BuildOrchestrator

logger = logging.getLogger(__name__)


class BuildDepsPipeline:
    """单次运行"""

    def __init__(self, reader: ManifestReader, orchestrator: BuildOrchestrator) -> None:
        self.reader = reader
        self.orchestrator = orchestrator
        self.state = RunState.IDLE
        self.dependencies: list[DependencySpec] = []

    def _transition(self, state: RunState) -> None:
        logger.debug("状态: %s -> %s", self.state.value, state.value)
        self.state = state

    def run(self, build_args: BuildArgs) -> list[DependencySpec]:
        """执行完整流程，返回已构建的依赖列表"""
        if self.state is not RunState.IDLE:
            raise RuntimeError(f"流水线已运行过 (state={self.state.value})")
        try:
            self._transition(RunState.LOADING_MANIFEST)
            top_name = self.reader.read_top_package_name()

            self._transition(RunState.LOADING_LOCKFILE)
            self.dependencies = self.reader.read_dependencies(top_name)

            self._transition(RunState.RESOLVED)
            identifiers = [d.identifier for d in self.dependencies]

            self._transition(RunState.BUILDING)
            self.orchestrator.run_all(identifiers, build_args)
        except BuildDepsError:
            self._transition(RunState.ABORTED)
            raise
        self._transition(RunState.DONE)
        return self.dependencies
