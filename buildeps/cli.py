"""cargo-build-deps 命令行接口

以 `cargo build-deps [OPTIONS]` 调用时，cargo 会把子命令名作为第一个位置参数传入，此处接收后忽略。
"""

from __future__ import annotations

import logging
import os

import click

from buildeps import __version__
from buildeps.core.config import DEFAULT_CONFIG_FILE, load_config
from buildeps.core.exceptions import BuildDepsError
from buildeps.core.manifest import ManifestReader
from buildeps.core.models import BuildArgs
from buildeps.core.orchestrator import BuildOrchestrator
from buildeps.core.pipeline import BuildDepsPipeline
from buildeps.utils.logger import setup_logging

logger = logging.getLogger(__name__)


@click.command(name="cargo-build-deps")
@click.version_option(version=__version__)
@click.argument("subcommand", required=False)
@click.option("--release", is_flag=True, help="以 release 配置构建")
@click.option("--frozen", is_flag=True, help="要求 Cargo.lock 与网络状态不变")
@click.option("--manifest-path", default=None, help="转发给 cargo 的 Cargo.toml 路径")
@click.option("--target-dir", default=None, help="产物输出目录")
@click.option("--bin", "bin_name", default=None, help="转发给 cargo 的 --bin")
@click.option("--lib", "lib_name", default=None, help="转发给 cargo 的 --lib")
@click.option("--target", default=None, help="目标三元组")
@click.option(
    "--config", "-c", "config_path", default=None,
    help=f"配置文件路径（默认 {DEFAULT_CONFIG_FILE}，缺失时使用默认配置）",
)
@click.option("--dry-run", is_flag=True, help="只打印将要执行的命令，不实际构建")
@click.pass_context
def main(
    ctx: click.Context, subcommand: str | None,
    release: bool, frozen: bool,
    manifest_path: str | None, target_dir: str | None,
    bin_name: str | None, lib_name: str | None, target: str | None,
    config_path: str | None, dry_run: bool,
) -> None:
    """按 Cargo.lock 逐个构建顶层包的直接依赖"""
    json_output = os.getenv("BUILDEPS_LOG_JSON", "") == "1"
    setup_logging(level=os.getenv("BUILDEPS_LOG_LEVEL", "WARNING"), json_output=json_output)
    if subcommand not in (None, "build-deps"):
        logger.warning("忽略未知位置参数: %s", subcommand)

    build_args = BuildArgs.from_options(
        flags={"release": release, "frozen": frozen},
        options={
            "manifest-path": manifest_path,
            "target-dir": target_dir,
            "bin": bin_name,
            "lib": lib_name,
            "target": target,
        },
    )

    try:
        cfg = load_config(config_path)
        setup_logging(level=cfg.log_level, json_output=json_output)
        pipeline = BuildDepsPipeline(
            reader=ManifestReader(cfg.manifest_path, cfg.lockfile_path),
            orchestrator=BuildOrchestrator(cargo=cfg.cargo, dry_run=dry_run),
        )
        pipeline.run(build_args)
    except BuildDepsError as e:
        logger.debug("运行终止", exc_info=True)
        click.echo(f"error[{e.code}]: {e}", err=True)
        ctx.exit(e.exit_code)


if __name__ == "__main__":
    main()
