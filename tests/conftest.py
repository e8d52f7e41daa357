"""公共测试夹具"""

from __future__ import annotations

import logging
import textwrap
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from buildeps.utils import shell
from buildeps.utils.logger import reset_logging
from buildeps.utils.shell import CommandResult

MANIFEST = """\
[package]
name = "foo"
version = "0.1.0"
edition = "2021"

[dependencies]
bar = "1.0"
baz = "2.3"
"""

LOCKFILE = """\
# This file is automatically @generated by Cargo.
[[package]]
name = "bar"
version = "1.0.0"
source = "registry+https://github.com/rust-lang/crates.io-index"

[[package]]
name = "baz"
version = "2.3.1"
source = "registry+https://github.com/rust-lang/crates.io-index"

[[package]]
name = "foo"
version = "0.1.0"
dependencies = [
 "bar 1.0.0",
 "baz 2.3.1 (registry+https://github.com/rust-lang/crates.io-index)",
]
"""


def write_project(root: Path, manifest: str = MANIFEST, lockfile: str = LOCKFILE) -> Path:
    """在 root 下写入 Cargo.toml / Cargo.lock"""
    (root / "Cargo.toml").write_text(textwrap.dedent(manifest), encoding="utf-8")
    (root / "Cargo.lock").write_text(textwrap.dedent(lockfile), encoding="utf-8")
    return root


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    return write_project(tmp_path)


@pytest.fixture()
def executor():
    """记录调用的执行器，默认全部成功"""
    mock = MagicMock()
    mock.execute.return_value = CommandResult(returncode=0)
    return mock


@pytest.fixture(autouse=True)
def _restore_global_state():
    original = shell.get_executor()
    level = logging.getLogger().level
    yield
    shell.set_executor(original)
    reset_logging()
    logging.getLogger().setLevel(level)


@pytest.fixture()
def make_project(tmp_path: Path):
    """按给定内容写入工程文件，返回工程目录"""
    def _make(manifest: str = MANIFEST, lockfile: str = LOCKFILE) -> Path:
        return write_project(tmp_path, manifest, lockfile)
    return _make
