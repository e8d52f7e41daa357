"""Cargo 清单读取器

从 Cargo.toml 读取顶层包名，从 Cargo.lock 找到同名包并提取其直接依赖。

规则:
  - 顶层包按 name 原样比较，取 Cargo.lock 中第一个匹配项（重复项不报错）
  - dependencies 必须显式存在，空列表合法
  - 依赖字符串按空格切分，只使用前两段 name / version
  - 结果保持 Cargo.lock 中的顺序，不排序、不去重
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from buildeps.core.exceptions import SchemaError
from buildeps.core.models import DependencySpec
from buildeps.utils.toml_io import load_toml

logger = logging.getLogger(__name__)


def load_document(path: str | Path) -> dict[str, Any]:
    """读取并解析 TOML 文档，失败抛 DocumentReadError / DocumentParseError"""
    return load_toml(path)


def extract_top_package_name(manifest_doc: Any) -> str:
    """从 Cargo.toml 中取 package.name"""
    if not isinstance(manifest_doc, dict):
        raise SchemaError("failed to parse manifest: incorrect format")
    package = manifest_doc.get("package")
    if not isinstance(package, dict):
        raise SchemaError("failed to parse package")
    name = package.get("name")
    if not isinstance(name, str):
        raise SchemaError("failed to parse name")
    return name


def parse_dependency(entry: Any) -> DependencySpec:
    """解析 "<name> <version> [<source>]" 形式的依赖字符串"""
    if not isinstance(entry, str):
        raise SchemaError(
            f"failed to parse name/version from dependency string: {entry!r}"
        )
    parts = entry.split(" ", 2)
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise SchemaError(
            f"failed to parse name/version from dependency string: {entry!r}"
        )
    source = parts[2] if len(parts) == 3 else ""
    return DependencySpec(name=parts[0], version=parts[1], source=source)


def _find_top_package(lock_doc: Any, top_package_name: str) -> dict[str, Any]:
    packages = lock_doc.get("package") if isinstance(lock_doc, dict) else None
    if not isinstance(packages, list):
        raise SchemaError("failed to find packages in lockfile")
    for pkg in packages:
        if not isinstance(pkg, dict) or not isinstance(pkg.get("name"), str):
            raise SchemaError(f"malformed package record in lockfile: {pkg!r}")
        if pkg["name"] == top_package_name:
            return pkg
    raise SchemaError(f"failed to find top package: {top_package_name}")


def extract_dependencies(lock_doc: Any, top_package_name: str) -> list[DependencySpec]:
    """提取顶层包的直接依赖，保持 Cargo.lock 顺序"""
    top_pkg = _find_top_package(lock_doc, top_package_name)
    deps = top_pkg.get("dependencies")
    if not isinstance(deps, list):
        raise SchemaError("error parsing dependencies table")
    return [parse_dependency(entry) for entry in deps]


def extract_dependency_identifiers(lock_doc: Any, top_package_name: str) -> list[str]:
    """提取顶层包直接依赖的 name:version 列表"""
    return [d.identifier for d in extract_dependencies(lock_doc, top_package_name)]


class ManifestReader:
    """Cargo.toml + Cargo.lock 读取器"""

    def __init__(
        self,
        manifest_path: str | Path = "Cargo.toml",
        lockfile_path: str | Path = "Cargo.lock",
    ) -> None:
        self.manifest_path = Path(manifest_path)
        self.lockfile_path = Path(lockfile_path)

    def read_top_package_name(self) -> str:
        name = extract_top_package_name(load_document(self.manifest_path))
        logger.info("顶层包: %s (%s)", name, self.manifest_path)
        return name

    def read_dependencies(self, top_package_name: str) -> list[DependencySpec]:
        deps = extract_dependencies(load_document(self.lockfile_path), top_package_name)
        logger.info(
            "从 %s 解析到 %d 个直接依赖", self.lockfile_path, len(deps),
        )
        for d in deps:
            logger.debug("  %s %s", d.identifier, d.source)
        return deps
