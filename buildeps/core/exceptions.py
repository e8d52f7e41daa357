"""统一异常体系

所有业务异常继承 BuildDepsError，任一异常都会终止整次运行（无本地恢复、无重试）。
CLI 顶层统一捕获，根据 code 输出友好提示，根据 exit_code 设置进程退出码。
"""

from __future__ import annotations


class BuildDepsError(Exception):
    """基础异常"""

    code: str = "UNKNOWN"
    exit_code: int = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigError(BuildDepsError):
    """配置文件内容无效"""

    code = "CONFIG_ERROR"


class DocumentReadError(BuildDepsError):
    """清单文件不可读（不存在、无权限等）"""

    code = "IO_ERROR"

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class DocumentParseError(BuildDepsError):
    """清单文件不是合法的 TOML"""

    code = "PARSE_ERROR"

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class SchemaError(BuildDepsError):
    """TOML 合法，但结构不符合预期（缺少 package / name / dependencies 等）"""

    code = "SCHEMA_ERROR"


class SpawnError(BuildDepsError):
    """构建命令无法启动（可执行文件不存在、无执行权限）"""

    code = "SPAWN_ERROR"


class ChildProcessFailure(BuildDepsError):
    """构建子进程以非零状态退出，或被信号终止

    returncode 与 signal 二者仅其一有值：
    正常退出时携带退出码，被信号终止时 returncode 为 None。
    """

    code = "CHILD_FAILURE"

    def __init__(
        self, message: str, *,
        returncode: int | None = None,
        signal: int | None = None,
    ) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.signal = signal
        if returncode:
            self.exit_code = returncode
