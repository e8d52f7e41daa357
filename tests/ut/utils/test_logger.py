"""日志配置测试"""

from __future__ import annotations

import json
import logging

from buildeps.utils.logger import JSONFormatter, reset_logging, setup_logging


class TestLogger:
    def test_setup_replaces_handlers(self) -> None:
        setup_logging("INFO")
        setup_logging("DEBUG")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_unknown_level_falls_back(self) -> None:
        setup_logging("chatty")
        assert logging.getLogger().level == logging.WARNING

    def test_json_formatter(self) -> None:
        record = logging.LogRecord(
            "buildeps.core.orchestrator", logging.ERROR, __file__, 10,
            "构建失败 %s", ("bar:1.0.0",), None,
        )
        entry = json.loads(JSONFormatter().format(record))
        assert entry["level"] == "ERROR"
        assert entry["message"] == "构建失败 bar:1.0.0"
        assert entry["line"] == 10

    def test_reset(self) -> None:
        setup_logging("INFO", json_output=True)
        reset_logging()
        assert logging.getLogger().handlers == []
