"""配置加载测试"""

from __future__ import annotations

import pytest
import yaml

from buildeps.core.config import Config, load_config
from buildeps.core.exceptions import ConfigError


class TestConfig:
    def test_defaults_when_missing(self, tmp_path) -> None:
        cfg = Config.from_file(str(tmp_path / "none.yml"))
        assert cfg.manifest_path == "Cargo.toml"
        assert cfg.lockfile_path == "Cargo.lock"
        assert cfg.cargo == "cargo"

    def test_from_file(self, tmp_path) -> None:
        path = tmp_path / "cfg.yml"
        path.write_text(yaml.dump({
            "lockfile_path": "ws/Cargo.lock",
            "log_level": "DEBUG",
            "notes": "kept",
        }))
        cfg = Config.from_file(str(path))
        assert cfg.lockfile_path == "ws/Cargo.lock"
        assert cfg.log_level == "DEBUG"
        assert cfg.extra == {"notes": "kept"}

    def test_wrong_type(self, tmp_path) -> None:
        path = tmp_path / "cfg.yml"
        path.write_text(yaml.dump({"cargo": ["cargo"]}))
        with pytest.raises(ConfigError, match="cargo"):
            Config.from_file(str(path))

    def test_not_a_mapping(self, tmp_path) -> None:
        path = tmp_path / "cfg.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="映射"):
            Config.from_file(str(path))

    def test_invalid_yaml(self, tmp_path) -> None:
        path = tmp_path / "cfg.yml"
        path.write_text("cargo: [unclosed\n")
        with pytest.raises(ConfigError, match="格式错误"):
            Config.from_file(str(path))

    def test_env_override(self) -> None:
        cfg = Config().apply_env({"CARGO": "/usr/bin/cargo", "BUILDEPS_LOG_LEVEL": "INFO"})
        assert cfg.cargo == "/usr/bin/cargo"
        assert cfg.log_level == "INFO"

    def test_load_config_applies_env(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("CARGO", "/usr/local/bin/cargo")
        monkeypatch.delenv("BUILDEPS_LOG_LEVEL", raising=False)
        path = tmp_path / "cfg.yml"
        path.write_text(yaml.dump({"cargo": "cross", "log_level": "INFO"}))
        cfg = load_config(str(path))
        assert cfg.cargo == "/usr/local/bin/cargo"
        assert cfg.log_level == "INFO"

    def test_load_config_default_may_be_missing(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("CARGO", raising=False)
        assert load_config().cargo == "cargo"

    def test_load_config_explicit_path_must_exist(self, tmp_path) -> None:
        with pytest.raises(ConfigError, match="不存在"):
            load_config(str(tmp_path / "typo.yml"))

    def test_directory_is_config_error(self, tmp_path) -> None:
        path = tmp_path / "cfg.yml"
        path.mkdir()
        with pytest.raises(ConfigError, match="无法读取"):
            Config.from_file(str(path))

    def test_invalid_utf8_is_config_error(self, tmp_path) -> None:
        path = tmp_path / "cfg.yml"
        path.write_bytes(b"cargo: \xff\xfe\n")
        with pytest.raises(ConfigError):
            Config.from_file(str(path))
