"""Tests for common.config module."""

from pathlib import Path

import pytest

from common.config import ConfigSingleton, env_str, find_config_path, load_yaml, split_csv


class TestFindConfigPath:
    def test_explicit_name(self, tmp_path: Path) -> None:
        (tmp_path / "local.yaml").write_text("a: 1\n")
        assert find_config_path("local", config_dir=tmp_path) == tmp_path / "local.yaml"

    def test_env_var_then_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "prod.yaml").write_text("")
        (tmp_path / "staging.yaml").write_text("")
        monkeypatch.delenv("MY_CONFIG", raising=False)
        assert find_config_path(None, config_dir=tmp_path, env_var="MY_CONFIG").name == "prod.yaml"
        monkeypatch.setenv("MY_CONFIG", "staging")
        assert find_config_path(None, config_dir=tmp_path, env_var="MY_CONFIG").name == "staging.yaml"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            find_config_path("nope", config_dir=tmp_path)


class TestLoadYaml:
    def test_empty_file_gives_empty_dict(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml(path) == {}

    def test_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "c.yaml"
        path.write_text("server:\n  port: 9000\n")
        assert load_yaml(path) == {"server": {"port": 9000}}


class TestEnvStr:
    def test_blank_treated_as_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOME_KEY", "   ")
        assert env_str("SOME_KEY", "fallback") == "fallback"

    def test_value_is_stripped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOME_KEY", " abc ")
        assert env_str("SOME_KEY") == "abc"


class TestSplitCsv:
    def test_trims_and_drops_empty(self) -> None:
        assert split_csv(" a/b , ,c ") == ["a/b", "c"]

    def test_none_and_blank(self) -> None:
        assert split_csv(None) == []
        assert split_csv("  ") == []


class TestConfigSingleton:
    def test_lazy_load_set_and_reset(self) -> None:
        calls = []

        def loader() -> dict:
            calls.append(1)
            return {"n": len(calls)}

        manager: ConfigSingleton[dict] = ConfigSingleton(loader)
        assert manager.get() == {"n": 1}
        assert manager.get() == {"n": 1}

        manager.set({"n": 99})
        assert manager.get() == {"n": 99}

        manager.reset()
        assert manager.get() == {"n": 2}

    def test_no_loader_raises(self) -> None:
        with pytest.raises(RuntimeError):
            ConfigSingleton().get()
