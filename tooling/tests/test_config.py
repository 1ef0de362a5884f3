"""Tests for las_tooling.config."""

from pathlib import Path

import pytest


class TestResolveConfig:
    def test_defaults(self) -> None:
        from las_tooling.config import DEFAULT_CONFIG, resolve_config

        cfg = resolve_config(None)
        assert cfg == DEFAULT_CONFIG
        assert cfg is not DEFAULT_CONFIG
        cfg["tunnel"]["port"] = 1
        assert DEFAULT_CONFIG["tunnel"]["port"] == 8080

    def test_ignores_unknown_sections_and_keys(self) -> None:
        from las_tooling.config import resolve_config

        cfg = resolve_config({"other": {"x": 1}, "tunnel": {"bogus": 1, "port": 9000}})
        assert "other" not in cfg
        assert "bogus" not in cfg["tunnel"]
        assert cfg["tunnel"]["port"] == 9000

    def test_generator_string_is_split(self) -> None:
        from las_tooling.config import resolve_config

        cfg = resolve_config({"entity": {"generator": "sea-orm-cli generate entity -l -o ."}})
        assert cfg["entity"]["generator"] == ["sea-orm-cli", "generate", "entity", "-l", "-o", "."]

    def test_section_must_be_mapping(self) -> None:
        from las_tooling.config import resolve_config

        with pytest.raises(ValueError, match="must be a mapping"):
            resolve_config({"tunnel": [1, 2]})


class TestLoadConfig:
    def test_missing_default_file_gives_defaults(self, tmp_path: Path) -> None:
        from las_tooling.config import DEFAULT_CONFIG, load_config

        assert load_config(tmp_path) == DEFAULT_CONFIG

    def test_reads_project_file(self, tmp_path: Path) -> None:
        from las_tooling.config import CONFIG_FILE_NAME, load_config

        (tmp_path / CONFIG_FILE_NAME).write_text(
            "entity:\n  dir: entity/src\ntunnel:\n  sudo: false\n"
        )
        cfg = load_config(tmp_path)
        assert cfg["entity"]["dir"] == "entity/src"
        assert cfg["entity"]["pattern"] == "*.rs"
        assert cfg["tunnel"]["sudo"] is False

    def test_relative_explicit_path_resolves_against_project_root(self, tmp_path: Path) -> None:
        from las_tooling.config import load_config

        (tmp_path / "alt.yaml").write_text("tunnel:\n  port: 3000\n")
        assert load_config(tmp_path, Path("alt.yaml"))["tunnel"]["port"] == 3000

    def test_explicit_missing_file_raises(self, tmp_path: Path) -> None:
        from las_tooling.config import load_config

        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config(tmp_path, tmp_path / "nope.yaml")

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        from las_tooling.config import CONFIG_FILE_NAME, DEFAULT_CONFIG, load_config

        (tmp_path / CONFIG_FILE_NAME).write_text("")
        assert load_config(tmp_path) == DEFAULT_CONFIG

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        from las_tooling.config import CONFIG_FILE_NAME, load_config

        (tmp_path / CONFIG_FILE_NAME).write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="must contain a mapping"):
            load_config(tmp_path)


class TestResolveConfigValidation:
    def test_sudo_string_is_rejected(self) -> None:
        from las_tooling.config import resolve_config

        with pytest.raises(ValueError, match="tunnel.sudo must be true or false"):
            resolve_config({"tunnel": {"sudo": "false"}})

    def test_non_integer_port_is_rejected(self) -> None:
        from las_tooling.config import resolve_config

        with pytest.raises(ValueError, match="tunnel.port must be an integer, got 'http'"):
            resolve_config({"tunnel": {"port": "http"}})

    def test_missing_port_is_rejected(self) -> None:
        from las_tooling.config import resolve_config

        with pytest.raises(ValueError, match="tunnel.port must be an integer"):
            resolve_config({"tunnel": {"port": None}})

    def test_yaml_sudo_string_fails_load(self, tmp_path: Path) -> None:
        from las_tooling.config import CONFIG_FILE_NAME, load_config

        (tmp_path / CONFIG_FILE_NAME).write_text('tunnel:\n  sudo: "false"\n')
        with pytest.raises(ValueError, match="tunnel.sudo"):
            load_config(tmp_path)
