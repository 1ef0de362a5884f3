"""Tests for las_tooling.doctor."""

from unittest.mock import patch

import pytest


class TestRequiredTools:
    def test_defaults_include_sudo(self) -> None:
        from las_tooling.doctor import required_tools

        assert required_tools() == ["sea-orm-cli", "cargo", "tailscale", "sudo"]

    def test_no_sudo_when_disabled(self) -> None:
        from las_tooling.config import resolve_config
        from las_tooling.doctor import required_tools

        cfg = resolve_config({"tunnel": {"sudo": False}})
        assert "sudo" not in required_tools(cfg)


class TestRun:
    def test_returns_0_when_all_present(self) -> None:
        from las_tooling.doctor import run

        with patch("shutil.which", return_value="/usr/bin/x"):
            assert run() == 0

    def test_returns_1_and_names_missing(self, capsys: pytest.CaptureFixture[str]) -> None:
        from las_tooling.doctor import run

        with patch("shutil.which") as m:
            m.side_effect = lambda t: None if t == "tailscale" else f"/usr/bin/{t}"
            assert run() == 1
        out = capsys.readouterr()
        assert "❌ tailscale" in out.out
        assert "✅ cargo" in out.out
        assert "Missing tool(s): tailscale" in out.err
