"""Tests for CLI commands using Click's CliRunner."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from streamgate.cli import main


def test_main_help():
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "StreamGate" in result.output
    assert "check" in result.output
    assert "rules" in result.output


def test_main_version():
    runner = CliRunner()
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_check_allow(vhosts_path: Path):
    runner = CliRunner()
    result = runner.invoke(main, ["-c", str(vhosts_path), "check", "8.8.8.8"])
    assert result.exit_code == 0
    assert "ALLOW" in result.output


def test_check_deny_exits_nonzero(vhosts_path: Path):
    runner = CliRunner()
    result = runner.invoke(
        main,
        ["-c", str(vhosts_path), "check", "8.8.8.8", "--type", "fmle-publish"],
    )
    assert result.exit_code == 1
    assert "DENY" in result.output


def test_check_bad_config(tmp_path: Path):
    runner = CliRunner()
    result = runner.invoke(main, ["-c", str(tmp_path / "missing.yaml"), "check", "1.2.3.4"])
    assert result.exit_code == 2


def test_rules_lists_vhosts(vhosts_path: Path):
    runner = CliRunner()
    result = runner.invoke(main, ["-c", str(vhosts_path), "rules"])
    assert result.exit_code == 0
    assert "blacklist.example.com" in result.output
    assert "whitelist" in result.output


def test_rules_single_vhost(vhosts_path: Path):
    runner = CliRunner()
    result = runner.invoke(main, ["-c", str(vhosts_path), "rules", "--vhost", "locked.example.com"])
    assert result.exit_code == 0
    assert "0 allow / 0 deny" in result.output


def test_rules_vhost_without_security_block(vhosts_path: Path):
    runner = CliRunner()
    result = runner.invoke(main, ["-c", str(vhosts_path), "rules", "--vhost", "plain.example.com"])
    assert result.exit_code == 0
    assert "security disabled" in result.output
