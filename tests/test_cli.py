"""Tests for the create-clean-arch command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from create_clean_arch import __version__
from create_clean_arch.cli import cli


def _manifest(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


class TestCliBasics:
    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Clean Architecture" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
        assert "create-clean-arch" in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--examples"])
        assert result.exit_code == 0
        assert "--no-interact --name" in result.output

    def test_rejects_positional_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["demo"])
        assert result.exit_code != 0


@pytest.mark.usefixtures("fake_tools")
class TestScaffoldScenarios:
    def test_my_app_prompted(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(cli, [], input="My App\n")
        assert result.exit_code == 0, result.output
        assert "Project name" in result.output

        data = _manifest(tmp_path / "my-app" / "packages" / "presentation" / "package.json")
        assert data["name"] == "@my-app/presentation"
        assert set(data["dependencies"]) == {
            "@my-app/domain",
            "@my-app/core",
            "@my-app/infrastructure",
            "@my-app/ioc",
            "express",
        }

    def test_mixed_case_packages(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--name", "MIXED", "-d", str(tmp_path)])
        assert result.exit_code == 0, result.output
        packages = tmp_path / "mixed" / "packages"
        assert len([p for p in packages.iterdir() if p.is_dir()]) == 5
        for pkg in packages.iterdir():
            index = pkg / "src" / "index.ts"
            assert index.is_file()
            assert index.read_bytes() == b""
            assert (pkg / "tests").is_dir()

    def test_invalid_name(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--name", "bad name!", "-d", str(tmp_path)])
        assert result.exit_code == 1
        assert "ERROR" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_target_exists(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        existing = tmp_path / "demo"
        existing.mkdir()
        (existing / "notes.txt").write_text("keep me", encoding="utf-8")

        result = cli_runner.invoke(cli, ["--name", "demo", "-d", str(tmp_path)])
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert [p.name for p in existing.iterdir()] == ["notes.txt"]
        assert (existing / "notes.txt").read_text(encoding="utf-8") == "keep me"

    def test_clean_ground(
        self, cli_runner: CliRunner, tmp_path: Path, fake_tools: list[list[str]]
    ) -> None:
        result = cli_runner.invoke(cli, ["--name", "demo", "-d", str(tmp_path)])
        assert result.exit_code == 0, result.output
        root = tmp_path / "demo"
        assert {p.name for p in root.iterdir()} == {
            "package.json",
            "tsconfig.json",
            ".gitignore",
            "packages",
        }
        lines = (root / ".gitignore").read_text(encoding="utf-8").splitlines()
        assert lines == ["node_modules/", "dist/", ".env"]
        assert fake_tools == [["git", "init"], ["npm", "install"]]

        manifest = _manifest(root / "package.json")
        assert manifest["workspaces"] == ["packages/*"]
        assert manifest["private"] is True

    def test_human_output_has_next_steps(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--name", "demo", "-d", str(tmp_path)])
        assert "OK  create_project" in result.output
        assert "cd demo" in result.output
        assert "npm run build" in result.output

    def test_json_output(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "--no-interact", "--name", "demo", "-d", str(tmp_path)]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["name"] == "demo"
        assert data["data"]["path"] == str(tmp_path.resolve() / "demo")

    def test_quiet_output(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "--name", "demo", "-d", str(tmp_path)])
        assert result.exit_code == 0
        assert result.output.strip() == "OK: create_project"


@pytest.mark.usefixtures("fake_tools")
class TestPrompt:
    def test_invalid_entry_is_reprompted(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(cli, ["--json"], input="bad name!\nGood Name\n")
        assert result.exit_code == 0, result.output
        assert "only lower-case letters" in result.stderr
        assert "Project name" in result.stderr
        assert json.loads(result.stdout)["data"]["name"] == "good-name"

    def test_json_stdout_is_only_the_result(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(cli, ["--json"], input="demo\n")
        assert result.exit_code == 0, result.output
        assert result.stdout.startswith("{")
        assert json.loads(result.stdout)["ok"] is True
        assert "Project name" not in result.stdout

    def test_empty_entry_is_reprompted(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(cli, ["--json"], input="   \ndemo\n")
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["data"]["name"] == "demo"

    def test_no_interact_without_name(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--no-interact", "-d", str(tmp_path)])
        assert result.exit_code == 1
        assert "must not be empty" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_name_flag_skips_prompt(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--name", "demo", "-d", str(tmp_path)])
        assert "Project name" not in result.output


class TestToolFailures:
    def test_install_failure(
        self, cli_runner: CliRunner, tmp_path: Path, failing_install: list[list[str]]
    ) -> None:
        result = cli_runner.invoke(cli, ["--name", "demo", "-d", str(tmp_path)])
        assert result.exit_code == 1
        assert "install" in result.output
        assert failing_install == [["git", "init"], ["npm", "install"]]

        root = tmp_path / "demo"
        assert (root / "package.json").is_file()
        assert (root / ".gitignore").is_file()
        assert (root / "packages" / "ioc" / "src" / "containers").is_dir()

    def test_install_failure_json(
        self, cli_runner: CliRunner, tmp_path: Path, failing_install: list[list[str]]
    ) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "--name", "demo", "-d", str(tmp_path)]
        )
        assert result.exit_code == 1
        assert result.stdout == ""
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "EXTERNAL_TOOL_FAILURE"
        assert data["error"]["detail"]["step"] == "install"
