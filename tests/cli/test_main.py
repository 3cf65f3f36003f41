"""Tests for CLI main module."""

from pathlib import Path
from unittest.mock import patch

import pytest
import yaml
from typer.testing import CliRunner

from skillshelf.cli.main import app
from skillshelf.skills import builtin_skills_path

runner = CliRunner()

BUNDLED = builtin_skills_path() / "token-saver"


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return workspace


@pytest.fixture
def project(tmp_path: Path) -> Path:
    project = tmp_path / "project"
    project.mkdir()
    return project


def invoke(workspace: Path, *args: str):
    return runner.invoke(app, ["--workspace", str(workspace), *args])


class TestList:
    def test_lists_bundled_skill(self, workspace):
        result = invoke(workspace, "list")

        assert result.exit_code == 0
        assert "Available Skills: 1" in result.output
        assert "token-saver" in result.output

    def test_lists_workspace_skills_without_bundled(self, workspace):
        (workspace / "config.user.yaml").write_text(
            yaml.dump({"include_builtin": False})
        )
        skill_dir = workspace / "skills" / "review-helper"
        skill_dir.mkdir(parents=True)
        (skill_dir / "copilot-instructions.md").write_text("Review carefully.")

        result = invoke(workspace, "list")

        assert result.exit_code == 0
        assert "Available Skills: 1" in result.output
        assert "review-helper" in result.output
        assert "token-saver" not in result.output


class TestShow:
    def test_shows_roles(self, workspace):
        result = invoke(workspace, "show", "token-saver")

        assert result.exit_code == 0
        assert "instructions_lite" in result.output
        assert "quick_start" in result.output

    def test_unknown_skill_exits_with_error(self, workspace):
        result = invoke(workspace, "show", "nonexistent")

        assert result.exit_code == 1
        assert "Skill not found: nonexistent" in result.output
        assert "token-saver" in result.output


class TestInstall:
    def test_installs_instructions_into_project(self, workspace, project):
        result = invoke(workspace, "install", "token-saver", "--project", str(project))

        assert result.exit_code == 0
        installed = project / ".github" / "copilot-instructions.md"
        assert installed.read_bytes() == (BUNDLED / "copilot-instructions.md").read_bytes()

    def test_lite_flag_installs_lite_instructions(self, workspace, project):
        result = invoke(
            workspace, "install", "token-saver", "--lite", "--project", str(project)
        )

        assert result.exit_code == 0
        installed = project / ".github" / "copilot-instructions.md"
        assert (
            installed.read_bytes()
            == (BUNDLED / "copilot-instructions-lite.md").read_bytes()
        )

    def test_role_and_dest_options(self, workspace, tmp_path):
        dest = tmp_path / "docs" / "START.md"

        result = invoke(
            workspace, "install", "token-saver", "--role", "quick_start", "--dest", str(dest)
        )

        assert result.exit_code == 0
        assert dest.read_bytes() == (BUNDLED / "QUICK_START.md").read_bytes()

    def test_lite_and_role_conflict(self, workspace, tmp_path):
        result = invoke(
            workspace,
            "install",
            "token-saver",
            "--lite",
            "--role",
            "readme",
            "--dest",
            str(tmp_path / "out.md"),
        )

        assert result.exit_code == 1
        assert not (tmp_path / "out.md").exists()

    def test_missing_role_exits_with_error(self, workspace, tmp_path):
        skill_dir = workspace / "skills" / "bare"
        skill_dir.mkdir(parents=True)
        (skill_dir / "copilot-instructions.md").write_text("x")

        result = invoke(
            workspace, "install", "bare", "--lite", "--dest", str(tmp_path / "out.md")
        )

        assert result.exit_code == 1
        assert "has no instructions_lite document" in result.output
        assert not (tmp_path / "out.md").exists()

    def test_unknown_skill_exits_with_error(self, workspace, tmp_path):
        result = invoke(
            workspace, "install", "nonexistent", "--dest", str(tmp_path / "out.md")
        )

        assert result.exit_code == 1
        assert "Skill not found: nonexistent" in result.output

    def test_existing_file_declined_is_kept(self, workspace, tmp_path):
        dest = tmp_path / "out.md"
        dest.write_text("mine")

        with patch("skillshelf.cli.skills.questionary.confirm") as mock_confirm:
            mock_confirm.return_value.ask.return_value = False
            result = invoke(workspace, "install", "token-saver", "--dest", str(dest))

        mock_confirm.assert_called_once()
        assert "Overwrite" in mock_confirm.call_args[0][0]
        assert result.exit_code == 1
        assert dest.read_text() == "mine"

    def test_existing_file_confirmed_is_overwritten(self, workspace, tmp_path):
        dest = tmp_path / "out.md"
        dest.write_text("mine")

        with patch("skillshelf.cli.skills.questionary.confirm") as mock_confirm:
            mock_confirm.return_value.ask.return_value = True
            result = invoke(workspace, "install", "token-saver", "--dest", str(dest))

        assert result.exit_code == 0
        assert dest.read_bytes() == (BUNDLED / "copilot-instructions.md").read_bytes()

    def test_force_skips_confirmation(self, workspace, tmp_path):
        dest = tmp_path / "out.md"
        dest.write_text("mine")

        with patch("skillshelf.cli.skills.questionary.confirm") as mock_confirm:
            result = invoke(
                workspace, "install", "token-saver", "--dest", str(dest), "--force"
            )

        mock_confirm.assert_not_called()
        assert result.exit_code == 0
        assert dest.read_text() != "mine"


def test_invalid_config_exits_with_error(workspace):
    (workspace / "config.user.yaml").write_text(yaml.dump({"default_role": "nope"}))

    result = invoke(workspace, "list")

    assert result.exit_code == 1
    assert "Error loading config" in result.output


def test_non_mapping_config_exits_with_error(workspace):
    (workspace / "config.user.yaml").write_text("- not\n- a mapping\n")

    result = invoke(workspace, "list")

    assert result.exit_code == 1
    assert "Error loading config" in result.output


def test_install_writes_log_file(workspace, project):
    result = invoke(workspace, "install", "token-saver", "--project", str(project))

    assert result.exit_code == 0
    log_text = (workspace / ".logs" / "skillshelf.log").read_text()
    assert "Installed instructions of 'token-saver'" in log_text


def test_configured_default_role_is_used(workspace, tmp_path):
    (workspace / "config.user.yaml").write_text(
        yaml.dump({"default_role": "instructions_lite"})
    )
    dest = tmp_path / "out.md"

    result = invoke(workspace, "install", "token-saver", "--dest", str(dest))

    assert result.exit_code == 0
    assert dest.read_bytes() == (BUNDLED / "copilot-instructions-lite.md").read_bytes()
