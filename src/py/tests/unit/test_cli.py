import logging
from unittest.mock import Mock

import pytest
from click.testing import CliRunner

from create_anta_app.cli import _apply_cli_log_level, _build_config, create_anta_app
from create_anta_app.config import DEFAULT_REPO_URL, ScaffoldConfig
from create_anta_app.exceptions import CloneError


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_cli_help(runner: CliRunner) -> None:
    result = runner.invoke(create_anta_app, ["--help"])

    assert result.exit_code == 0
    assert "Create a new Anta app from the Next.js starter repository." in result.output
    assert "--skip-install" in result.output


def test_cli_version(runner: CliRunner) -> None:
    result = runner.invoke(create_anta_app, ["--version"])

    assert result.exit_code == 0
    assert "create-anta-app" in result.output


def test_cli_passes_options_to_create_app(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    create_app = Mock()
    monkeypatch.setattr("create_anta_app.commands.create_app", create_app)

    result = runner.invoke(
        create_anta_app,
        ["shop", "-r", "https://example.com/t.git", "--skip-install", "--skip-dev", "--executor", "bun", "--no-prompt"],
    )

    assert result.exit_code == 0, result.output
    create_app.assert_called_once()
    config = create_app.call_args.args[0]
    assert create_app.call_args.kwargs["project_name"] == "shop"
    assert config.repo_url == "https://example.com/t.git"
    assert config.executor == "bun"
    assert config.skip_install is True
    assert config.skip_dev is True
    assert config.no_prompt is True


def test_cli_reports_errors_and_exits(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "create_anta_app.commands.create_app",
        Mock(side_effect=CloneError("https://example.com/t.git", "fatal: not found")),
    )

    result = runner.invoke(create_anta_app, ["shop", "--no-prompt"])

    assert result.exit_code == 1
    assert "Error creating Anta app:" in result.output
    assert "fatal: not found" in result.output


def test_cli_invalid_project_name_exits(runner: CliRunner) -> None:
    result = runner.invoke(create_anta_app, ["bad name", "--no-prompt"])

    assert result.exit_code == 1
    assert "letters, numbers, hyphens, and underscores" in result.output


def test_build_config_uses_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CREATE_ANTA_APP_REPO", "https://example.com/env.git")
    monkeypatch.setenv("CREATE_ANTA_APP_EXECUTOR", "pnpm")

    config = _build_config(None, None, skip_install=False, skip_dev=False, no_prompt=False)

    assert config.repo_url == "https://example.com/env.git"
    assert config.executor == "pnpm"


def test_build_config_defaults() -> None:
    config = _build_config(None, None, skip_install=False, skip_dev=True, no_prompt=False)

    assert config.repo_url == DEFAULT_REPO_URL
    assert config.executor == "node"
    assert config.skip_install is False
    assert config.skip_dev is True


def test_cli_apply_log_level() -> None:
    config = ScaffoldConfig()

    _apply_cli_log_level(config, verbose=True)
    assert config.logging_config.level == "verbose"
    assert logging.getLogger("create_anta_app").level == logging.DEBUG

    _apply_cli_log_level(config, quiet=True)
    assert config.logging_config.level == "quiet"
    assert logging.getLogger("create_anta_app").level == logging.WARNING
