import shutil
import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from create_anta_app.exceptions import CloneError, ExecutableNotFoundError
from create_anta_app.git import clone_repository


@patch("subprocess.run")
@patch("shutil.which")
def test_clone_repository_success(mock_which: Mock, mock_run: Mock, tmp_path: Path) -> None:
    mock_which.return_value = "/usr/bin/git"
    mock_run.return_value = Mock(returncode=0, stderr="")

    target = clone_repository("https://example.com/starter.git", "my-app", cwd=tmp_path)

    assert target == tmp_path / "my-app"
    args, kwargs = mock_run.call_args
    assert args[0] == ["/usr/bin/git", "clone", "https://example.com/starter.git", "my-app"]
    assert kwargs["cwd"] == tmp_path


@patch("subprocess.run")
@patch("shutil.which")
def test_clone_repository_failure_carries_stderr(mock_which: Mock, mock_run: Mock, tmp_path: Path) -> None:
    mock_which.return_value = "/usr/bin/git"
    mock_run.return_value = Mock(returncode=128, stderr="fatal: repository not found\n")

    with pytest.raises(CloneError, match="repository not found") as exc_info:
        clone_repository("https://example.com/missing.git", "my-app", cwd=tmp_path)

    assert exc_info.value.repo_url == "https://example.com/missing.git"


@patch("shutil.which")
def test_clone_repository_without_git(mock_which: Mock, tmp_path: Path) -> None:
    mock_which.return_value = None

    with pytest.raises(ExecutableNotFoundError, match="'git'"):
        clone_repository("https://example.com/starter.git", "my-app", cwd=tmp_path)


@patch("subprocess.run")
def test_clone_repository_refuses_non_empty_destination(mock_run: Mock, tmp_path: Path) -> None:
    (tmp_path / "my-app").mkdir()
    (tmp_path / "my-app" / "README.md").write_text("existing")

    with pytest.raises(CloneError, match="already exists"):
        clone_repository("https://example.com/starter.git", "my-app", cwd=tmp_path)

    mock_run.assert_not_called()


@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
def test_clone_repository_local_repo(tmp_path: Path) -> None:
    source = tmp_path / "starter"
    source.mkdir()
    (source / "config.js").write_text("module.exports = { siteName: 'Starter' };\n")
    git_env = ["-c", "user.name=test", "-c", "user.email=test@example.com", "-c", "commit.gpgsign=false"]
    subprocess.run(["git", "init", "-q"], cwd=source, check=True)
    subprocess.run(["git", "add", "."], cwd=source, check=True)
    subprocess.run(["git", *git_env, "commit", "-q", "-m", "init"], cwd=source, check=True)

    target = clone_repository(str(source), "my-app", cwd=tmp_path)

    assert (target / "config.js").read_text() == "module.exports = { siteName: 'Starter' };\n"
