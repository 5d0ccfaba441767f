"""Template repository cloning."""

import logging
import shutil
import subprocess
from pathlib import Path

from create_anta_app.exceptions import CloneError, ExecutableNotFoundError

__all__ = ("clone_repository",)

logger = logging.getLogger("create_anta_app")


def clone_repository(
    repo_url: str,
    destination: "Path | str",
    cwd: "Path | None" = None,
    git_executable: "str | None" = None,
) -> Path:
    """Clone ``repo_url`` into ``destination``.

    Args:
        repo_url: URL (or local path) of the template repository.
        destination: Directory to clone into, relative to ``cwd`` when not absolute.
        cwd: Working directory for the git process. Defaults to the current directory.
        git_executable: Optional explicit path to the git binary.

    Raises:
        ExecutableNotFoundError: If git is not installed.
        CloneError: If the destination is not empty or git exits with an error.

    Returns:
        The path of the cloned project directory.
    """
    workdir = Path(cwd) if cwd is not None else Path.cwd()
    target = workdir / destination
    if target.exists() and (not target.is_dir() or any(target.iterdir())):
        raise CloneError(repo_url, f"destination {str(target)!r} already exists and is not an empty directory")

    git = git_executable or shutil.which("git")
    if git is None:
        raise ExecutableNotFoundError("git")

    command = [git, "clone", repo_url, str(destination)]
    logger.debug("Running %s in %s", command, workdir)
    process = subprocess.run(command, cwd=workdir, check=False, capture_output=True, text=True)
    if process.returncode != 0:
        reason = (process.stderr or "").strip() or f"git exited with return code {process.returncode}"
        raise CloneError(repo_url, reason)
    return target
