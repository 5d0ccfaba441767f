"""JavaScript package manager executors.

This module provides executor classes for the package managers a scaffolded
project can be installed and served with (npm, Bun, Yarn, pnpm). Every
command runs with an explicit working directory; the current process
directory is never changed.
"""

import logging
import platform
import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar

from create_anta_app.exceptions import ExecutableNotFoundError, ExecutionError

__all__ = (
    "BunExecutor",
    "CommandExecutor",
    "JSExecutor",
    "NodeExecutor",
    "PnpmExecutor",
    "YarnExecutor",
    "get_executor",
)

logger = logging.getLogger("create_anta_app")


class JSExecutor(ABC):
    """Abstract base class for Javascript executors."""

    bin_name: ClassVar[str]

    def __init__(self, executable_path: "Path | str | None" = None) -> None:
        self.executable_path = executable_path

    @abstractmethod
    def install(self, cwd: Path) -> None:
        """Install dependencies."""

    @abstractmethod
    def run(self, args: list[str], cwd: Path) -> "subprocess.Popen[Any]":
        """Run a command."""

    @abstractmethod
    def execute(self, args: list[str], cwd: Path) -> None:
        """Execute a command and wait for it to finish."""

    def _resolve_executable(self) -> str:
        if self.executable_path:
            return str(self.executable_path)
        path = shutil.which(self.bin_name)
        if path is None:
            raise ExecutableNotFoundError(self.bin_name)
        return path

    @property
    def install_command(self) -> list[str]:
        """Get the command shown to users for a manual install (e.g., npm install)."""
        return [self.bin_name, "install"]

    @property
    def dev_command(self) -> list[str]:
        """Get the default command to start the dev server (e.g., npm run dev)."""
        return [self.bin_name, "run", "dev"]


class CommandExecutor(JSExecutor):
    """Generic command executor."""

    def _build_command(self, args: list[str]) -> list[str]:
        executable = self._resolve_executable()
        # Avoid double-prefixing the executable when callers pass it explicitly
        if args and Path(args[0]).name in {Path(executable).name, self.bin_name}:
            return [executable, *args[1:]]
        return [executable, *args]

    def install(self, cwd: Path) -> None:
        command = self._build_command(["install"])
        logger.debug("Running %s in %s", command, cwd)
        process = subprocess.run(
            command,
            cwd=cwd,
            shell=platform.system() == "Windows",
            check=False,
            capture_output=True,
        )
        if process.returncode != 0:
            stderr = process.stderr.decode(errors="replace") if process.stderr else ""
            raise ExecutionError(command, process.returncode, stderr or "package install failed")

    def run(self, args: list[str], cwd: Path) -> "subprocess.Popen[Any]":
        command = self._build_command(args)
        logger.debug("Starting %s in %s", command, cwd)
        return subprocess.Popen(
            command,
            cwd=cwd,
            shell=platform.system() == "Windows",
            stdout=None,  # inherit for live output
            stderr=None,
        )

    def execute(self, args: list[str], cwd: Path) -> None:
        command = self._build_command(args)
        logger.debug("Running %s in %s", command, cwd)
        process = subprocess.run(
            command,
            cwd=cwd,
            shell=platform.system() == "Windows",
            check=False,
            stdout=None,  # inherit for live output
            stderr=subprocess.PIPE,
        )
        if process.returncode != 0:
            stderr = process.stderr.decode(errors="replace") if process.stderr else ""
            raise ExecutionError(command, process.returncode, stderr)


class NodeExecutor(CommandExecutor):
    """Node.js executor."""

    bin_name = "npm"


class BunExecutor(CommandExecutor):
    """Bun executor."""

    bin_name = "bun"


class YarnExecutor(CommandExecutor):
    """Yarn executor."""

    bin_name = "yarn"

    @property
    def dev_command(self) -> list[str]:
        return ["yarn", "dev"]


class PnpmExecutor(CommandExecutor):
    """PNPM executor."""

    bin_name = "pnpm"


_EXECUTORS: dict[str, type[JSExecutor]] = {
    "node": NodeExecutor,
    "npm": NodeExecutor,
    "bun": BunExecutor,
    "yarn": YarnExecutor,
    "pnpm": PnpmExecutor,
}


def get_executor(name: str, executable_path: "Path | str | None" = None) -> JSExecutor:
    """Create the executor registered under ``name``.

    Args:
        name: Package manager name (node, npm, bun, yarn or pnpm).
        executable_path: Optional explicit path to the package manager binary.

    Raises:
        ValueError: If no executor is registered for ``name``.

    Returns:
        A new executor instance.
    """
    executor_cls = _EXECUTORS.get(name.lower())
    if executor_cls is None:
        msg = f"Unknown executor {name!r}. Expected one of: {', '.join(sorted(_EXECUTORS))}"
        raise ValueError(msg)
    return executor_cls(executable_path)
