"""Scaffolding run settings."""

import logging
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from create_anta_app.executor import JSExecutor

__all__ = (
    "CONFIG_FILE_NAME",
    "DEFAULT_REPO_URL",
    "TRUE_VALUES",
    "LoggingConfig",
    "ScaffoldConfig",
    "get_default_log_level",
)

logger = logging.getLogger("create_anta_app")

TRUE_VALUES = {"True", "true", "1", "yes", "Y", "T"}
DEFAULT_REPO_URL = "https://github.com/yourusername/your-nextjs-starter.git"
CONFIG_FILE_NAME = "config.js"

_LOG_LEVELS = {
    "quiet": logging.WARNING,
    "normal": logging.INFO,
    "verbose": logging.DEBUG,
}


def get_default_log_level() -> "Literal['quiet', 'normal', 'verbose']":
    """Get default log level from environment variable.

    Checks CREATE_ANTA_APP_LOG_LEVEL environment variable.
    Falls back to "normal" if not set or invalid.

    Returns:
        The log level from environment or "normal" default.
    """
    env_level = os.getenv("CREATE_ANTA_APP_LOG_LEVEL", "").lower()
    match env_level:
        case "quiet" | "normal" | "verbose":
            return env_level
        case _:
            return "normal"


def _default_executor() -> "Literal['node', 'bun', 'yarn', 'pnpm']":
    env_value = os.getenv("CREATE_ANTA_APP_EXECUTOR", "node").strip().lower()
    match env_value:
        case "node" | "npm":
            return "node"
        case "bun" | "yarn" | "pnpm":
            return env_value
        case _:
            msg = f"Invalid CREATE_ANTA_APP_EXECUTOR: {env_value!r}. Expected one of: node, bun, yarn, pnpm"
            raise ValueError(msg)


@dataclass
class LoggingConfig:
    """Logging configuration for console output.

    Attributes:
        level: Logging verbosity level.
            - "quiet": Minimal output (warnings and errors only)
            - "normal": Standard operational messages (default)
            - "verbose": Detailed debugging information
            Can also be set via CREATE_ANTA_APP_LOG_LEVEL environment variable.
            Precedence: explicit config > env var > default ("normal")
    """

    level: "Literal['quiet', 'normal', 'verbose']" = field(default_factory=get_default_log_level)

    @property
    def python_level(self) -> int:
        """The stdlib logging level matching ``level``."""
        return _LOG_LEVELS[self.level]

    def apply(self) -> None:
        """Set the package logger to the configured level."""
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
            logger.addHandler(handler)
        logger.setLevel(self.python_level)


@dataclass
class ScaffoldConfig:
    """Settings for a single scaffolding run.

    Attributes:
        repo_url: Template repository to clone.
            Environment Variable: CREATE_ANTA_APP_REPO
        executor: JavaScript package manager used to install and run the project.
            Environment Variable: CREATE_ANTA_APP_EXECUTOR
        skip_install: Skip dependency installation.
        skip_dev: Skip starting the development server.
        no_prompt: Use default project details instead of prompting.
        config_file: Name of the configuration file patched inside the project.
        dev_server_url: URL printed in the final summary.
        logging_config: Console and logger verbosity.
    """

    repo_url: str = field(default_factory=lambda: os.getenv("CREATE_ANTA_APP_REPO", DEFAULT_REPO_URL))
    executor: "Literal['node', 'bun', 'yarn', 'pnpm']" = field(default_factory=_default_executor)
    skip_install: bool = field(
        default_factory=lambda: os.getenv("CREATE_ANTA_APP_SKIP_INSTALL", "False") in TRUE_VALUES
    )
    skip_dev: bool = field(default_factory=lambda: os.getenv("CREATE_ANTA_APP_SKIP_DEV", "False") in TRUE_VALUES)
    no_prompt: bool = False
    config_file: str = CONFIG_FILE_NAME
    dev_server_url: str = "http://localhost:3000"
    logging_config: LoggingConfig = field(default_factory=LoggingConfig)
    _executor_instance: "JSExecutor | None" = field(default=None, repr=False, compare=False)

    @property
    def executor_instance(self) -> "JSExecutor":
        """The executor for the configured package manager, created on first use."""
        if self._executor_instance is None:
            from create_anta_app.executor import get_executor

            self._executor_instance = get_executor(self.executor)
        return self._executor_instance
