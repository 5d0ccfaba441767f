"""create-anta-app exception classes."""

__all__ = [
    "CloneError",
    "ConfigPatchError",
    "CreateAntaAppError",
    "ExecutableNotFoundError",
    "ExecutionError",
]


class CreateAntaAppError(Exception):
    """Base exception for create-anta-app related errors."""


class ExecutableNotFoundError(CreateAntaAppError):
    """Raised when an external executable (git, npm, ...) is not found."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"Executable {executable!r} not found.")
        self.executable = executable


class ExecutionError(CreateAntaAppError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: list[str], return_code: int, stderr: str) -> None:
        super().__init__(f"Command {command!r} failed with return code {return_code}.\nStderr: {stderr}")
        self.command = command
        self.return_code = return_code
        self.stderr = stderr


class CloneError(CreateAntaAppError):
    """Raised when the template repository cannot be cloned."""

    def __init__(self, repo_url: str, reason: str) -> None:
        super().__init__(f"Failed to clone repository {repo_url!r}: {reason}")
        self.repo_url = repo_url
        self.reason = reason


class ConfigPatchError(CreateAntaAppError):
    """Raised when the configuration file cannot be read or written."""

    def __init__(self, path: str, cause: "OSError | UnicodeDecodeError") -> None:
        super().__init__(f"Failed to update config file {path!r}: {cause}")
        self.path = path
        self.cause = cause
