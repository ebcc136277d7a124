"""Custom exception hierarchy for repo-hop."""


class RepoHopError(Exception):
    """Base error for all custom exceptions."""


class ConfigurationError(RepoHopError):
    """Raised when the repository root is unset or unusable."""


class NotFoundError(RepoHopError):
    """Raised when no directory matches a search term."""


class NotARepositoryError(RepoHopError):
    """Raised when a directory lacks the .git marker."""

    def __init__(self, path):
        super().__init__(f"Not a git repository: {path}")
        self.path = path


class SelectionError(RepoHopError):
    """Raised when the user picks something that is not on the menu."""


class UserAbort(RepoHopError):
    """Raised when the user cancels an interactive flow."""


class GitCommandError(RepoHopError):
    """Raised when a git invocation fails."""

    def __init__(self, command: list[str], returncode: int, stderr: str | None = None):
        message = "Git command failed"
        if command:
            message = f"Git command failed: {' '.join(command)}"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr or ""


class LauncherError(RepoHopError):
    """Raised when an external launcher cannot be started."""
