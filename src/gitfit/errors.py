"""Application-level exception types for gitfit."""

from __future__ import annotations


class GitfitError(Exception):
    """Base exception for gitfit."""


class ConfigurationError(GitfitError):
    """Raised when settings or command options are unusable."""


class SourceError(GitfitError):
    """Raised when the alias definition file cannot be loaded."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"cannot load aliases from {location}: {reason}")
        self.location = location
        self.reason = reason


class GitNotFoundError(GitfitError):
    """Raised when the git executable is not on PATH."""


class GitCommandError(GitfitError):
    """Raised when a git invocation exits non-zero."""

    def __init__(self, args: list[str], returncode: int, stderr: str) -> None:
        detail = stderr.strip() or "(no output)"
        super().__init__(f"{' '.join(args)} failed with exit={returncode}: {detail}")
        self.args_list = args
        self.returncode = returncode
        self.stderr = stderr


class NoAliasesError(GitfitError):
    """Raised when a source yields no usable alias definitions."""


class ProfileError(GitfitError):
    """Raised when the shell startup file cannot be patched."""
