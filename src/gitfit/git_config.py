"""Global Git configuration through the git binary."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Iterable

from loguru import logger

from gitfit.aliases import AliasRecord
from gitfit.errors import GitCommandError, GitNotFoundError


class GitConfig:
    """Read and write ``--global`` git configuration values."""

    def __init__(self, executable: str = "git") -> None:
        self.executable = executable

    def ensure_available(self) -> str:
        resolved = shutil.which(self.executable)
        if resolved is None:
            raise GitNotFoundError(f"git executable not found: {self.executable}")
        return resolved

    def _run(self, *args: str, check: bool = True) -> subprocess.CompletedProcess[str]:
        argv = [self.executable, *args]
        try:
            # Values go through argv untouched, so no shell quoting is needed.
            result = subprocess.run(  # noqa: S603
                argv,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as exc:
            raise GitNotFoundError(f"git executable not found: {self.executable}") from exc
        if check and result.returncode != 0:
            raise GitCommandError(argv, result.returncode, result.stderr or "")
        return result

    def set_global(self, key: str, value: str) -> None:
        logger.debug("git.config.set key={} value={!r}", key, value)
        self._run("config", "--global", "--replace-all", key, value)

    def get_global(self, key: str) -> str | None:
        # Exit status 1 means the key is unset.
        result = self._run("config", "--global", "--get", key, check=False)
        if result.returncode == 1:
            return None
        if result.returncode != 0:
            raise GitCommandError(
                [self.executable, "config", "--global", "--get", key], result.returncode, result.stderr or ""
            )
        return result.stdout.rstrip("\n")

    def apply_aliases(self, records: Iterable[AliasRecord], *, dry_run: bool = False) -> list[AliasRecord]:
        """Write each alias as ``alias.<name>`` in order; later duplicates win."""

        applied: list[AliasRecord] = []
        for record in records:
            if dry_run:
                logger.info("git.config.dry_run key={} value={!r}", record.config_key, record.command)
            else:
                self.set_global(record.config_key, record.command)
            applied.append(record)
        return applied
