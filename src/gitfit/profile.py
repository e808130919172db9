"""Shell startup file patching for a branch-aware prompt."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from loguru import logger

from gitfit.errors import ProfileError

BLOCK_START = "# >>> gitfit prompt >>>"
BLOCK_END = "# <<< gitfit prompt <<<"
BACKUP_SUFFIX = ".gitfit.bak"

_BASH_SNIPPET = r"""__gitfit_branch() {
    git rev-parse --abbrev-ref HEAD 2>/dev/null | sed 's/.*/ (&)/'
}
PS1='\[\e[32m\]\u@\h\[\e[0m\]:\[\e[34m\]\w\[\e[33m\]$(__gitfit_branch)\[\e[0m\]\$ '"""

_ZSH_SNIPPET = r"""autoload -Uz vcs_info
precmd_functions+=(vcs_info)
zstyle ':vcs_info:git:*' formats ' (%b)'
setopt PROMPT_SUBST
PROMPT='%F{green}%n@%m%f:%F{blue}%~%f%F{yellow}${vcs_info_msg_0_}%f%# '"""

_SNIPPETS = {"bash": _BASH_SNIPPET, "zsh": _ZSH_SNIPPET}
_PROFILES = {"bash": ".bashrc", "zsh": ".zshrc"}


def detect_shell(shell_path: str | None = None) -> str:
    """Return ``bash`` or ``zsh`` from ``$SHELL``, defaulting to bash."""

    shell = shell_path if shell_path is not None else os.getenv("SHELL", "")
    return "zsh" if Path(shell).name == "zsh" else "bash"


def default_profile_path(shell: str, home: Path | None = None) -> Path:
    base = home if home is not None else Path.home()
    return base / _PROFILES.get(shell, ".bashrc")


def shell_for_profile(path: Path) -> str:
    """Infer the shell from the file name, falling back to $SHELL."""

    if "zsh" in path.name:
        return "zsh"
    if "bash" in path.name:
        return "bash"
    return detect_shell()


def prompt_block(shell: str) -> str:
    try:
        snippet = _SNIPPETS[shell]
    except KeyError as exc:
        raise ProfileError(f"unsupported shell: {shell}") from exc
    return f"{BLOCK_START}\n{snippet}\n{BLOCK_END}\n"


def remove_prompt_block(text: str) -> str:
    """Strip the managed block, leaving everything else untouched."""

    start = text.find(BLOCK_START)
    if start < 0:
        return text
    end = text.find(BLOCK_END, start)
    if end < 0:
        return text
    end += len(BLOCK_END)
    if text.startswith("\n", end):
        end += 1
    return text[:start] + text[end:]


def render_profile(text: str, shell: str) -> str:
    """Return ``text`` with exactly one up-to-date prompt block."""

    block = prompt_block(shell)
    start = text.find(BLOCK_START)
    if start >= 0 and text.find(BLOCK_END, start) < 0:
        raise ProfileError(f"found '{BLOCK_START}' without a matching '{BLOCK_END}'; fix the file by hand")
    if start >= 0:
        remainder = remove_prompt_block(text)
        return remainder[:start] + block + remainder[start:]
    if text and not text.endswith("\n"):
        text += "\n"
    separator = "\n" if text else ""
    return text + separator + block


def patch_profile(path: Path, *, shell: str | None = None, backup: bool = True) -> bool:
    """Install the prompt block into ``path``.

    Returns:
        ``True`` when the file was written, ``False`` when it already held
        the same block.
    """

    resolved_shell = shell or shell_for_profile(path)
    try:
        original = path.read_text(encoding="utf-8") if path.exists() else ""
    except OSError as exc:
        raise ProfileError(f"cannot read {path}: {exc}") from exc

    updated = render_profile(original, resolved_shell)
    if updated == original:
        logger.info("profile.unchanged path={}", path)
        return False

    try:
        if backup and path.exists():
            shutil.copy2(path, path.with_name(path.name + BACKUP_SUFFIX))
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(updated, encoding="utf-8")
    except OSError as exc:
        raise ProfileError(f"cannot write {path}: {exc}") from exc
    logger.info("profile.patched path={} shell={}", path, resolved_shell)
    return True
