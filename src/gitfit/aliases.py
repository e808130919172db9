"""Alias definition parsing.

An alias file holds one ``name = command`` definition per logical line. A
physical line ending in a backslash continues on the next non-blank line;
continued pieces are joined with a single space before the definition is
matched. Lines that do not form a definition are skipped and reported to an
optional sink, never raised.
"""

from __future__ import annotations

import enum
import string
from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

CONTINUATION_MARKER = "\\"
NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_-")

SkipSink = Callable[[str], None]


@dataclass(frozen=True)
class AliasRecord:
    """One parsed alias definition."""

    name: str
    command: str

    @property
    def config_key(self) -> str:
        return f"alias.{self.name}"


@dataclass(frozen=True)
class ParseResult:
    """Parsed records plus the logical lines that were skipped."""

    records: tuple[AliasRecord, ...] = ()
    skipped: tuple[str, ...] = ()


class _State(enum.Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"


class _LineFolder:
    """Fold continuation lines into logical lines."""

    def __init__(self) -> None:
        self._state = _State.IDLE
        self._pending = ""

    @property
    def state(self) -> _State:
        return self._state

    @property
    def pending(self) -> str:
        return self._pending

    def feed(self, line: str) -> str | None:
        """Consume one non-blank physical line.

        Returns the completed logical line, or ``None`` while a continuation
        is still open.
        """

        stripped = line.rstrip()
        if stripped.endswith(CONTINUATION_MARKER):
            self._pending += stripped[: -len(CONTINUATION_MARKER)].strip() + " "
            self._state = _State.ACCUMULATING
            return None

        logical = self._pending + line.strip()
        self._pending = ""
        self._state = _State.IDLE
        return logical


def split_lines(content: str) -> list[str]:
    """Split on ``\\n``, dropping one ``\\r`` before each break."""

    lines = content.split("\n")
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def is_valid_name(name: str) -> bool:
    return bool(name) and all(ch in NAME_CHARS for ch in name)


def parse_alias_line(text: str) -> AliasRecord | None:
    """Match one logical line against ``name = command``.

    The first ``=`` separates the name from the command. Whitespace around it
    is optional and belongs to neither side. The name must be made of ASCII
    letters, digits, ``_`` or ``-`` and start the line; the command is
    everything after the delimiter, kept verbatim apart from trimming.
    """

    index = text.find("=")
    if index <= 0:
        return None

    name = text[:index].rstrip()
    if not is_valid_name(name):
        return None

    command = text[index + 1 :].strip()
    if not command:
        return None
    return AliasRecord(name=name, command=command)


def parse_aliases(content: str, *, on_skip: SkipSink | None = None) -> list[AliasRecord]:
    """Parse alias definitions from ``content`` in source order.

    Args:
        content: Full text of an alias definition file.
        on_skip: Called with the text of every logical line that does not
            form a definition. Defaults to a warning log entry.

    Returns:
        Records in order of appearance. Duplicated names are kept.
    """

    report = on_skip or _log_skipped
    folder = _LineFolder()
    records: list[AliasRecord] = []

    for line in split_lines(content):
        if not line.strip():
            continue

        logical = folder.feed(line)
        if logical is None:
            continue

        record = parse_alias_line(logical)
        if record is not None:
            records.append(record)
        elif logical.strip():
            report(logical)

    if folder.state is _State.ACCUMULATING:
        logger.debug("aliases.dangling_continuation dropped={!r}", folder.pending)
    return records


def collect_aliases(content: str) -> ParseResult:
    """Parse ``content`` and keep skipped lines alongside the records."""

    skipped: list[str] = []
    records = parse_aliases(content, on_skip=skipped.append)
    return ParseResult(records=tuple(records), skipped=tuple(skipped))


def _log_skipped(text: str) -> None:
    logger.warning("skipping invalid line: {}", text)
