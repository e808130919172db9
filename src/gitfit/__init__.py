"""gitfit - provision a local Git environment from a shared alias file."""

from .aliases import AliasRecord, collect_aliases, parse_alias_line, parse_aliases

__version__ = "0.1.0"

__all__ = ["AliasRecord", "collect_aliases", "parse_alias_line", "parse_aliases"]
