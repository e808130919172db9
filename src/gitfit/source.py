"""Alias definition source loading."""

from __future__ import annotations

from pathlib import Path
from urllib import error as urllib_error
from urllib import parse as urllib_parse
from urllib import request as urllib_request

from loguru import logger

from gitfit.errors import SourceError

REQUEST_TIMEOUT_SECONDS = 20.0
MAX_FETCH_BYTES = 1_000_000
USER_AGENT = "gitfit/0.1"


def is_remote(location: str) -> bool:
    parsed = urllib_parse.urlparse(location.strip())
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def load_alias_source(location: str, *, timeout: float = REQUEST_TIMEOUT_SECONDS) -> str:
    """Return the text of an alias file from a URL or a local path."""

    normalized = location.strip()
    if not normalized:
        raise SourceError(location, "empty location")
    if is_remote(normalized):
        return fetch_url(normalized, timeout=timeout)
    return read_file(Path(normalized).expanduser())


def fetch_url(url: str, *, timeout: float = REQUEST_TIMEOUT_SECONDS) -> str:
    request = urllib_request.Request(  # noqa: S310 - scheme is validated by is_remote.
        url,
        headers={"User-Agent": USER_AGENT, "Accept": "text/plain,*/*;q=0.8"},
    )
    logger.info("source.fetch url={}", url)
    try:
        with urllib_request.urlopen(request, timeout=timeout) as response:  # noqa: S310
            body_bytes = response.read(MAX_FETCH_BYTES + 1)
            charset = response.headers.get_content_charset() or "utf-8"
    except urllib_error.HTTPError as exc:
        raise SourceError(url, f"http {exc.code}") from exc
    except urllib_error.URLError as exc:
        raise SourceError(url, str(exc.reason)) from exc
    except OSError as exc:
        raise SourceError(url, str(exc)) from exc

    if len(body_bytes) > MAX_FETCH_BYTES:
        raise SourceError(url, f"response exceeded {MAX_FETCH_BYTES} bytes")
    try:
        return body_bytes.decode(charset, errors="replace")
    except LookupError:
        logger.warning("source.unknown_charset url={} charset={}", url, charset)
        return body_bytes.decode("utf-8", errors="replace")


def read_file(path: Path) -> str:
    logger.info("source.read path={}", path)
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise SourceError(str(path), exc.strerror or str(exc)) from exc
