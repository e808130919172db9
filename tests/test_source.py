import io
from email.message import Message
from pathlib import Path
from urllib import error as urllib_error

import pytest

from gitfit import source as source_module
from gitfit.errors import SourceError
from gitfit.source import is_remote, load_alias_source


class _FakeResponse(io.BytesIO):
    def __init__(self, body: bytes, charset: str | None = "utf-8") -> None:
        super().__init__(body)
        self.headers = Message()
        if charset:
            self.headers["Content-Type"] = f"text/plain; charset={charset}"

    def __enter__(self) -> "_FakeResponse":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def test_is_remote() -> None:
    assert is_remote("https://example.com/aliases.txt")
    assert is_remote("http://example.com/a")
    assert not is_remote("ftp://example.com/a")
    assert not is_remote("./aliases.txt")
    assert not is_remote("/etc/gitfit/aliases")


def test_load_local_file(tmp_path: Path) -> None:
    path = tmp_path / "aliases.txt"
    path.write_text("co = checkout\n", encoding="utf-8")
    assert load_alias_source(str(path)) == "co = checkout\n"


def test_load_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(SourceError) as exc_info:
        load_alias_source(str(tmp_path / "missing.txt"))
    assert "missing.txt" in str(exc_info.value)


def test_empty_location_raises() -> None:
    with pytest.raises(SourceError):
        load_alias_source("   ")


def test_fetch_url(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, object] = {}

    def _fake_urlopen(request, timeout):
        seen["url"] = request.full_url
        seen["timeout"] = timeout
        seen["agent"] = request.get_header("User-agent")
        return _FakeResponse("st = status\n".encode())

    monkeypatch.setattr(source_module.urllib_request, "urlopen", _fake_urlopen)

    text = load_alias_source("https://example.com/aliases.txt", timeout=3)
    assert text == "st = status\n"
    assert seen == {"url": "https://example.com/aliases.txt", "timeout": 3, "agent": source_module.USER_AGENT}


def test_fetch_url_uses_declared_charset(monkeypatch: pytest.MonkeyPatch) -> None:
    body = "hi = !echo café\n".encode("latin-1")
    monkeypatch.setattr(
        source_module.urllib_request,
        "urlopen",
        lambda request, timeout: _FakeResponse(body, charset="latin-1"),
    )
    assert load_alias_source("https://example.com/a") == "hi = !echo café\n"


def test_fetch_url_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_urlopen(request, timeout):
        raise urllib_error.HTTPError(request.full_url, 404, "Not Found", Message(), None)

    monkeypatch.setattr(source_module.urllib_request, "urlopen", _fake_urlopen)
    with pytest.raises(SourceError) as exc_info:
        load_alias_source("https://example.com/missing")
    assert exc_info.value.reason == "http 404"


def test_fetch_url_network_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_urlopen(request, timeout):
        raise urllib_error.URLError("name resolution failed")

    monkeypatch.setattr(source_module.urllib_request, "urlopen", _fake_urlopen)
    with pytest.raises(SourceError) as exc_info:
        load_alias_source("https://nowhere.invalid/a")
    assert "name resolution failed" in str(exc_info.value)


def test_fetch_url_rejects_oversized_body(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(source_module, "MAX_FETCH_BYTES", 4)
    monkeypatch.setattr(
        source_module.urllib_request,
        "urlopen",
        lambda request, timeout: _FakeResponse(b"a = b\n"),
    )
    with pytest.raises(SourceError):
        load_alias_source("https://example.com/big")


def test_fetch_url_unknown_charset_falls_back_to_utf8(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        source_module.urllib_request,
        "urlopen",
        lambda request, timeout: _FakeResponse("hi = !echo héllo\n".encode(), charset="x-made-up"),
    )
    assert load_alias_source("https://example.com/a") == "hi = !echo héllo\n"
