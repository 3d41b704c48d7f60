import io
from unittest import mock
from urllib.error import URLError

import pytest

from lottiescene.fetch import (
    BuiltinLottieProps,
    DownloadError,
    LottieDownload,
    format_bytes,
    parse_download,
    parse_size,
)


class FakeResponse:
    def __init__(self, body=b"", headers=None):
        self._body = io.BytesIO(body)
        self.headers = headers or {}

    def read(self, size=-1):
        return self._body.read(size)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def serve(body, content_length=None):
    def fake_urlopen(req, *args, **kwargs):
        if req.get_method() == "HEAD":
            headers = {} if content_length is None else {"Content-Length": str(content_length)}
            return FakeResponse(headers=headers)
        return FakeResponse(body)

    return fake_urlopen


def test_parse_download_with_name():
    d = parse_download("Tiger@https://example.com/x/lottie.json")
    assert d.name == "Tiger"
    assert d.url == "https://example.com/x/lottie.json"
    assert d.builtin is None


def test_parse_download_name_from_url():
    d = parse_download("https://example.com/files/Smile.json")
    assert d.name == "Smile"
    assert d.url == "https://example.com/files/Smile.json"


def test_parse_download_bare_name():
    d = parse_download("abc")
    assert d.name == "abc"
    assert d.url == "abc"


def test_file_path(tmp_path):
    d = LottieDownload(name="Smile", url="https://example.com/a.json")
    assert d.file_path(tmp_path) == tmp_path / "Smile.json"


def test_parse_size_units():
    assert parse_size("10 MB") == 10_000_000
    assert parse_size("1 KiB") == 1024
    assert parse_size("42") == 42


@pytest.mark.parametrize("text", ["", "MB", "ten MB", "5 Xb", "3 i"])
def test_parse_size_invalid(text):
    with pytest.raises(ValueError):
        parse_size(text)


def test_format_bytes_value():
    assert format_bytes(37328) == "37.33 KB"


@pytest.mark.parametrize("n", [1500, 250_000, 3_700_000, 9_100_000_000])
def test_format_bytes_round_trip(n):
    assert parse_size(format_bytes(n)) == pytest.approx(n, rel=0.01)


def test_fetch_writes_body(tmp_path):
    body = b'{"v": "5.7.0"}'
    d = LottieDownload(name="Smile", url="https://example.com/s.json")
    with mock.patch("urllib.request.urlopen", side_effect=serve(body)):
        d.fetch(tmp_path, 1000)
    assert d.file_path(tmp_path).read_bytes() == body


def test_fetch_size_limit_exceeded(tmp_path):
    body = b"x" * 50
    d = LottieDownload(name="Big", url="https://example.com/b.json")
    with mock.patch("urllib.request.urlopen", side_effect=serve(body)):
        with pytest.raises(DownloadError, match="Size limit exceeded"):
            d.fetch(tmp_path, 10)
    assert d.file_path(tmp_path).stat().st_size == 10


def test_fetch_builtin_reported_size_mismatch(tmp_path):
    body = b"y" * 20
    props = BuiltinLottieProps(expected_size=20, license="CC BY 4.0", info="info")
    d = LottieDownload(name="Joy", url="https://example.com/j.json", builtin=props)
    with mock.patch("urllib.request.urlopen", side_effect=serve(body, content_length=30)):
        with pytest.raises(DownloadError, match="Size is not as expected"):
            d.fetch(tmp_path, 1)
    assert not d.file_path(tmp_path).exists()


def test_fetch_builtin_exact(tmp_path):
    body = b"z" * 20
    props = BuiltinLottieProps(expected_size=len(body), license="CC BY 4.0", info="info")
    d = LottieDownload(name="Wink", url="https://example.com/w.json", builtin=props)
    with mock.patch("urllib.request.urlopen", side_effect=serve(body, content_length=len(body))):
        d.fetch(tmp_path, 1)
    assert d.file_path(tmp_path).read_bytes() == body


def test_fetch_builtin_short_body(tmp_path):
    body = b"z" * 5
    props = BuiltinLottieProps(expected_size=20, license="CC BY 4.0", info="info")
    d = LottieDownload(name="Short", url="https://example.com/s.json", builtin=props)
    with mock.patch("urllib.request.urlopen", side_effect=serve(body)):
        with pytest.raises(DownloadError, match="was not as expected"):
            d.fetch(tmp_path, 1)


def test_fetch_refuses_existing_file(tmp_path):
    d = LottieDownload(name="Exists", url="https://example.com/e.json")
    d.file_path(tmp_path).write_bytes(b"old")
    with mock.patch("urllib.request.urlopen", side_effect=serve(b"new")):
        with pytest.raises(DownloadError, match="Creating file"):
            d.fetch(tmp_path, 100)
    assert d.file_path(tmp_path).read_bytes() == b"old"


def test_fetch_network_error(tmp_path):
    d = LottieDownload(name="Down", url="https://example.com/d.json")
    with mock.patch("urllib.request.urlopen", side_effect=URLError("unreachable")):
        with pytest.raises(DownloadError, match="failed"):
            d.fetch(tmp_path, 100)