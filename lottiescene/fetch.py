"""Downloading Lottie files with size limits."""

from __future__ import annotations

import http.client
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from urllib import request

__all__ = [
    "DEFAULT_SIZE_LIMIT",
    "DownloadError",
    "BuiltinLottieProps",
    "LottieDownload",
    "parse_download",
    "parse_size",
    "format_bytes",
]

DEFAULT_SIZE_LIMIT = "10 MB"
_CHUNK = 64 * 1024
_TIMEOUT = 60.0

_PREFIXES = "kmgtpe"
_SIZE_RE = re.compile(
    r"\s*(\d+(?:\.\d*)?|\.\d+)\s*([kmgtpe]?)(i?)(b?)\s*", re.IGNORECASE
)
_DECIMAL_UNITS = ["B", "KB", "MB", "GB", "TB", "PB", "EB"]
_BINARY_UNITS = ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB"]


class DownloadError(Exception):
    """A download failed or did not match what was expected."""


@dataclass(frozen=True)
class BuiltinLottieProps:
    """What is known in advance about one of the default downloads."""

    expected_size: int
    license: str
    info: str


def parse_size(text: str) -> int:
    """Parse a byte size such as ``"10 MB"``, ``"512 KiB"`` or ``"42"``."""
    match = _SIZE_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid size: {text!r}")
    number, prefix, binary, _ = match.groups()
    if binary and not prefix:
        raise ValueError(f"invalid size unit in {text!r}")
    try:
        amount = Decimal(number)
    except InvalidOperation as exc:
        raise ValueError(f"invalid size: {text!r}") from exc
    power = _PREFIXES.index(prefix.lower()) + 1 if prefix else 0
    base = 1024 if binary else 1000
    return int(amount * base**power)


def _format_bytes(count: int, binary: bool) -> str:
    if count < 0:
        raise ValueError(f"byte count must not be negative, got {count}")
    base = 1024 if binary else 1000
    units = _BINARY_UNITS if binary else _DECIMAL_UNITS
    power = 0
    while power + 1 < len(units) and count >= base ** (power + 1):
        power += 1
    if power == 0:
        return f"{count} B"
    return f"{count / base**power:.2f} {units[power]}"


def format_bytes(count: int) -> str:
    """Format a byte count in the largest fitting decimal unit, e.g. ``"1.50 MB"``."""
    return _format_bytes(count, binary=False)


@dataclass(frozen=True)
class LottieDownload:
    """A named Lottie file to fetch from a URL."""

    name: str
    url: str
    builtin: BuiltinLottieProps | None = None

    def file_path(self, directory: str | Path) -> Path:
        """Return where this download is stored inside ``directory``."""
        return (Path(directory) / self.name).with_suffix(".json")

    def _reported_size(self) -> int | None:
        with request.urlopen(request.Request(self.url, method="HEAD"), timeout=_TIMEOUT) as resp:
            value = resp.headers.get("Content-Length")
        if value is not None and re.fullmatch(r"\+?[0-9]+", value.strip()):
            return int(value.strip())
        return None

    def fetch(self, directory: str | Path, size_limit: int | str) -> None:
        """Download the file into ``directory``, refusing files over the limit.

        A builtin download must be exactly its expected size, which then
        replaces ``size_limit``. The target file must not exist yet.
        """
        limit = parse_size(size_limit) if isinstance(size_limit, str) else int(size_limit)
        exact = self.builtin is not None
        if self.builtin is not None:
            limit = self.builtin.expected_size
        if limit < 0:
            raise ValueError(f"size limit must not be negative, got {limit}")

        try:
            if exact:
                reported = self._reported_size()
                if reported is not None and reported != limit:
                    raise DownloadError(
                        "Size is not as expected for download. Expected "
                        f"{_format_bytes(limit, True)}, server reported "
                        f"{_format_bytes(reported, True)}"
                    )
            try:
                out = open(self.file_path(directory), "xb")
            except OSError as exc:
                raise DownloadError(f"Creating file: {exc}") from exc
            with out, request.urlopen(request.Request(self.url), timeout=_TIMEOUT) as resp:
                written = 0
                while written < limit:
                    chunk = resp.read(min(_CHUNK, limit - written))
                    if not chunk:
                        break
                    out.write(chunk)
                    written += len(chunk)
                if resp.read(1):
                    raise DownloadError("Size limit exceeded")
        except (OSError, http.client.HTTPException) as exc:
            raise DownloadError(f"Request for {self.url} failed: {exc}") from exc

        if exact and written != limit:
            raise DownloadError(
                "Builtin downloaded file was not as expected. "
                f"Expected {limit}, received {written}."
            )


def parse_download(value: str) -> LottieDownload:
    """Parse ``name@url`` or a bare URL whose last path part names the file."""
    name, sep, url = value.partition("@")
    if sep:
        return LottieDownload(name=name, url=url)
    end = value.rfind(".json")
    url_with_name = value[:end] if end >= 0 else value
    return LottieDownload(name=url_with_name.rsplit("/", 1)[-1], url=value)