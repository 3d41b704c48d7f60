"""Command line: list Lottie scenes or download Lottie files."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from lottiescene.catalog import default_downloads
from lottiescene.fetch import (
    DEFAULT_SIZE_LIMIT,
    DownloadError,
    LottieDownload,
    format_bytes,
    parse_download,
    parse_size,
)
from lottiescene.scenes import collect_scene_files

__all__ = ["Downloader", "default_directory", "main"]


def default_directory() -> Path:
    """Return the directory downloads go into: ``assets/downloads`` under the working directory."""
    return Path.cwd() / "assets" / "downloads"


def _ask(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} (y/N) ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


@dataclass
class Downloader:
    """Downloads either the given Lottie files or the default set."""

    directory: Path = field(default_factory=default_directory)
    downloads: list[str] | None = None
    auto: bool = False
    size_limit: int = field(default_factory=lambda: parse_size(DEFAULT_SIZE_LIMIT))
    confirm: Callable[[str], bool] = _ask

    def _pending_defaults(self) -> list[LottieDownload]:
        pending = [d for d in default_downloads() if not d.file_path(self.directory).exists()]
        if self.auto:
            return pending
        if not pending:
            print("Nothing to download! All default downloads already created")
            return []
        print("Would you like to download a set of default lottie files? These files are:")
        total = 0
        for download in pending:
            builtin = download.builtin
            if builtin is None:
                continue
            print(
                f"{download.name} ({format_bytes(builtin.expected_size)}) "
                f"under license {builtin.license} from {builtin.info}"
            )
            total += builtin.expected_size
        prompt = (
            "Would you like to download a set of default lottie files, "
            f"as explained above? ({format_bytes(total)})"
        )
        return pending if self.confirm(prompt) else []

    @staticmethod
    def _report(completed: int, failed: int) -> None:
        print(f"{completed} downloads complete")
        if failed > 0:
            print(f"{failed} downloads failed")

    def run(self) -> int:
        """Fetch the selected files and return how many were downloaded.

        After a failure the user is asked whether to go on; with ``auto`` set
        the run stops at once. Stopping re-raises the :class:`DownloadError`.
        """
        if self.downloads is not None:
            to_download = [parse_download(value) for value in self.downloads]
        else:
            to_download = self._pending_defaults()

        completed = failed = 0
        for index, download in enumerate(to_download):
            print(f"{index}: Downloading {download.name} from {download.url}")
            try:
                download.fetch(self.directory, self.size_limit)
            except DownloadError as exc:
                failed += 1
                print(f"Download failed with error: {exc}", file=sys.stderr)
                keep_going = False if self.auto else self.confirm(
                    "Would you like to try other downloads?"
                )
                if not keep_going:
                    self._report(completed, failed)
                    remaining = len(to_download) - (completed + failed)
                    if remaining > 0:
                        print(f"{remaining} downloads skipped")
                    raise
            else:
                completed += 1
        self._report(completed, failed)
        return completed


def _download_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lottiescene download",
        description="Download Lottie files for testing. By default, downloads a set of animated emoji.",
    )
    parser.add_argument(
        "--directory", type=Path, default=None, help="directory to download the files into"
    )
    parser.add_argument(
        "downloads",
        nargs="*",
        help="files to download; use name@url to choose the file name",
    )
    parser.add_argument(
        "--auto", action="store_true", help="install the default set of files without asking"
    )
    parser.add_argument(
        "--size-limit",
        type=parse_size,
        default=DEFAULT_SIZE_LIMIT,
        help="size limit for each file (ignored for the default files)",
    )
    return parser


def _scene_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lottiescene",
        description="List the Lottie scenes found in the given files and directories.",
        epilog="Run 'lottiescene download --help' to fetch Lottie files.",
    )
    parser.add_argument("lotties", nargs="*", type=Path, help="Lottie files or directories")
    return parser


def _download(argv: Sequence[str]) -> int:
    opts = _download_parser().parse_args(list(argv))
    downloader = Downloader(
        directory=opts.directory or default_directory(),
        downloads=opts.downloads or None,
        auto=opts.auto,
        size_limit=opts.size_limit,
    )
    try:
        downloader.run()
    except DownloadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] == "download":
        return _download(args[1:])

    opts = _scene_parser().parse_args(args)
    try:
        if opts.lotties:
            scenes = collect_scene_files(opts.lotties)
        else:
            directory = default_directory()
            scenes = collect_scene_files([directory]) if directory.is_dir() else []
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    if not scenes:
        print("No test files are available.", file=sys.stderr)
        return 1
    for scene in scenes:
        print(scene.name)
    return 0