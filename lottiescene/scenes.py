"""Locating Lottie scene files and working out which frame to show."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

__all__ = ["SceneConfig", "collect_scene_files", "frame_at"]


@dataclass(frozen=True)
class SceneConfig:
    """A scene that can be shown: its display name and where it comes from."""

    name: str
    animated: bool = True
    path: Path | None = None


def _scene_of(path: Path) -> SceneConfig:
    return SceneConfig(name=path.stem or "unknown", animated=True, path=path)


def collect_scene_files(paths: Iterable[str | PathLike[str]]) -> list[SceneConfig]:
    """Turn files and directories into scenes, in the order given.

    A directory contributes every entry ending in ``.json``, ordered by name
    without regard to case; an empty directory contributes nothing. Any other
    path is taken as a scene file as it is.
    """
    scenes: list[SceneConfig] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            found = [_scene_of(entry) for entry in sorted(path.iterdir()) if entry.suffix == ".json"]
            found.sort(key=lambda scene: scene.name.lower())
            scenes.extend(found)
        else:
            scenes.append(_scene_of(path))
    return scenes


def frame_at(elapsed: float, frame_rate: float, start: float, end: float) -> float:
    """Return the frame to show ``elapsed`` seconds in, looping over ``start..end``."""
    span = end - start
    if span == 0:
        raise ValueError(f"frame range {start}..{end} is empty")
    return math.fmod(elapsed * frame_rate, span) + start