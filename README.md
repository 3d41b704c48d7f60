# lottiescene

Building blocks for working with Lottie animations in plain Python, with
no dependencies outside the standard library.

## Modules

- `lottiescene.gradient`: decodes the flat number lists Lottie uses for
  gradients. `gradient_stops(values, count)` returns `(offset, r, g, b, alpha)`
  tuples, folding any trailing `(offset, alpha)` pairs into each stop's alpha;
  `normalize_to_range(a, b, x)` gives where `x` lies between `a` and `b`.
- `lottiescene.keyframes`: `EasingHandle`, `collect_tangents` and
  `keyframe_handle` build keyframe easing handles; `spline_points` flattens a
  bezier into vertex/in/out points; `BlendMode`, `MatteMode`,
  `blend_mode_for` and `matte_blend` map layer blend and track-matte modes to
  mix or compose operations (`ADD` and `HARD_MIX` raise `ValueError`).
- `lottiescene.touch`: multi-touch tracking. Feed `Touch` events (with a
  `TouchPhase`) to `TouchState.add_event`, call `end_frame` once per frame and
  read `info()` for a `MultiTouchInfo` with zoom, rotation and translation
  deltas. `PinchType.classify` decides horizontal, vertical or proportional
  pinches.
- `lottiescene.fetch`: `LottieDownload.fetch` downloads a file into a
  directory, refusing files over a size limit and never overwriting an
  existing file; failures raise `DownloadError`. `parse_download` reads
  `name@url` or a bare URL, `parse_size` reads sizes such as `"10 MB"` or
  `"512 KiB"`, and `format_bytes` prints byte counts in decimal units.
- `lottiescene.catalog`: `default_downloads()` lists a built-in set of
  animated emoji, each with its exact expected size, licence and source.
- `lottiescene.scenes`: `collect_scene_files` turns files and directories
  into `SceneConfig` entries (directories contribute their `.json` files,
  sorted by name ignoring case); `frame_at` picks the frame to show after a
  number of seconds, looping over a frame range.
- `lottiescene.cli`: the `lottiescene` command, with `Downloader` and
  `default_directory` behind it.

## Installation

```
pip install .
```

## Usage

```python
from lottiescene.gradient import gradient_stops
from lottiescene.scenes import frame_at

stops = gradient_stops([0.0, 1.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0], 2)
# [(0.0, 1.0, 0.0, 0.0, 1.0), (1.0, 0.0, 0.0, 1.0, 1.0)]

frame = frame_at(elapsed=2.5, frame_rate=30.0, start=0.0, end=60.0)
# 15.0
```

## Command line

List the scenes found in Lottie files or directories (with no arguments,
`assets/downloads` under the current directory is searched):

```
lottiescene path/to/animations
```

Download the default set of sample animations into `assets/downloads`,
asking before anything is fetched:

```
lottiescene download
```

Download without asking, or download specific files (use `name@url` to pick
the file name):

```
lottiescene download --auto
lottiescene download Smile@https://files.example.com/smile.json
```

`lottiescene download` also takes `--directory` and `--size-limit` (default
`10 MB`, ignored for the default files). Run `lottiescene --help` and
`lottiescene download --help` for details.

## What it does not do

The package does not parse whole Lottie documents or render animations:
there is no renderer, no window and no frame-time display. The command only
lists scene names and downloads files.

## Tests

```
pip install .[test]
pytest
```