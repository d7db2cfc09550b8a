# mediasearch

The logic behind the search screens and option handling of a media
downloader front end, written as plain Python objects with no GUI toolkit
and no third-party dependencies.

## Modules

- `mediasearch.arguments`: edits downloader command lines in place.
  `Arguments` wraps a list and offers `has_option`, `remove_option`,
  `has_value` (the value after the last occurrence of an option) and
  `remove_option_with_argument`. `remove_argument` drops every occurrence of
  a value. `remove_argument_with_option` drops the first occurrence and the
  item after it. `is_post_process_marker` tells whether output starts with
  `DoneDownloading`.
- `mediasearch.items`: result items built from search JSON with `from_json`.
  These are `YtVideo` (search or trending video), `XpVideo` and
  `YtPlaylist`. Each gives `meta_text()` and `links_text()` (HTML snippets).
  Each has `activate_link(link)`, which returns a `LinkActivation` (a
  `LinkAction` plus its data) or `None` for an unhandled code. The helpers
  are `nice_number` (e.g. `2M`), `format_seconds` (`hh:mm:ss`) and
  `parse_link`.
- `mediasearch.process`: `ProcessExitState` with `success()`.
  `ProcessOutputChannels` gives merged output when no channel is set and
  separate output otherwise. The module also holds the enums `ExitStatus`,
  `ChannelMode` and `ProcessChannel`, plus `ContextState`.
  `DebugPrinter` prints values to standard output for the switch `--debug`
  and to standard error for `--qdebug`. `format_debug_value` renders lists as
  `("a", "b")`.
- `mediasearch.spinner`: `WaitingSpinner` keeps the state of a rotating
  waiting indicator: its size, timer interval, current line and position
  centred on a parent. `line_colors()` returns the `Color` of every line for
  the current frame. `current_line_color` and
  `line_count_distance_from_primary` compute the trail fade.
- `mediasearch.yt_results`: turns service responses into result rows. This
  is done by `video_results`, `playlist_results` and `trending_results`,
  which produce `PseudoItem` headers and messages plus items.
  `trending_header` gives the header text for each `SearchMode`.
  `needs_retry` is true unless the response is a non-empty JSON array.
- `mediasearch.yt_search`: `YtSearch` drives a caller-supplied search service
  and instance list. It covers searching (with an optional age-restriction
  confirmation for trigger words), trending lists, loading more, cancelling
  and clearing. It retries once on a random instance before falling back to
  the first one, and keeps the enabled/label state of the controls.
- `mediasearch.xp_search`: `XpSearch` does the same for a category and
  keyword service. It covers category browsing, latest, top-rated and
  most-viewed listings, and a once-per-session consent check.
  `sort_categories` orders `(id, name)` pairs by name.
- `mediasearch.range_values`: `RangeValues` holds a minimum, a maximum and
  clamped lower/upper values. A minimum or maximum given on the wrong side of
  the other swaps the two. Change listeners can be attached.
- `mediasearch.range_slider`: `RangeSlider` extends `RangeValues` with
  handle geometry (`first_handle_rect`, `second_handle_rect`, `valid_length`,
  `minimum_size_hint`). It handles the mouse through `mouse_press`,
  `mouse_move` and `mouse_release`, for either `Orientation` and any
  `HandleOption`.

## What it does not do

The package draws nothing and has no screens. It fetches nothing over the
network: the search services and instance lists are objects you pass in. It
does not load thumbnails, start downloader processes or play media. It has
no command-line entry point.

## Install

```
pip install .
```

## Example

```python
from mediasearch.arguments import Arguments
from mediasearch.items import nice_number

opts = ["-f", "best", "--download-archive", "archive.txt", "URL"]
Arguments(opts).remove_option_with_argument("--download-archive")
print(opts)                  # ['-f', 'best', 'URL']
print(nice_number(2500000))  # '2M'
```

## Tests

```
pip install .[test]
pytest
```