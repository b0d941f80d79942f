# leafletkit

Build interactive Leaflet maps as HTML fragments from plain Python objects.
Describe the starting view, the markers and their popups, the map controls and
the tile layer; leafletkit produces the container markup and the
initialisation script that sets everything up in the browser.

## Installation

```
pip install leafletkit
```

No third-party Python dependencies are needed. Leaflet itself (version 1.9.4)
is loaded from a CDN by the generated markup, with subresource integrity
hashes.

## Quick start

```python
from leafletkit.models import MapPosition, MapMarker
from leafletkit.component import MapProps, render_map

markers = [
    MapMarker(lat=51.505, lng=-0.09, title="London")
    .with_description("Capital of England"),
]

props = MapProps(
    initial_position=MapPosition(lat=51.505, lng=-0.09, zoom=13.0),
    markers=markers,
    height="400px",
    width="100%",
)

html = render_map(props)
with open("map.html", "w", encoding="utf-8") as fh:
    fh.write(html)
```

Open `map.html` in a browser to see the map.

## Models

All models live in `leafletkit.models` and are frozen dataclasses:

- `MapPosition` — latitude, longitude and zoom. Defaults to
  `lat=51.505, lng=-0.09, zoom=13.0`.
- `MapMarker` — a point (`lat`, `lng`, default `0.0`) with a `title` and an
  optional `description`, `icon`, `popup_options` and `custom_data` (a dict of
  strings). `with_description`, `with_icon`, `with_popup_options` and
  `with_custom_data(key, value)` return a new marker, so they can be chained.
- `MarkerIcon` — an `icon_url` with optional `icon_size`, `icon_anchor`,
  `popup_anchor`, `shadow_url` and `shadow_size`. Sizes and anchors are pairs
  of integers; sizes and `icon_anchor` must be unsigned 32-bit values and
  `popup_anchor` signed 32-bit values, otherwise `ValueError` (or `TypeError`
  for non-integers) is raised.
- `PopupOptions` — `max_width` (default 300), `min_width` (default 50),
  `max_height`, `auto_pan`, `keep_in_view`, `close_button`, `auto_close`,
  `close_on_escape_key` and `class_name`.
- `MapOptions` — the flags `zoom_control`, `scroll_wheel_zoom`,
  `double_click_zoom`, `touch_zoom`, `dragging`, `keyboard` and
  `attribution_control` (all `True` by default), plus `tile_layer`.
  `MapOptions.minimal()` turns every flag off; the `with_*` methods return
  adjusted copies.
- `TileLayer` — `url`, `attribution`, `max_zoom` (0–255) and `subdomains`.
  `TileLayer.openstreetmap()` (the default) and `TileLayer.satellite()` are
  provided.

Every model has `to_dict()` and `from_dict()` for turning it into plain,
JSON-ready data and back. `from_dict` raises `ValueError` when a required
field is missing. `PopupOptions.from_dict` leaves absent fields as `None`
rather than filling in the defaults.

```python
from leafletkit.models import MapOptions, TileLayer

options = (
    MapOptions.minimal()
    .with_dragging(True)
    .with_zoom_control(True)
    .with_tile_layer(TileLayer.satellite())
)
```

## Rendering

`leafletkit.component` holds:

- `MapProps` — a dataclass with `initial_position`, `markers`, `height`
  (default `"500px"`), `width` (default `"100%"`), `options`, `css_class` and
  `style`. `container_style()` returns the outer container's CSS and
  `container_class()` its class list, which always starts with
  `dioxus-leaflet-container` followed by `css_class` when it is set.
- `render_map(props, map_id=None)` — returns the HTML: the outer container,
  the Leaflet stylesheet link, the inner map element, the Leaflet script tag
  and the initialisation script. A random id is generated when `map_id` is not
  given; pass your own for a stable element id.

## Lower-level helpers

`leafletkit.script` exposes the pieces `render_map` is built from:

- `generate_map_id()` — a fresh, random element id of the form
  `dioxus_leaflet_map_<number>`.
- `generate_map_script(map_id, initial_position, markers, options)` — the
  JavaScript that waits for Leaflet and the container element, creates the map,
  adds the tile layer and markers (with popups built from title and
  description), and registers the map under `window.dioxusLeafletMaps[map_id]`.
- `escape_json_for_js(json_text)` — escapes backslashes, double quotes,
  newlines, carriage returns and tabs for embedding inside a double-quoted
  JavaScript string.
- `bool_to_js(value)` — `"true"` or `"false"`.

## What it does not do

leafletkit only produces HTML and JavaScript text. It runs no web server and
has no command-line tool. `MapProps` accepts `on_marker_click`, `on_map_click`
and `on_map_move` callables, but the rendered markup does not connect them to
any browser events; they are stored and nothing more. Tile URLs and
attribution text are inserted into the script as given, without escaping.