"""HTML rendering of a Leaflet map container."""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from typing import Callable

from .models import MapMarker, MapOptions, MapPosition
from .script import generate_map_id, generate_map_script

LEAFLET_CSS_URL = "https://unpkg.com/leaflet@1.9.4/dist/leaflet.css"
LEAFLET_CSS_INTEGRITY = "sha256-p4NxAoJBhIIN+hmNHrzRCf9tD/miZyoHS5obTRR9BMY="
LEAFLET_JS_URL = "https://unpkg.com/leaflet@1.9.4/dist/leaflet.js"
LEAFLET_JS_INTEGRITY = "sha256-20nQCchB9co0qIjJZRGuk2/Z9VM+kNiyxNV1lvTlZBo="

BASE_CLASS = "dioxus-leaflet-container"
MAP_CLASS = "dioxus-leaflet-map"
MAP_STYLE = "width: 100%; height: 100%; z-index: 1;"


@dataclass
class MapProps:
    """Properties of a rendered map."""

    initial_position: MapPosition = field(default_factory=MapPosition)
    markers: list[MapMarker] = field(default_factory=list)
    height: str = "500px"
    width: str = "100%"
    options: MapOptions = field(default_factory=MapOptions)
    css_class: str = ""
    style: str = ""
    on_marker_click: Callable[[MapMarker], None] | None = None
    on_map_click: Callable[[MapPosition], None] | None = None
    on_map_move: Callable[[MapPosition], None] | None = None

    def container_style(self) -> str:
        return f"position: relative; width: {self.width}; height: {self.height}; {self.style}"

    def container_class(self) -> str:
        return f"{BASE_CLASS} {self.css_class}" if self.css_class else BASE_CLASS


def _attrs(**attributes: str) -> str:
    return " ".join(f'{name}="{escape(value, quote=True)}"' for name, value in attributes.items())


def render_map(props: MapProps, map_id: str | None = None) -> str:
    """Render the map container, Leaflet assets and initialisation script as HTML."""
    if map_id is None:
        map_id = generate_map_id()
    script = generate_map_script(map_id, props.initial_position, props.markers, props.options)
    parts = [
        f"<div {_attrs(**{'class': props.container_class(), 'style': props.container_style()})}>",
        f"<link {_attrs(rel='stylesheet', href=LEAFLET_CSS_URL, integrity=LEAFLET_CSS_INTEGRITY, crossorigin='')}>",
        f"<div {_attrs(id=map_id, **{'class': MAP_CLASS}, style=MAP_STYLE)}></div>",
        f"<script {_attrs(src=LEAFLET_JS_URL, integrity=LEAFLET_JS_INTEGRITY, crossorigin='')}></script>",
        f"<script>{script}</script>",
        "</div>",
    ]
    return "".join(parts)