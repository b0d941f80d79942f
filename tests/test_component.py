import re

from leafletkit.component import MapProps, render_map
from leafletkit.models import MapMarker, MapOptions, MapPosition
from leafletkit.script import generate_map_script


def test_default_props():
    props = MapProps()
    assert props.height == "500px"
    assert props.width == "100%"
    assert props.initial_position == MapPosition()
    assert props.markers == []
    assert props.options == MapOptions()
    assert props.on_marker_click is None


def test_container_style_default():
    assert MapProps().container_style() == "position: relative; width: 100%; height: 500px; "


def test_container_style_includes_custom_style():
    props = MapProps(width="50vw", height="10em", style="border: 0;")
    style = props.container_style()
    assert style.startswith("position: relative; ")
    assert "width: 50vw;" in style
    assert "height: 10em;" in style
    assert style.endswith("border: 0;")


def test_container_class():
    assert MapProps().container_class() == "dioxus-leaflet-container"
    assert MapProps(css_class="big").container_class() == "dioxus-leaflet-container big"


def test_render_contains_map_div_and_assets():
    html = render_map(MapProps(), "m1")
    assert 'id="m1"' in html
    assert 'class="dioxus-leaflet-map"' in html
    assert "https://unpkg.com/leaflet@1.9.4/dist/leaflet.css" in html
    assert "https://unpkg.com/leaflet@1.9.4/dist/leaflet.js" in html
    assert html.startswith('<div class="dioxus-leaflet-container"')
    assert html.endswith("</div>")


def test_render_embeds_generated_script():
    props = MapProps(markers=[MapMarker(1.0, 2.0, "A")], options=MapOptions.minimal())
    html = render_map(props, "m2")
    expected = generate_map_script("m2", props.initial_position, props.markers, props.options)
    assert f"<script>{expected}</script>" in html


def test_render_generates_id_when_missing():
    html = render_map(MapProps())
    match = re.search(r'id="(dioxus_leaflet_map_\d+)"', html)
    assert match is not None
    assert f"getElementById('{match.group(1)}')" in html


def test_render_escapes_attribute_values():
    html = render_map(MapProps(style='font-family: "x"'), "m3")
    assert "&quot;x&quot;" in html
    assert 'font-family: "x"' not in html