import pytest

from leafletkit.models import (
    MapMarker,
    MapOptions,
    MapPosition,
    MarkerIcon,
    PopupOptions,
    TileLayer,
)


_FLAG_NAMES = [
    "zoom_control",
    "scroll_wheel_zoom",
    "double_click_zoom",
    "touch_zoom",
    "dragging",
    "keyboard",
    "attribution_control",
]


def _full_marker():
    icon = MarkerIcon(
        "icon.png",
        icon_size=(25, 41),
        icon_anchor=(12, 41),
        popup_anchor=(1, -34),
        shadow_url="shadow.png",
        shadow_size=(41, 41),
    )
    return (
        MapMarker(51.505, -0.09, "London")
        .with_description("Capital of England")
        .with_icon(icon)
        .with_popup_options(PopupOptions(class_name="popup"))
        .with_custom_data("kind", "city")
    )


def test_default_position_matches_source():
    pos = MapPosition()
    assert (pos.lat, pos.lng, pos.zoom) == (51.505, -0.09, 13.0)


def test_position_round_trip():
    pos = MapPosition(10.5, -20.25, 4.0)
    assert MapPosition.from_dict(pos.to_dict()) == pos


def test_position_missing_field_raises():
    with pytest.raises(ValueError):
        MapPosition.from_dict({"lat": 1.0, "lng": 2.0})


def test_marker_defaults():
    marker = MapMarker()
    assert marker.lat == 0.0
    assert marker.title == ""
    assert marker.description is None
    assert marker.custom_data is None


def test_marker_builders_do_not_mutate_original():
    base = MapMarker(1.0, 2.0, "A")
    described = base.with_description("desc")
    assert base.description is None
    assert described.description == "desc"
    assert described.title == "A"


def test_custom_data_accumulates():
    marker = MapMarker(1.0, 2.0, "A").with_custom_data("k1", "v1")
    second = marker.with_custom_data("k2", "v2")
    assert marker.custom_data == {"k1": "v1"}
    assert second.custom_data == {"k1": "v1", "k2": "v2"}


def test_marker_round_trip_full():
    marker = _full_marker()
    assert MapMarker.from_dict(marker.to_dict()) == marker


def test_marker_to_dict_key_order_and_lists():
    data = _full_marker().to_dict()
    assert list(data) == [
        "lat",
        "lng",
        "title",
        "description",
        "icon",
        "popup_options",
        "custom_data",
    ]
    assert data["icon"]["popup_anchor"] == [1, -34]


def test_marker_from_dict_optional_fields_absent():
    marker = MapMarker.from_dict({"lat": 3.0, "lng": 4.0, "title": "T"})
    assert marker == MapMarker(3.0, 4.0, "T")


def test_marker_from_dict_requires_title():
    with pytest.raises(ValueError):
        MapMarker.from_dict({"lat": 3.0, "lng": 4.0})


def test_icon_from_dict_converts_lists_to_tuples():
    icon = MarkerIcon.from_dict({"icon_url": "x.png", "icon_size": [10, 20]})
    assert icon.icon_size == (10, 20)
    assert icon.shadow_url is None


def test_icon_rejects_negative_size():
    with pytest.raises(ValueError):
        MarkerIcon("x.png", icon_size=(-1, 5))


def test_popup_defaults():
    popup = PopupOptions()
    assert popup.max_width == 300
    assert popup.min_width == 50
    assert popup.max_height is None
    assert popup.keep_in_view is False
    assert popup.close_on_escape_key is True


def test_popup_round_trip():
    popup = PopupOptions(max_height=200, class_name="c")
    assert PopupOptions.from_dict(popup.to_dict()) == popup


def test_tile_layer_default_is_openstreetmap():
    layer = TileLayer()
    assert layer == TileLayer.openstreetmap()
    assert layer.url == "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
    assert layer.max_zoom == 19
    assert layer.subdomains == ("a", "b", "c")


def test_tile_layer_satellite():
    layer = TileLayer.satellite()
    assert layer.attribution == "Tiles &copy; Esri"
    assert layer.max_zoom == 18
    assert layer.subdomains == ()


def test_tile_layer_round_trip():
    layer = TileLayer.satellite()
    assert TileLayer.from_dict(layer.to_dict()) == layer


def test_tile_layer_max_zoom_out_of_range():
    with pytest.raises(ValueError):
        TileLayer(max_zoom=300)


def test_map_options_default_all_enabled():
    opts = MapOptions()
    flags = opts.to_dict()
    del flags["tile_layer"]
    assert flags == {name: True for name in _FLAG_NAMES}
    assert opts.tile_layer == TileLayer.openstreetmap()


def test_map_options_minimal_all_disabled():
    opts = MapOptions.minimal()
    flags = opts.to_dict()
    del flags["tile_layer"]
    assert flags == {name: False for name in _FLAG_NAMES}
    assert opts.tile_layer == TileLayer.openstreetmap()


@pytest.mark.parametrize(
    "method, attr",
    [
        ("with_zoom_control", "zoom_control"),
        ("with_scroll_wheel_zoom", "scroll_wheel_zoom"),
        ("with_double_click_zoom", "double_click_zoom"),
        ("with_touch_zoom", "touch_zoom"),
        ("with_dragging", "dragging"),
        ("with_keyboard", "keyboard"),
        ("with_attribution_control", "attribution_control"),
    ],
)
def test_map_options_builders_flip_one_flag(method, attr):
    base = MapOptions.minimal()
    changed = getattr(base, method)(True)
    assert getattr(changed, attr) is True
    before = base.to_dict()
    after = changed.to_dict()
    assert [k for k in before if before[k] != after[k]] == [attr]


def test_map_options_with_tile_layer_and_round_trip():
    opts = MapOptions().with_tile_layer(TileLayer.satellite())
    assert opts.tile_layer == TileLayer.satellite()
    assert MapOptions.from_dict(opts.to_dict()) == opts