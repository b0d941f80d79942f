"""Data types describing a Leaflet map, its markers, popups and tile layers."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping

_U8_MAX = 0xFF
_U32_MAX = 0xFFFF_FFFF
_I32_MIN = -0x8000_0000
_I32_MAX = 0x7FFF_FFFF


def _require(data: Mapping[str, Any], key: str, owner: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"{owner}: missing field {key!r}") from None


def _check_range(name: str, value: int | None, low: int, high: int) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


def _check_pair(name: str, pair: tuple[int, int] | None, low: int, high: int) -> None:
    if pair is None:
        return
    if len(pair) != 2:
        raise ValueError(f"{name} must hold exactly two values, got {pair!r}")
    for value in pair:
        _check_range(name, value, low, high)


def _pair(value: Any) -> tuple[int, int] | None:
    return None if value is None else tuple(value)


def _list(pair: tuple[int, int] | None) -> list[int] | None:
    return None if pair is None else list(pair)


@dataclass(frozen=True)
class MapPosition:
    """A geographical position with a zoom level."""

    lat: float = 51.505
    lng: float = -0.09
    zoom: float = 13.0

    def to_dict(self) -> dict[str, Any]:
        return {"lat": self.lat, "lng": self.lng, "zoom": self.zoom}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MapPosition:
        owner = cls.__name__
        return cls(
            lat=float(_require(data, "lat", owner)),
            lng=float(_require(data, "lng", owner)),
            zoom=float(_require(data, "zoom", owner)),
        )


@dataclass(frozen=True)
class MarkerIcon:
    """Custom marker icon configuration."""

    icon_url: str
    icon_size: tuple[int, int] | None = None
    icon_anchor: tuple[int, int] | None = None
    popup_anchor: tuple[int, int] | None = None
    shadow_url: str | None = None
    shadow_size: tuple[int, int] | None = None

    def __post_init__(self) -> None:
        _check_pair("icon_size", self.icon_size, 0, _U32_MAX)
        _check_pair("icon_anchor", self.icon_anchor, 0, _U32_MAX)
        _check_pair("popup_anchor", self.popup_anchor, _I32_MIN, _I32_MAX)
        _check_pair("shadow_size", self.shadow_size, 0, _U32_MAX)

    def to_dict(self) -> dict[str, Any]:
        return {
            "icon_url": self.icon_url,
            "icon_size": _list(self.icon_size),
            "icon_anchor": _list(self.icon_anchor),
            "popup_anchor": _list(self.popup_anchor),
            "shadow_url": self.shadow_url,
            "shadow_size": _list(self.shadow_size),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MarkerIcon:
        return cls(
            icon_url=_require(data, "icon_url", cls.__name__),
            icon_size=_pair(data.get("icon_size")),
            icon_anchor=_pair(data.get("icon_anchor")),
            popup_anchor=_pair(data.get("popup_anchor")),
            shadow_url=data.get("shadow_url"),
            shadow_size=_pair(data.get("shadow_size")),
        )


@dataclass(frozen=True)
class PopupOptions:
    """Popup configuration options."""

    max_width: int | None = 300
    min_width: int | None = 50
    max_height: int | None = None
    auto_pan: bool | None = True
    keep_in_view: bool | None = False
    close_button: bool | None = True
    auto_close: bool | None = True
    close_on_escape_key: bool | None = True
    class_name: str | None = None

    def __post_init__(self) -> None:
        _check_range("max_width", self.max_width, 0, _U32_MAX)
        _check_range("min_width", self.min_width, 0, _U32_MAX)
        _check_range("max_height", self.max_height, 0, _U32_MAX)

    def to_dict(self) -> dict[str, Any]:
        return {
            "max_width": self.max_width,
            "min_width": self.min_width,
            "max_height": self.max_height,
            "auto_pan": self.auto_pan,
            "keep_in_view": self.keep_in_view,
            "close_button": self.close_button,
            "auto_close": self.auto_close,
            "close_on_escape_key": self.close_on_escape_key,
            "class_name": self.class_name,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PopupOptions:
        # Absent optional fields deserialize as None, not as the defaults.
        return cls(
            max_width=data.get("max_width"),
            min_width=data.get("min_width"),
            max_height=data.get("max_height"),
            auto_pan=data.get("auto_pan"),
            keep_in_view=data.get("keep_in_view"),
            close_button=data.get("close_button"),
            auto_close=data.get("auto_close"),
            close_on_escape_key=data.get("close_on_escape_key"),
            class_name=data.get("class_name"),
        )


@dataclass(frozen=True)
class MapMarker:
    """A marker on the map."""

    lat: float = 0.0
    lng: float = 0.0
    title: str = ""
    description: str | None = None
    icon: MarkerIcon | None = None
    popup_options: PopupOptions | None = None
    custom_data: dict[str, str] | None = None

    def with_description(self, description: str) -> MapMarker:
        return replace(self, description=str(description))

    def with_icon(self, icon: MarkerIcon) -> MapMarker:
        return replace(self, icon=icon)

    def with_popup_options(self, options: PopupOptions) -> MapMarker:
        return replace(self, popup_options=options)

    def with_custom_data(self, key: str, value: str) -> MapMarker:
        data = dict(self.custom_data or {})
        data[str(key)] = str(value)
        return replace(self, custom_data=data)

    def to_dict(self) -> dict[str, Any]:
        return {
            "lat": self.lat,
            "lng": self.lng,
            "title": self.title,
            "description": self.description,
            "icon": None if self.icon is None else self.icon.to_dict(),
            "popup_options": (
                None if self.popup_options is None else self.popup_options.to_dict()
            ),
            "custom_data": None if self.custom_data is None else dict(self.custom_data),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MapMarker:
        owner = cls.__name__
        icon = data.get("icon")
        popup = data.get("popup_options")
        custom = data.get("custom_data")
        return cls(
            lat=float(_require(data, "lat", owner)),
            lng=float(_require(data, "lng", owner)),
            title=_require(data, "title", owner),
            description=data.get("description"),
            icon=None if icon is None else MarkerIcon.from_dict(icon),
            popup_options=None if popup is None else PopupOptions.from_dict(popup),
            custom_data=None if custom is None else dict(custom),
        )


_OSM_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
_OSM_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> '
    "contributors"
)


@dataclass(frozen=True)
class TileLayer:
    """Tile layer configuration; OpenStreetMap by default."""

    url: str = _OSM_URL
    attribution: str = _OSM_ATTRIBUTION
    max_zoom: int = 19
    subdomains: tuple[str, ...] = ("a", "b", "c")

    def __post_init__(self) -> None:
        _check_range("max_zoom", self.max_zoom, 0, _U8_MAX)
        object.__setattr__(self, "subdomains", tuple(self.subdomains))

    @classmethod
    def openstreetmap(cls) -> TileLayer:
        return cls()

    @classmethod
    def satellite(cls) -> TileLayer:
        return cls(
            url=(
                "https://server.arcgisonline.com/ArcGIS/rest/services/"
                "World_Imagery/MapServer/tile/{z}/{y}/{x}"
            ),
            attribution="Tiles &copy; Esri",
            max_zoom=18,
            subdomains=(),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "attribution": self.attribution,
            "max_zoom": self.max_zoom,
            "subdomains": list(self.subdomains),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TileLayer:
        owner = cls.__name__
        return cls(
            url=_require(data, "url", owner),
            attribution=_require(data, "attribution", owner),
            max_zoom=_require(data, "max_zoom", owner),
            subdomains=tuple(_require(data, "subdomains", owner)),
        )


@dataclass(frozen=True)
class MapOptions:
    """Map interaction and display options."""

    zoom_control: bool = True
    scroll_wheel_zoom: bool = True
    double_click_zoom: bool = True
    touch_zoom: bool = True
    dragging: bool = True
    keyboard: bool = True
    attribution_control: bool = True
    tile_layer: TileLayer = field(default_factory=TileLayer)

    @classmethod
    def minimal(cls) -> MapOptions:
        """Options with every control disabled and the default tile layer."""
        return cls(
            zoom_control=False,
            scroll_wheel_zoom=False,
            double_click_zoom=False,
            touch_zoom=False,
            dragging=False,
            keyboard=False,
            attribution_control=False,
        )

    def with_zoom_control(self, enabled: bool) -> MapOptions:
        return replace(self, zoom_control=bool(enabled))

    def with_scroll_wheel_zoom(self, enabled: bool) -> MapOptions:
        return replace(self, scroll_wheel_zoom=bool(enabled))

    def with_double_click_zoom(self, enabled: bool) -> MapOptions:
        return replace(self, double_click_zoom=bool(enabled))

    def with_touch_zoom(self, enabled: bool) -> MapOptions:
        return replace(self, touch_zoom=bool(enabled))

    def with_dragging(self, enabled: bool) -> MapOptions:
        return replace(self, dragging=bool(enabled))

    def with_keyboard(self, enabled: bool) -> MapOptions:
        return replace(self, keyboard=bool(enabled))

    def with_attribution_control(self, enabled: bool) -> MapOptions:
        return replace(self, attribution_control=bool(enabled))

    def with_tile_layer(self, tile_layer: TileLayer) -> MapOptions:
        return replace(self, tile_layer=tile_layer)

    def to_dict(self) -> dict[str, Any]:
        return {
            "zoom_control": self.zoom_control,
            "scroll_wheel_zoom": self.scroll_wheel_zoom,
            "double_click_zoom": self.double_click_zoom,
            "touch_zoom": self.touch_zoom,
            "dragging": self.dragging,
            "keyboard": self.keyboard,
            "attribution_control": self.attribution_control,
            "tile_layer": self.tile_layer.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MapOptions:
        owner = cls.__name__
        flags = {
            name: bool(_require(data, name, owner))
            for name in (
                "zoom_control",
                "scroll_wheel_zoom",
                "double_click_zoom",
                "touch_zoom",
                "dragging",
                "keyboard",
                "attribution_control",
            )
        }
        return cls(
            tile_layer=TileLayer.from_dict(_require(data, "tile_layer", owner)),
            **flags,
        )