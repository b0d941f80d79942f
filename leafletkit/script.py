"""Generation of the JavaScript that initialises a Leaflet map."""

from __future__ import annotations

import json
import math
import random
from decimal import Decimal
from string import Template
from typing import Any, Iterable

from .models import MapMarker, MapOptions, MapPosition

MAP_ID_PREFIX = "dioxus_leaflet_map_"

_SCRIPT_TEMPLATE = Template("""
        (function() {
            function initializeDioxusLeafletMap() {
                function tryInitialize() {
                    if (typeof L === 'undefined') {
                        setTimeout(tryInitialize, 100);
                        return;
                    }
                    
                    var mapElement = document.getElementById('$map_id');
                    if (!mapElement) {
                        setTimeout(tryInitialize, 100);
                        return;
                    }
                    
                    try {
                        // Initialize the map with options
                        var map = L.map('$map_id', {
                            zoomControl: $zoom_control,
                            scrollWheelZoom: $scroll_wheel_zoom,
                            doubleClickZoom: $double_click_zoom,
                            touchZoom: $touch_zoom,
                            dragging: $dragging,
                            keyboard: $keyboard,
                            attributionControl: $attribution_control
                        }).setView([$lat, $lng], $zoom);

                        // Add tile layer
                        L.tileLayer('$tile_url', {
                            attribution: '$attribution',
                            maxZoom: $max_zoom,
                            subdomains: $subdomains
                        }).addTo(map);

                        // Add markers
                        var markersData = "$markers";
                        var markers = JSON.parse(markersData);
                        
                        markers.forEach(function(markerData) {
                            var markerOptions = {};
                            
                            // Custom icon if provided
                            if (markerData.icon) {
                                var iconOptions = {
                                    iconUrl: markerData.icon.icon_url
                                };
                                
                                if (markerData.icon.icon_size) {
                                    iconOptions.iconSize = markerData.icon.icon_size;
                                }
                                if (markerData.icon.icon_anchor) {
                                    iconOptions.iconAnchor = markerData.icon.icon_anchor;
                                }
                                if (markerData.icon.popup_anchor) {
                                    iconOptions.popupAnchor = markerData.icon.popup_anchor;
                                }
                                if (markerData.icon.shadow_url) {
                                    iconOptions.shadowUrl = markerData.icon.shadow_url;
                                }
                                if (markerData.icon.shadow_size) {
                                    iconOptions.shadowSize = markerData.icon.shadow_size;
                                }
                                
                                markerOptions.icon = L.icon(iconOptions);
                            }
                            
                            var marker = L.marker([markerData.lat, markerData.lng], markerOptions).addTo(map);
                            
                            // Add popup if title or description exists
                            if (markerData.title || markerData.description) {
                                var popupContent = '';
                                if (markerData.title) {
                                    popupContent += '<b>' + markerData.title + '</b>';
                                }
                                if (markerData.description) {
                                    if (markerData.title) popupContent += '<br>';
                                    popupContent += markerData.description;
                                }
                                
                                var popupOptions = {};
                                if (markerData.popup_options) {
                                    Object.assign(popupOptions, markerData.popup_options);
                                }
                                
                                marker.bindPopup(popupContent, popupOptions);
                            }
                        });
                        
                        // Force resize to ensure proper display
                        setTimeout(function() {
                            map.invalidateSize();
                        }, 100);
                        
                        // Store map reference for potential future use
                        window.dioxusLeafletMaps = window.dioxusLeafletMaps || {};
                        window.dioxusLeafletMaps['$map_id'] = map;
                        
                    } catch (error) {
                        console.error('Error initializing Dioxus Leaflet map:', error);
                    }
                }
                
                tryInitialize();
            }
            
            // Initialize when DOM is ready
            if (document.readyState === 'loading') {
                document.addEventListener('DOMContentLoaded', initializeDioxusLeafletMap);
            } else {
                initializeDioxusLeafletMap();
            }
        })();
        """)


def generate_map_id() -> str:
    """Return a fresh, random map element id."""
    return f"{MAP_ID_PREFIX}{random.getrandbits(32)}"


def bool_to_js(value: bool) -> str:
    """Render a boolean as a JavaScript literal."""
    return "true" if value else "false"


def escape_json_for_js(json_text: str) -> str:
    """Escape JSON text for inclusion in a double-quoted JavaScript string."""
    return (
        json_text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )


def _format_number(value: float) -> str:
    """Plain decimal rendering: no exponent, whole numbers without a fraction."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _json_safe(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    return value


def _to_json(value: Any) -> str:
    return json.dumps(_json_safe(value), separators=(",", ":"), ensure_ascii=False)


def generate_map_script(
    map_id: str,
    initial_position: MapPosition,
    markers: Iterable[MapMarker],
    options: MapOptions,
) -> str:
    """Build the script that creates the map, its tile layer and markers."""
    markers_json = _to_json([marker.to_dict() for marker in markers])
    layer = options.tile_layer
    return _SCRIPT_TEMPLATE.substitute(
        map_id=map_id,
        zoom_control=bool_to_js(options.zoom_control),
        scroll_wheel_zoom=bool_to_js(options.scroll_wheel_zoom),
        double_click_zoom=bool_to_js(options.double_click_zoom),
        touch_zoom=bool_to_js(options.touch_zoom),
        dragging=bool_to_js(options.dragging),
        keyboard=bool_to_js(options.keyboard),
        attribution_control=bool_to_js(options.attribution_control),
        lat=_format_number(initial_position.lat),
        lng=_format_number(initial_position.lng),
        zoom=_format_number(initial_position.zoom),
        tile_url=layer.url,
        attribution=layer.attribution,
        max_zoom=layer.max_zoom,
        subdomains=_to_json(list(layer.subdomains)),
        markers=escape_json_for_js(markers_json),
    )