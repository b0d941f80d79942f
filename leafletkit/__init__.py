"""Map models, Leaflet initialisation scripts and HTML rendering of map containers."""

__version__ = "0.1.6"
__all__ = ["models", "script", "component"]