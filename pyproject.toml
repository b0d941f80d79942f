[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leafletkit"
version = "0.1.6"
description = "Generate self-contained Leaflet map HTML with markers, popups and tile layers"
requires-python = ">=3.10"
dependencies = []
keywords = ["leaflet", "map", "gis", "html", "markers", "tiles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["leafletkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
