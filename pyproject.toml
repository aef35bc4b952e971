[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hdbdriver"
version = "0.103.3"
description = "Building blocks for an SAP HANA client: server versions, identifiers, value types, SQL trace, dialing and spatial encoders"
requires-python = ">=3.10"
dependencies = []
keywords = ["hana", "hdb", "database", "spatial", "wkb", "wkt", "geojson"]
classifiers = [
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hdbdriver"]

[tool.pytest.ini_options]
addopts = "-ra"
