[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boxclip"
version = "0.1.0"
description = "Planar geometry types and clipping of points, lines and polygons to a bounding box."
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "clipping", "bounding box", "polygon", "gis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["boxclip"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
