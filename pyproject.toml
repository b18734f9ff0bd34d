[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wristtrack"
version = "0.1.0"
description = "Decode, store and export activity data recorded by fitness watches"
requires-python = ">=3.10"
dependencies = []
keywords = ["fitness", "smartwatch", "gpx", "tcx", "activity", "huami", "bip"]
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
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wristtrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
