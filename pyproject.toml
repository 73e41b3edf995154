[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hfdlcore"
version = "1.6.1"
description = "Supporting pieces of an HFDL (HF Data Link) decoder: aircraft caches, aircraft database lookup, CRC, sample dumps, channelizer helpers and metadata formatting"
requires-python = ">=3.10"
keywords = ["hfdl", "aviation", "sdr", "ham radio", "crc", "icao"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
    "Topic :: Scientific/Engineering",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hfdlcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
