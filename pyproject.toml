[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iptvpvr"
version = "0.1.0"
description = "Catch-up, XMLTV programme, genre and URL helpers for IPTV PVR clients"
requires-python = ">=3.10"
dependencies = []
keywords = ["iptv", "pvr", "xmltv", "epg", "catchup", "flussonic", "xtream-codes"]
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
    "Topic :: Multimedia :: Video",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["iptvpvr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
