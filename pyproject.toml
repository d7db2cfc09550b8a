[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mediasearch"
version = "0.1.0"
description = "Search-result models, search tab state, option-list editing and widget logic for a media downloader front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["media", "video", "search", "playlist", "range-slider", "spinner"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mediasearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
