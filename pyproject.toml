[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "svgtidy"
version = "0.1.4"
description = "SVG optimizer: a configurable pipeline of plugins that shrink and tidy SVG documents"
requires-python = ">=3.10"
dependencies = []
keywords = ["svg", "optimizer", "minify", "vector", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Text Processing :: Markup :: XML",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["svgtidy"]

[tool.hatch.build.targets.sdist]
include = ["svgtidy", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
