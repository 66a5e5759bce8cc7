[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linekeys"
version = "0.1.0"
description = "Key event parsing, keybindings, Emacs and Vi edit modes and highlighters for line editors"
requires-python = ">=3.10"
dependencies = []
keywords = ["line-editor", "keybindings", "vi", "emacs", "terminal", "readline"]
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
    "Environment :: Console",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linekeys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
