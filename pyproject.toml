[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fuadmita"
version = "0.1.0"
description = "A small visual novel about Fuad and Mita, with pages, scenes, dialogs and fade transitions"
requires-python = ">=3.10"
keywords = ["visual novel", "game", "dialog", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fuadmita = "fuadmita.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fuadmita"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
