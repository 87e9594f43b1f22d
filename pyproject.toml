[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "charsheet5e"
version = "0.1.0"
description = "Character sheet model, rules and content helpers for fifth edition tabletop role-playing games"
requires-python = ">=3.10"
dependencies = []
keywords = ["dnd", "5e", "character sheet", "tabletop", "role-playing", "dice"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["charsheet5e"]

[tool.pytest.ini_options]
addopts = "-ra"
