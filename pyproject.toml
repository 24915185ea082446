[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yanyuan-flowers"
version = "0.1.0"
description = "Campus flower guide: flower catalogue, bloom map, flower-aware route finding, quiz, check-in log and album"
requires-python = ">=3.10"
dependencies = []
keywords = ["flowers", "campus", "botany", "pathfinding", "a-star", "quiz", "check-in"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
yanyuan-flowers = "yanyuan_flowers.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["yanyuan_flowers"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
