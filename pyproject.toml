[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warfield"
version = "0.1.0"
description = "Grid battlefield rules, enemy AI, camera and status-panel logic for a turn-based tactics game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "tactics", "turn-based", "ai", "grid", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["warfield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
