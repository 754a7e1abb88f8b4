[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atmtui"
version = "0.1.5"
description = "Building blocks for a terminal monitor of Claude Code agent sessions running across tmux panes"
requires-python = ">=3.10"
dependencies = []
keywords = ["claude", "monitoring", "tmux", "tui", "agents"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["atmtui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
