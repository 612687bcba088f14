[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bkgame"
version = "0.0.1"
description = "A small side-scrolling game with a jumping rabbit over a moving background, plus a simple image viewer"
requires-python = ">=3.10"
keywords = ["game", "pygame", "side-scroller", "rabbit", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Arabic",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bkgame = "bkgame.game:main"
bkgame-viewer = "bkgame.viewer:main"

[tool.hatch.build.targets.wheel]
packages = ["bkgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
