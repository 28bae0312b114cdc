[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "feltside"
version = "1.0.0"
description = "Poker table building blocks: AI opponents with personalities, keyboard input handling and text-mode table drawing"
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "lowball", "2-7 triple draw", "ai", "cards", "text mode"]
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
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["feltside"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
