[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "konui"
version = "0.1.0"
description = "A small declarative UI toolkit with shared values, cached derived text, composable elements and a pygame renderer"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["ui", "gui", "declarative", "reactive", "pygame", "widgets"]
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
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
konui-counter = "konui.counter:main"

[tool.hatch.build.targets.wheel]
packages = ["konui"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
