[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nexuseditor"
version = "0.1.0"
description = "Project, scene-file and content-folder tooling for the Nexus game editor"
requires-python = ">=3.10"
keywords = ["game-editor", "scene", "assets", "projects", "content-browser"]
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
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]
dependencies = [
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
nexuseditor = "nexuseditor.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nexuseditor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
disallow_untyped_defs = true
