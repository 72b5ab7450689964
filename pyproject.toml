[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dockterm"
version = "0.1.0"
description = "Building blocks for a terminal container-management UI: text and table helpers, translations, background tasks and logging."
requires-python = ">=3.10"
keywords = ["docker", "containers", "terminal", "tui", "i18n", "translations", "tables"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Natural Language :: English",
    "Natural Language :: Chinese (Simplified)",
    "Natural Language :: Dutch",
    "Natural Language :: French",
    "Natural Language :: German",
    "Natural Language :: Polish",
    "Natural Language :: Portuguese",
    "Natural Language :: Spanish",
    "Natural Language :: Turkish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pyyaml",
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dockterm-translations = "dockterm.translations:main"

[tool.hatch.build.targets.wheel]
packages = ["dockterm"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
