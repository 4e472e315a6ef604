[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "resourcehub"
version = "0.1.0"
description = "Async client, models and helpers for working with a resource-oriented HTTP API"
requires-python = ">=3.10"
dependencies = [
    "httpx>=0.24",
]
keywords = ["api", "client", "rest", "resources", "validation", "async"]
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
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "pytest-asyncio>=0.21",
]

[project.scripts]
resourcehub = "resourcehub.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["resourcehub"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
