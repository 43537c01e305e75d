[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jobopenings"
version = "0.1.0"
description = "A small JSON HTTP API for managing job openings, backed by SQLite"
requires-python = ">=3.10"
keywords = ["jobs", "openings", "rest", "api", "flask", "sqlite", "swagger"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
jobopenings = "jobopenings.router:main"

[tool.hatch.build.targets.wheel]
packages = ["jobopenings"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
