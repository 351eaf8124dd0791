[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "depwatch"
version = "0.1.0"
description = "Fetch, parse and process dependency changelogs into digest-ready entries"
requires-python = ">=3.10"
dependencies = []
keywords = ["changelog", "dependencies", "releases", "digest", "github"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["depwatch"]

[tool.pytest.ini_options]
addopts = "-ra"
