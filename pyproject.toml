[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "utilkit"
version = "0.1.0"
description = "Small, dependency-free helpers: query-string parsing, layered config files, thread-safe counters and maps, stream copying, SQLite transactions and struct source generation."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "query-string",
    "configuration",
    "thread-safe",
    "counter",
    "sqlite",
    "transactions",
    "code-generation",
]
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

[project.scripts]
utilkit-params = "utilkit.params:main"
utilkit-config = "utilkit.config_loader:main"
utilkit-copy = "utilkit.streams:main"
utilkit-structgen = "utilkit.structgen:main"

[tool.hatch.build.targets.wheel]
packages = ["utilkit"]

[tool.hatch.build.targets.sdist]
include = ["utilkit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
