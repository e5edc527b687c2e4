[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kvclient"
version = "0.1.0"
description = "Client-side building blocks for a distributed key-value store: keys, ranges, memcomparable codec, backoff, retry and an in-memory raw store."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "key-value",
    "database",
    "client",
    "backoff",
    "retry",
    "memcomparable",
    "codec",
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
    "Topic :: Database :: Front-Ends",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["kvclient"]

[tool.hatch.build.targets.sdist]
include = ["kvclient", "tests"]

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
warn_redundant_casts = true
