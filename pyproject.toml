[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fairkit"
version = "0.1.0"
description = "FAIR metadata models (core record, DataCite) and Handle System protocol field codecs"
requires-python = ">=3.10"
dependencies = [
    "python-dateutil",
]
keywords = [
    "fair",
    "metadata",
    "datacite",
    "handle-system",
    "persistent-identifiers",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fairkit"]

[tool.hatch.build.targets.sdist]
include = [
    "fairkit",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
