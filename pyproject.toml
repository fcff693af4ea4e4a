[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wasmkit"
version = "0.1.0"
description = "Resolve and download Substrate WASM runtimes from files, URLs and release references, with known chain endpoints and runtime report formatting"
requires-python = ">=3.10"
keywords = ["substrate", "wasm", "runtime", "metadata", "polkadot", "kusama"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
]
dependencies = [
    "semver>=3.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
wasmkit = "wasmkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wasmkit"]

[tool.hatch.build.targets.sdist]
include = ["wasmkit", "tests", "README.md", "pyproject.toml"]

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
warn_redundant_casts = true
