[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "entropycore"
version = "0.1.0"
description = "Core utilities: MurmurHash2 string hashing, strong aliases, type names and identifiers, runtime type checks and levelled logging streams"
requires-python = ">=3.10"
dependencies = []
keywords = ["hashing", "murmurhash2", "type-id", "strong-alias", "logging", "type-traits"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["entropycore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
