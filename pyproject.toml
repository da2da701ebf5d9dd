[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tip5hash"
version = "0.1.0"
description = "The Tip5 arithmetization-oriented hash function over the field of order 2^64 - 2^32 + 1"
requires-python = ">=3.10"
dependencies = []
keywords = ["tip5", "hash", "sponge", "goldilocks", "finite-field", "zero-knowledge"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["tip5hash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
