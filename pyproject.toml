[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "runtime-recipes"
version = "3.0.0"
description = "In-memory blockchain runtime modules: tokens, charity pot, interest accounts, membership checks and a SHA3 proof of work"
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "runtime", "proof-of-work", "sha3", "pallet", "fixed-point"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["runtime_recipes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
