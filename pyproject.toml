[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evmbuiltins"
version = "0.1.0"
description = "BLAKE2b F compression, alt_bn128 curve arithmetic, gas pricing for Ethereum precompiles and lenient JSON hex parsing"
requires-python = ">=3.10"
keywords = ["ethereum", "evm", "precompile", "blake2", "eip-152", "modexp", "bn128", "gas"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["evmbuiltins"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
