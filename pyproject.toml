[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "p256curve"
version = "0.1.0"
description = "Pure Python arithmetic on the NIST P-256 (secp256r1) elliptic curve, with SEC1 point encoding and hash-to-curve"
requires-python = ">=3.10"
dependencies = []
keywords = ["p256", "secp256r1", "elliptic-curve", "ecc", "hash-to-curve", "sec1"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["p256curve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
