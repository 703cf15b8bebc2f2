[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "whirkit"
version = "0.1.0"
description = "Finite fields, NTTs, multilinear polynomials and Keccak Merkle hashing for WHIR-style proof systems"
requires-python = ">=3.10"
keywords = [
    "finite-field",
    "ntt",
    "multilinear",
    "polynomial",
    "merkle",
    "keccak",
    "reed-solomon",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["whirkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
