[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hokg"
version = "0.1.0"
description = "Hensel-Optimized Key Generation (HOKG) for data-efficient elliptic curve cryptography"
requires-python = ">=3.10"
dependencies = []
keywords = ["cryptography", "elliptic-curve", "hensel", "ecc", "data-efficiency"]
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

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
hokg = "hokg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hokg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
