[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "apcalc"
version = "0.1.0"
description = "Arbitrary precision integer calculator working digit by digit"
requires-python = ">=3.10"
dependencies = []
keywords = ["arbitrary precision", "bignum", "calculator", "arithmetic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
apcalc = "apcalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["apcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
