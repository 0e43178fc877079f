[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfl"
version = "0.1.0"
description = "Common data structures: variants, key/value lists, string splitting and CRC-32C checksums"
requires-python = ">=3.10"
dependencies = []
keywords = ["variant", "kvlist", "crc32c", "split", "data structures"]
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
packages = ["cfl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
