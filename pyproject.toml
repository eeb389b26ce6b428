[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qedcrypt"
version = "0.1.0"
description = "Cube-based scrambling cipher primitives over arbitrary-precision integers"
requires-python = ">=3.10"
dependencies = []
keywords = ["cipher", "permutation", "cube", "key-derivation", "big-integer"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
test = ["pytest"]

[project.scripts]
qedcrypt = "qedcrypt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["qedcrypt"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"
