[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "homun"
version = "0.88.0"
description = "Runtime helpers and compiler support utilities for the Homun language toolchain"
requires-python = ">=3.10"
dependencies = []
keywords = ["homun", "compiler", "runtime", "lexer", "codegen", "stdlib"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["homun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
