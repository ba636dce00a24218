[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plcdsl"
version = "0.1.0"
description = "Syntax tree elements for IEC 61131-3 programs: literals, types, variables, statements and diagnostics"
requires-python = ">=3.10"
dependencies = []
keywords = ["iec-61131-3", "plc", "structured-text", "ast", "compiler"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["plcdsl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
