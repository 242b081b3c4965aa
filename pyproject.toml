[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prefixcalc"
version = "0.1.0"
description = "Parse and evaluate prefix arithmetic expressions, with Graphviz tree dumps"
requires-python = ">=3.10"
dependencies = []
keywords = ["prefix", "expression", "calculator", "parser", "graphviz", "tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
prefixcalc = "prefixcalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["prefixcalc"]

[tool.pytest.ini_options]
addopts = "-ra"
