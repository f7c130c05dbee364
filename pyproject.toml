[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "helve"
version = "0.1.0"
description = "Propositional formula machinery (CNF, Horn, MODS) for checking unsolvability certificates of planning tasks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "planning",
    "unsolvability",
    "certificate",
    "proof checking",
    "cnf",
    "horn",
    "unit propagation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["helve"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
