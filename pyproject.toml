[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dpdrills"
version = "0.1.0"
description = "Solvers for classic greedy and dynamic-programming problems: matching, card buying, gold knapsack, walls, rover loads, order scheduling and renunciation plans"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dynamic-programming",
    "knapsack",
    "greedy",
    "algorithms",
    "competitive-programming",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
dpdrills-matching = "dpdrills.matching:main"
dpdrills-cards = "dpdrills.cards:main"
dpdrills-gold = "dpdrills.gold:main"
dpdrills-walls = "dpdrills.walls:main"
dpdrills-rover = "dpdrills.rover:main"
dpdrills-orders = "dpdrills.orders:main"
dpdrills-asceticism = "dpdrills.asceticism:main"

[tool.hatch.build.targets.wheel]
packages = ["dpdrills"]

[tool.hatch.build.targets.sdist]
include = ["dpdrills", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["dpdrills"]
