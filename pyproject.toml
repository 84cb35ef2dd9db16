[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toybox"
version = "0.1.0"
description = "Small self-contained programs: an interactive todo list, a cons list, optional chaining and error propagation, asyncio concurrency patterns and a Bitcoin address balance lookup."
requires-python = ">=3.10"
keywords = ["todo", "cons-list", "asyncio", "examples", "bitcoin", "command-line"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "httpx>=0.24",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "pytest-asyncio>=0.21",
    "respx>=0.20",
]

[project.scripts]
toybox-todos = "toybox.todos:main"
toybox-cons-list = "toybox.cons_list:main"
toybox-platform = "toybox.platform_check:main"
toybox-chaining = "toybox.chaining:main"
toybox-concurrency = "toybox.concurrency:main"
toybox-balance = "toybox.balance:main"

[tool.hatch.build.targets.wheel]
packages = ["toybox"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
