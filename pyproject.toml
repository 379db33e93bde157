[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structkit"
version = "0.1.0"
description = "Linked lists, queues and a bounded stack, with small demo commands and a bubble-sort benchmark."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked list",
    "doubly linked list",
    "queue",
    "circular queue",
    "priority queue",
    "stack",
    "data structures",
    "bubble sort",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structkit-benchmark = "structkit.benchmark:main"
structkit-circular-queue = "structkit.circular_queue:main"
structkit-priority-queue = "structkit.priority_queue:main"
structkit-fifo-queue = "structkit.fifo_queue:main"
structkit-stack = "structkit.stack:main"

[tool.hatch.build.targets.wheel]
packages = ["structkit"]

[tool.hatch.build.targets.sdist]
include = ["structkit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
disallow_untyped_defs = true
