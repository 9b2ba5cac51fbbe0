[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estructuras"
version = "0.1.0"
description = "Classic data structures and algorithms: linked lists, stacks, queues, sorting, search trees and hash tables, with small catalog and menu tools."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "linked list",
    "stack",
    "queue",
    "sorting",
    "binary search tree",
    "avl",
    "hash table",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
estructuras-monsters = "estructuras.monsters:main"
estructuras-colors = "estructuras.colors:main"
estructuras-exam = "estructuras.exam_loader:main"
estructuras-menus = "estructuras.menus:main"

[tool.hatch.build.targets.wheel]
packages = ["estructuras"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
