[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "interview-riddles"
version = "0.1.0"
description = "Solutions to classic coding-interview riddles: strings, matrices, lists, stacks, expressions and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["interview", "algorithms", "riddles", "data-structures", "puzzles"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
reverse-list-bench = "interview_riddles.reverse_list:main"

[tool.hatch.build.targets.wheel]
packages = ["interview_riddles"]

[tool.pytest.ini_options]
addopts = "-ra"
