[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "llrbtree"
version = "0.1.0"
description = "Left-leaning red-black tree with an interactive shell, text file loading, timing benchmarks and PNG rendering"
requires-python = ">=3.10"
keywords = ["llrb", "red-black tree", "balanced tree", "data structures", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
llrbtree = "llrbtree.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["llrbtree"]

[tool.pytest.ini_options]
addopts = "-ra"
