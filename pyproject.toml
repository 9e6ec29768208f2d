[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "disjointsets"
version = "0.1.0"
description = "Disjoint-set (union-find) structures and the classic offline algorithms built on them"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "union-find",
    "disjoint-set",
    "dsu",
    "weighted union-find",
    "offline minimum",
    "lowest common ancestor",
    "tarjan",
    "algorithms",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
disjointsets-union-find = "disjointsets.dsu:main"
disjointsets-weighted = "disjointsets.weighted:main"
disjointsets-lca = "disjointsets.lca:main"

[tool.hatch.build.targets.wheel]
packages = ["disjointsets"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
