[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carcinusdb"
version = "0.1.0"
description = "Early-stage SQL database engine: page layouts, a locked-file pager and a command-line entry point"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "sql", "pager", "storage", "btree", "pages"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[project.scripts]
carcinusdb = "carcinusdb.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["carcinusdb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
