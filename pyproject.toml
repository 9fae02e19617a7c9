[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ptpublish"
version = "1.0.1"
description = "Checks and logs the arguments of a private-tracker upload; includes a small HTTP client and query-string helpers"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["private-tracker", "publish", "http", "query-string", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
publish-mteam = "ptpublish.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ptpublish"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
