[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "receiptpoints"
version = "0.1.0"
description = "A small HTTP service that scores shopping receipts and serves their points by ID"
requires-python = ">=3.10"
keywords = ["receipts", "points", "rewards", "http", "api", "flask"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
receiptpoints = "receiptpoints.app:main"

[tool.hatch.build.targets.wheel]
packages = ["receiptpoints"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
