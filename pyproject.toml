[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libros-api"
version = "1.0.0"
description = "A small JSON HTTP API for managing an in-memory catalogue of books"
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["books", "rest", "api", "crud", "flask", "swagger"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
libros-api = "libros_api.app:main"

[tool.hatch.build.targets.wheel]
packages = ["libros_api"]

[tool.pytest.ini_options]
addopts = "-ra"
