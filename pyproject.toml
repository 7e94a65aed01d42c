[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "portfolio-service"
version = "0.1.0"
description = "A small in-memory JSON-over-HTTP service that serves and edits portfolio content."
requires-python = ">=3.10"
keywords = ["portfolio", "http", "rest", "flask", "api"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
portfolio-service = "portfolio_service.server:main"

[tool.hatch.build.targets.wheel]
packages = ["portfolio_service"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
