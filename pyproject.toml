[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "articlesfeed"
version = "0.1.0"
description = "A small HTTP service for publishing articles and browsing them as a paginated, searchable feed."
requires-python = ">=3.10"
keywords = ["articles", "feed", "rest", "api", "http", "flask", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
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
articlesfeed = "articlesfeed.app:main"

[tool.hatch.build.targets.wheel]
packages = ["articlesfeed"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
