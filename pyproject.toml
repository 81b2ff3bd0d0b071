[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alpinetransform"
version = "0.1.0"
description = "Building blocks for turning template syntax trees into Alpine.js-ready HTML node trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["alpinejs", "templates", "html", "ast", "javascript"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: HTML",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["alpinetransform"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
