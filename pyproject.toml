[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phonybooker"
version = "0.1.0"
description = "A tiny interactive terminal phonebook and a megaphone that shouts its arguments."
requires-python = ">=3.10"
keywords = ["phonebook", "contacts", "cli", "megaphone"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
phonybooker = "phonybooker.cli:main"
megaphone = "phonybooker.megaphone:main"

[tool.hatch.build.targets.wheel]
packages = ["phonybooker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
