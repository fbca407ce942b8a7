[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "supertrunfo"
version = "1.0.0"
description = "A two-card Super Trunfo city comparison game for the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["super trunfo", "top trumps", "card game", "terminal game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
supertrunfo = "supertrunfo.game:main"

[tool.setuptools.packages.find]
include = ["supertrunfo*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
