[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "supertrunfo"
version = "1.0.0"
description = "A two-card Super Trunfo city comparison game played at the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["super trunfo", "card game", "cities", "terminal game"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
supertrunfo-novato = "supertrunfo.novice:main"
supertrunfo-aventureiro = "supertrunfo.adventurer:main"
supertrunfo-mestre = "supertrunfo.master:main"

[tool.hatch.build.targets.wheel]
packages = ["supertrunfo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
