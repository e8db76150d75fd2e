[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mathapp"
version = "0.1.0"
description = "A menu-driven console toolbox of small math utilities and games"
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "education", "calculator", "roman-numerals", "console", "games"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mathapp = "mathapp.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["mathapp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
