[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "missile-commander"
version = "0.1.0"
description = "A small missile-defence arcade game: shoot down incoming missiles before they flatten the city."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "missile command", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
missile-commander = "missile_commander.app:main"

[tool.hatch.build.targets.wheel]
packages = ["missile_commander"]

[tool.pytest.ini_options]
addopts = "-ra"
