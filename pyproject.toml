[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moonlander"
version = "1.0.0"
description = "A lunar lander game with procedurally generated terrain and starfields"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "lunar lander", "perlin noise", "procedural generation", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
moonlander = "moonlander.game:main"

[tool.hatch.build.targets.wheel]
packages = ["moonlander"]

[tool.pytest.ini_options]
addopts = "-ra"
