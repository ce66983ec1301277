[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternprint"
version = "0.1.0"
description = "Print star, number and letter patterns: rectangles, triangles and their variations."
requires-python = ">=3.10"
dependencies = []
keywords = ["patterns", "ascii-art", "triangles", "education", "exercises"]
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
patternprint = "patternprint.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["patternprint"]

[tool.pytest.ini_options]
addopts = "-ra"
