[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "axion"
version = "0.1.0"
description = "A small 2D physics scene editor with a hierarchy, an inspector and a pannable, zoomable camera"
requires-python = ">=3.10"
keywords = ["physics", "2d", "scene", "editor", "collider", "pygame"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
axion = "axion.app:main"

[tool.hatch.build.targets.wheel]
packages = ["axion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
