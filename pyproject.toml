[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "particlelife"
version = "0.1.0"
description = "Particle life simulation with kind-based attraction rules on a wrapping world"
requires-python = ">=3.10"
keywords = ["particle life", "simulation", "artificial life", "emergence", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
particlelife = "particlelife.app:main"

[tool.hatch.build.targets.wheel]
packages = ["particlelife"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
