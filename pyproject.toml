[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ossim"
version = "0.1.0"
description = "Small simulators for classic CPU scheduling and page replacement algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "cpu scheduling",
    "fcfs",
    "sjf",
    "round robin",
    "priority scheduling",
    "page replacement",
    "fifo",
    "lru",
    "optimal",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
ossim = "ossim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ossim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
