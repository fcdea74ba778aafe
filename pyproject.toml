[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pizzaria"
version = "0.1.0"
description = "Interactive pizza ordering with delivery or pickup pricing and a printed receipt"
requires-python = ">=3.10"
dependencies = []
keywords = ["pizza", "order", "receipt", "point-of-sale", "delivery"]
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
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pizzaria = "pizzaria.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pizzaria"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
