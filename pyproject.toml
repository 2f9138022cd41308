[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frogroute"
version = "0.1.0"
description = "Multi-depot vehicle routing building blocks: clusters, Clarke-Wright savings routes and frog-leap solution decoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["vrp", "mdvrp", "routing", "clarke-wright", "savings", "optimization", "heuristics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["frogroute"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
