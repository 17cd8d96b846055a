[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "partisim"
version = "0.1.0"
description = "A small particle and rigid-body physics sandbox with force generators, particle systems and a first-person game scene."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "physics",
    "particles",
    "simulation",
    "force generators",
    "springs",
    "buoyancy",
    "rigid bodies",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
partisim = "partisim.scene:main"

[tool.hatch.build.targets.wheel]
packages = ["partisim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
