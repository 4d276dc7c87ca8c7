[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "corekit"
version = "0.1.0"
description = "Small building blocks: value formatting and salted hashing, list and mapping helpers, set operations, a random stream, stream merging, a wait group and a cube pipeline."
requires-python = ">=3.10"
dependencies = []
keywords = ["sha256", "lists", "intersection", "difference", "merge", "waitgroup", "pipeline", "generator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
corekit-hash = "corekit.hashing:main"
corekit-slices = "corekit.slices:main"
corekit-map = "corekit.stringintmap:main"
corekit-difference = "corekit.difference:main"
corekit-intersection = "corekit.intersection:main"
corekit-random = "corekit.randomgen:main"
corekit-merge = "corekit.merge:main"
corekit-waitgroup = "corekit.waitgroup:main"
corekit-pipeline = "corekit.pipeline:main"

[tool.hatch.build.targets.wheel]
packages = ["corekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
