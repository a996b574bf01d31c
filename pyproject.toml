[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scheduleit"
version = "0.1.0"
description = "In-process job scheduler with delayed execution, retry strategies and a worker thread pool"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduler", "jobs", "retry", "backoff", "thread pool"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
scheduleit = "scheduleit.cli:main"
scheduleit-benchmark = "scheduleit.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["scheduleit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
