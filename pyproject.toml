[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hubsubjects"
version = "0.2.2"
description = "Subject names and subject parsing for a NATS-based variable data hub"
requires-python = ">=3.10"
dependencies = []
keywords = ["nats", "subjects", "data hub", "provider", "registry"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hubsubjects"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
