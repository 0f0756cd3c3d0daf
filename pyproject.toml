[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "huaweiwall"
version = "0.1.0"
description = "Game states, text-slot tracking, local configuration and HTTP entry handling for an interactive display wall"
requires-python = ">=3.10"
dependencies = []
keywords = ["interactive", "installation", "state-machine", "display-wall"]
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
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["huaweiwall"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
