[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortviz"
version = "0.1.0"
description = "Watch and hear classic sorting algorithms at work, one step at a time"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["sorting", "algorithms", "visualization", "sonification", "education", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sortviz = "sortviz.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sortviz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
