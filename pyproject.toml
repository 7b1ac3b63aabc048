[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "myshell"
version = "0.1.0"
description = "A small interactive POSIX shell with pipelines, simple redirection, background jobs and persistent history"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "repl", "pipeline", "background-jobs", "command-line"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
myshell = "myshell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["myshell"]

[tool.pytest.ini_options]
addopts = "-ra"
