[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustedos"
version = "0.1.0"
description = "A simulated teaching kernel: Sv39 paging, frame and buddy heap allocation, ELF decoding, MLFQ scheduling, text filters and shell command-line parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["kernel", "paging", "sv39", "buddy-allocator", "scheduler", "elf", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System Kernels",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rustedos"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
