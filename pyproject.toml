[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslab"
version = "0.1.0"
description = "Classic operating-system algorithms: CPU and disk scheduling, deadlock avoidance and detection, memory placement, page replacement, file allocation, shared memory and small system-call helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating-systems",
    "cpu-scheduling",
    "disk-scheduling",
    "bankers-algorithm",
    "deadlock",
    "page-replacement",
    "memory-allocation",
    "file-allocation",
    "shared-memory",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oslab-semaphore = "oslab.semaphore:main"

[tool.hatch.build.targets.wheel]
packages = ["oslab"]

[tool.pytest.ini_options]
addopts = "-ra"
