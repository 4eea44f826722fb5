[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslab"
version = "0.1.0"
description = "Operating-systems teaching tools: disk scheduling, paging and TLB simulation, threads, processes and a tiny shell"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "disk scheduling",
    "virtual memory",
    "tlb",
    "paging",
    "threads",
    "semaphores",
    "shell",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
oslab-disksched = "oslab.disksched:main"
oslab-fileinfo = "oslab.fileinfo:main"
oslab-intsum = "oslab.intsum:main"
oslab-translate = "oslab.translate:main"
oslab-vmm = "oslab.vmm:main"
oslab-pagesim = "oslab.pagesim:main"
oslab-tasim = "oslab.tasim:main"
oslab-threadsum = "oslab.threadsum:main"
oslab-shell = "oslab.shell:main"
oslab-forktree = "oslab.forktree:main"
oslab-bank = "oslab.bank:main"
oslab-bank-bounded = "oslab.bank:main_bounded"

[tool.hatch.build.targets.wheel]
packages = ["oslab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
