[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frogkit"
version = "2.6.1"
description = "Small POSIX helpers: string utilities, file and /proc value access, a local rsync, which, process launching, telnet expect scripts and terminal progress bars"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "posix",
    "utilities",
    "rsync",
    "which",
    "strtonum",
    "strlcpy",
    "telnet",
    "expect",
    "progress",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["frogkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
