[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "barstat"
version = "0.1.0"
description = "Status line generator that reports system information at a fixed interval"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["status", "statusbar", "monitoring", "window-manager", "system-info", "x11"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
barstat = "barstat.status:main"

[tool.hatch.build.targets.wheel]
packages = ["barstat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
