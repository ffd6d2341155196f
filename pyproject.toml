[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spaceman"
version = "0.1.0"
description = "Disk usage analyser that draws a directory tree as an interactive treemap"
requires-python = ">=3.10"
keywords = ["disk usage", "treemap", "filesystem", "du", "space", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.gui-scripts]
spaceman = "spaceman.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spaceman"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
