[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "versionfox"
version = "0.5.4"
description = "Building blocks for an SDK version manager: version ordering, archives, shell hooks, shims and tool-version records"
requires-python = ">=3.10"
keywords = ["sdk", "version-manager", "shell", "shims", "tool-versions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]
dependencies = [
    "requests",
    "beautifulsoup4",
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["versionfox"]

[tool.pytest.ini_options]
addopts = "-ra"
