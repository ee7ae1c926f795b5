[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xamlkit"
version = "0.1.0"
description = "Compile XAML page descriptions into C++ class headers, with a layout and event model for XAML elements"
requires-python = ">=3.10"
dependencies = []
keywords = ["xaml", "ui", "layout", "code-generation", "compiler", "events", "animation"]
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
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xamlkit = "xamlkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["xamlkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
