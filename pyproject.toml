[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "odtwriter"
version = "0.1.0"
description = "Build OpenDocument Text (.odt) files with styled paragraphs, images and tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["odt", "opendocument", "odf", "document", "office", "writer"]
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
    "Topic :: Office/Business :: Office Suites",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["odtwriter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
