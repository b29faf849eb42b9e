[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "imobiliaria"
version = "1.0.0"
description = "Interactive real-estate listing manager backed by a plain-text database file"
requires-python = ">=3.10"
dependencies = []
keywords = ["real estate", "property", "listings", "statistics", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
imobiliaria = "imobiliaria.cli:main"

[tool.setuptools.packages.find]
include = ["imobiliaria*"]

[tool.pytest.ini_options]
addopts = "-ra"
