[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "bancario"
version = "1.0.0"
description = "Terminal bank account and transaction registry with debit, credit and transfers"
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "accounts", "transactions", "ledger", "terminal"]
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
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bancario = "bancario.menus:main"

[tool.setuptools.packages.find]
include = ["bancario*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
