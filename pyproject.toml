[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqlitecentral"
version = "0.1.0"
description = "Table definitions and queries for a centralized SQLite store of people, contacts, sessions, signups, roles, TOTP settings and rate limits."
requires-python = ">=3.10"
dependencies = []
keywords = ["sqlite", "sessions", "rate-limiting", "accounts", "signups", "roles", "totp"]
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
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sqlitecentral = "sqlitecentral.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sqlitecentral"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
