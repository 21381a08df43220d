[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "supabase_rest"
version = "0.4.15"
description = "Lightweight async client for Supabase REST tables and public storage"
requires-python = ">=3.10"
dependencies = [
    "httpx",
]
keywords = ["supabase", "postgrest", "rest", "database", "client", "async"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Operating System :: OS Independent",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["supabase_rest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
