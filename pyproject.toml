[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fbgraphsdk"
version = "0.1.0"
description = "Client-side helpers for Graph API calls: results, permissions, paginated queries, URI building and app event logging."
requires-python = ">=3.10"
dependencies = []
keywords = ["graph-api", "sdk", "pagination", "permissions", "app-events"]
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
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["fbgraphsdk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
