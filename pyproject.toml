[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "llmquota"
version = "0.1.0"
description = "Track LLM usage-quota windows: burn-rate trends, exhaustion forecasts, sparklines and terminal dashboard building blocks."
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["llm", "quota", "usage", "forecast", "sparkline", "terminal", "dashboard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["llmquota"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
