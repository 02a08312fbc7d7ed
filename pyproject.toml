[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jaegerop"
version = "0.1.0"
description = "Custom-resource model and Kubernetes object builders for Jaeger tracing deployments"
requires-python = ">=3.10"
dependencies = []
keywords = ["jaeger", "kubernetes", "operator", "tracing", "openshift", "custom-resource"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jaegerop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
