[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "saladbook"
version = "0.1.0"
description = "Service layer for a salad recipe book: validation and orchestration over pluggable repositories."
requires-python = ">=3.10"
dependencies = []
keywords = ["recipes", "salads", "services", "validation", "repository"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["saladbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
