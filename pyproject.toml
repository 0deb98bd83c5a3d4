[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chelper"
version = "0.2.29"
description = "Command helper core for Minecraft Bedrock Edition: parse trees, suggestions, structure hints and syntax colouring"
requires-python = ">=3.10"
dependencies = []
keywords = ["minecraft", "bedrock", "commands", "autocomplete", "syntax-highlighting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chelper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
