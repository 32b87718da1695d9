[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eipscan"
version = "0.1.0"
description = "EtherNet/IP encapsulation and common packet format primitives with TCP and UDP transports"
requires-python = ">=3.10"
dependencies = []
keywords = ["ethernet/ip", "eip", "cip", "industrial", "encapsulation", "plc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eipscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
