[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cipkit"
version = "0.1.0"
description = "CIP building blocks: application path (EPATH) encoding, status codes, Ethernet Link and TCP/IP Interface objects"
requires-python = ">=3.10"
dependencies = []
keywords = ["cip", "ethernet/ip", "epath", "industrial", "fieldbus"]
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
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cipkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
