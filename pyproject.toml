[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "txparser"
version = "0.1.0"
description = "Watch Ethereum addresses and serve their inbound and outbound transactions over HTTP"
requires-python = ">=3.10"
dependencies = []
keywords = ["ethereum", "evm", "transactions", "json-rpc", "blockchain", "wsgi"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["txparser"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
