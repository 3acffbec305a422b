[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyhttp"
version = "0.1.0"
description = "A minimal HTTP/1.1 request parser, response writer and server, with small network tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "parser", "tcp", "udp"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinyhttp-server = "tinyhttp.httpserver:main"
tinyhttp-tcplistener = "tinyhttp.tcplistener:main"
tinyhttp-udpsender = "tinyhttp.udpsender:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyhttp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
