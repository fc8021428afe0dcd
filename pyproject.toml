[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qstars"
version = "0.24.2"
description = "Bounded integer arithmetic, coin sets, bech32 addresses, key derivation and transfer transaction building for QOS/QSC chains"
requires-python = ">=3.10"
dependencies = [
    "pynacl",
]
keywords = ["blockchain", "coins", "bech32", "ed25519", "transfer", "qos"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
qstars-version = "qstars.version:main"

[tool.hatch.build.targets.wheel]
packages = ["qstars"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
