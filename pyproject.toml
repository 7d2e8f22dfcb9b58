[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deroid"
version = "0.1.0"
description = "ASN.1 object identifiers (OIDs): build, encode and decode their DER form"
requires-python = ">=3.10"
dependencies = []
keywords = ["asn1", "der", "ber", "oid", "object-identifier", "x509"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["deroid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
