[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "selfcheckout"
version = "0.1.0"
description = "A self-checkout machine model: product lookup, cart, cash and card payment, and a change repository."
requires-python = ">=3.10"
dependencies = []
keywords = ["point-of-sale", "self-checkout", "cart", "change", "retail"]
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
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["selfcheckout"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
