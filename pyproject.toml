[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparsenc"
version = "0.1.0"
description = "Building blocks for sparse network coding simulations: code parameters, coefficient bit packing, LDPC precode graphs, lossy channel models and loss profiles"
requires-python = ">=3.10"
dependencies = []
keywords = ["network coding", "sparse network codes", "LDPC", "erasure channel", "Gilbert-Elliott", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Networking",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["sparsenc"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
