[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wasmpack"
version = "0.8.1"
description = "Tool management and wasm-bindgen driving for Rust-generated WebAssembly packages"
requires-python = ">=3.10"
keywords = ["wasm", "webassembly", "wasm-bindgen", "cargo-generate", "cargo", "build"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]
dependencies = [
    "platformdirs",
    "semver",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wasmpack-new = "wasmpack.generate:main"

[tool.hatch.build.targets.wheel]
packages = ["wasmpack"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
