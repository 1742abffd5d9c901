[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustdrill"
version = "5.2.1"
description = "Terminal styling, rust-analyzer project generation and worked exercise solutions for learning Rust"
requires-python = ">=3.11"
dependencies = []
keywords = ["rust", "exercises", "learning", "education", "rust-analyzer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rustdrill"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
