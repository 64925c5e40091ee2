[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aerisfeistel"
version = "0.1.0"
description = "A small 16-round Feistel block cipher with a SHA-256 password-derived key and a file encryption command"
requires-python = ">=3.10"
dependencies = []
keywords = ["feistel", "block cipher", "encryption", "sha256", "key schedule"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aerisfeistel = "aerisfeistel.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aerisfeistel"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
