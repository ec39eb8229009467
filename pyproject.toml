[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rushsprites"
version = "1.0.0"
description = "Read, pack and play sprite animations stored in Diamond Rush chunk files"
requires-python = ">=3.10"
keywords = ["sprite", "animation", "palette", "chunk", "diamond-rush", "viewer", "png"]
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
    "Topic :: Multimedia :: Graphics :: Viewers",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
animation-player = "rushsprites.player:main"
packer = "rushsprites.packer:main"

[tool.hatch.build.targets.wheel]
packages = ["rushsprites"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
