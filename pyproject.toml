[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelfx"
version = "0.1.0"
description = "Per-pixel raster image effects: flips, masks, channel tricks, tiled patterns and sine warps."
requires-python = ">=3.10"
keywords = ["image", "raster", "effects", "filters", "numpy", "pillow"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
    "pillow",
]

[project.scripts]
pixelfx = "pixelfx.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelfx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
