[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bendyscene"
version = "0.1.0"
description = "Scene model for a posable cartoon character: BMP and OBJ/MTL loading, pose controls and scene geometry"
requires-python = ">=3.10"
dependencies = []
keywords = ["obj", "mtl", "bmp", "wavefront", "3d", "pose", "matrix"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bendyscene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
