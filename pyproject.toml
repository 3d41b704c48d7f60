[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lottiescene"
version = "0.6.0"
description = "Lottie import helpers, gradient stops, touch gestures, scene file discovery and a downloader for sample animations."
requires-python = ">=3.10"
keywords = ["lottie", "animation", "vector-graphics", "gradients", "keyframes", "2d"]
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
    "Topic :: Multimedia :: Graphics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lottiescene = "lottiescene.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lottiescene"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
