[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractscope"
version = "0.1.0"
description = "Interactive Mandelbrot, Julia and magnet fractal explorer with an XPM reader and small text helpers"
requires-python = ">=3.10"
keywords = ["fractal", "mandelbrot", "julia", "magnet", "xpm", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fractscope = "fractscope.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fractscope"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
