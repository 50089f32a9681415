[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minitools"
version = "0.1.0"
description = "Small command-line tools: echo, duplicate lines, URL fetching, unit conversion, bit counting, text helpers, tiny HTTP servers and generated graphics"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "cli",
    "utilities",
    "unit-conversion",
    "popcount",
    "lissajous",
    "mandelbrot",
    "svg",
    "http-server",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mt-hello = "minitools.text:hello_main"
mt-echo = "minitools.text:echo_main"
mt-args = "minitools.text:args_main"
mt-basename = "minitools.text:basename_main"
mt-comma = "minitools.text:comma_main"
mt-anagram = "minitools.text:anagram_main"
mt-popcount = "minitools.popcount:main"
mt-netflag = "minitools.netflag:main"
mt-cf = "minitools.units:cf_main"
mt-convert = "minitools.units:convert_main"
mt-boiling = "minitools.units:boiling_main"
mt-ftoc = "minitools.units:ftoc_main"
mt-kelvin = "minitools.units:kelvin_main"
mt-bytesize = "minitools.units:bytesize_main"
mt-dup = "minitools.dup:main"
mt-fetch = "minitools.fetch:fetch_main"
mt-fetchall = "minitools.fetch:fetchall_main"
mt-lissajous = "minitools.lissajous:main"
mt-mandelbrot = "minitools.mandelbrot:main"
mt-surface = "minitools.surface:main"
mt-server = "minitools.server:main"

[tool.hatch.build.targets.wheel]
packages = ["minitools"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
