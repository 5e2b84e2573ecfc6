[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtcbits"
version = "0.1.0"
description = "Audio sample conversion, audio level metering, bit and byte buffers, and string search helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "audio",
    "pcm",
    "bitstream",
    "exp-golomb",
    "byte-buffer",
    "varint",
    "buffer",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rtcbits"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
