[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wavkit"
version = "0.1.0"
description = "Read and write WAV audio files: PCM, IEEE float, A-law and mu-law samples"
requires-python = ">=3.10"
dependencies = []
keywords = ["wav", "wave", "audio", "riff", "pcm", "g711", "alaw", "mulaw"]
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
    "Topic :: Multimedia :: Sound/Audio :: Conversion",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wavkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
