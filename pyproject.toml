[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "id3tag"
version = "2.0.0"
description = "Read and write ID3v2.3 and ID3v2.4 tags in audio files"
requires-python = ">=3.10"
dependencies = []
keywords = ["id3", "id3v2", "mp3", "tags", "metadata", "audio"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["id3tag"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
