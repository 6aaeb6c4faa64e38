[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cantusfirmus"
version = "0.1.0"
description = "Generate cantus firmi in strict contrapuntal style and save them as MusicXML"
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "counterpoint", "cantus firmus", "musicxml", "composition", "modes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Artistic Software",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cantusfirmus = "cantusfirmus.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cantusfirmus"]

[tool.pytest.ini_options]
addopts = "-ra"
