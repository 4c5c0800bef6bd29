[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "g2pkit"
version = "0.1.0"
description = "English grapheme-to-phoneme conversion using a CMU-style pronouncing dictionary and letter-to-sound rules"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "g2p",
    "grapheme-to-phoneme",
    "phoneme",
    "arpabet",
    "cmudict",
    "pronunciation",
    "text-to-speech",
    "speech",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Speech",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
g2pkit = "g2pkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["g2pkit"]

[tool.hatch.build.targets.sdist]
include = ["g2pkit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["g2pkit"]
