[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "midiworks"
version = "1.0.0"
description = "Editing model and piano-roll geometry for a MIDI sequencer: notes, selection, clipboard, undo/redo, grid snapping, viewport mapping and velocity editing."
requires-python = ">=3.10"
dependencies = []
keywords = ["midi", "sequencer", "piano-roll", "undo", "quantize", "grid"]
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
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["midiworks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
