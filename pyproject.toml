[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gbemu"
version = "0.1.0"
description = "Game Boy style memory bus and LCD model, with two console falling-block games"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "gameboy", "lcd", "memory", "tetris", "console", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gbemu-tetris = "gbemu.tetris_app:main"
gbemu-quantum-tetris = "gbemu.quantum_app:main"

[tool.hatch.build.targets.wheel]
packages = ["gbemu"]

[tool.pytest.ini_options]
addopts = "-ra"
