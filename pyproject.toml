[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustyboy"
version = "0.1.0"
description = "The beginnings of a Game Boy emulator: CPU registers and flags, ALU instructions, opcode field decoding, work RAM and cartridge ROM loading"
requires-python = ">=3.10"
dependencies = []
keywords = ["gameboy", "emulator", "sm83", "lr35902", "rom"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rustyboy = "rustyboy.gameboy:main"

[tool.hatch.build.targets.wheel]
packages = ["rustyboy"]

[tool.pytest.ini_options]
addopts = "-ra"
