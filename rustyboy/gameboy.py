"""The machine as a whole and its command-line entry point."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from dataclasses import dataclass, field

from rustyboy.cpu import CPU
from rustyboy.memory_bus import MemoryBus

DEFAULT_ROM = "cpu_instrs/cpu_instrs.gb"


@dataclass
class Gameboy:
    """A CPU attached to a memory bus."""

    cpu: CPU = field(default_factory=CPU)
    memory_bus: MemoryBus = field(default_factory=MemoryBus)

    def start(self, path: str | os.PathLike[str]) -> None:
        """Load the cartridge at path and report the outcome."""
        print("ROM read result: ", end="")
        try:
            self.memory_bus.rom.read(path)
        except OSError as exc:
            print(f"Error: {exc}")
        else:
            print("Success")


def main(argv: Sequence[str] | None = None) -> int:
    """Load a ROM and dump bank 1 as hex, 16 bytes per line."""
    parser = argparse.ArgumentParser(prog="rustyboy")
    parser.add_argument("rom", nargs="?", default=DEFAULT_ROM, help="ROM file to load")
    args = parser.parse_args(argv)

    gameboy = Gameboy()
    gameboy.start(args.rom)
    bank = gameboy.memory_bus.rom.bank1
    for start in range(0, len(bank), 16):
        print("".join(f"{byte:02X} " for byte in bank[start:start + 16]))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())