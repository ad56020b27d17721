"""Cartridge ROM with two 16 KiB banks."""

from __future__ import annotations

import os

BANK_SIZE = 0x4000
ROM_SIZE = 2 * BANK_SIZE


class ROM:
    """The fixed bank 0 and the switchable bank 1 of a cartridge."""

    def __init__(self) -> None:
        self.bank0 = bytearray(BANK_SIZE)
        self.bank1 = bytearray(BANK_SIZE)

    def read(self, path: str | os.PathLike[str]) -> None:
        """Load up to 32 KiB from a file into the two banks.

        Bank 0 is overwritten entirely (zero padded); bank 1 only receives
        the bytes the file provides beyond the first 16 KiB.
        """
        with open(path, "rb") as fh:
            data = fh.read(ROM_SIZE)
        self.bank0[:] = data[:BANK_SIZE].ljust(BANK_SIZE, b"\x00")
        tail = data[BANK_SIZE:]
        self.bank1[: len(tail)] = tail