"""The CPU register file."""

from __future__ import annotations

from dataclasses import dataclass, field

from rustyboy.flags import Flags


@dataclass
class Registers:
    """The 8-bit registers A, B, C, D, E, H, L and the flag register F."""

    a: int = 0x00
    b: int = 0x00
    c: int = 0x00
    d: int = 0x00
    e: int = 0x00
    f: Flags = field(default_factory=Flags)
    h: int = 0x00
    l: int = 0x00

    @property
    def hl(self) -> int:
        """The 16-bit register pair HL."""
        return ((self.h & 0xFF) << 8) | (self.l & 0xFF)