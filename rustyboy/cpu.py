"""The CPU state and opcode decoding."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from rustyboy.register import Registers


class DecodedOpcode(NamedTuple):
    """Bit fields of an opcode: x (bits 7-6), y (bits 5-3), z (bits 2-0)."""

    x: int
    y: int
    z: int


@dataclass
class CPU:
    """Program counter, stack pointer and register file."""

    pc: int = 0x00
    sp: int = 0x00
    registers: Registers = field(default_factory=Registers)

    @staticmethod
    def decode(opcode: int) -> DecodedOpcode:
        """Split an opcode into its x, y and z fields."""
        return DecodedOpcode(
            x=(opcode & 0b1100_0000) >> 6,
            y=(opcode & 0b0011_1000) >> 3,
            z=opcode & 0b0000_0111,
        )