"""The flag register (F) of the CPU."""

from __future__ import annotations

C_FLAG = 0b0001_0000
N_FLAG = 0b0010_0000
H_FLAG = 0b0100_0000
Z_FLAG = 0b1000_0000

_VALID_FLAGS = frozenset({C_FLAG, N_FLAG, H_FLAG, Z_FLAG})


def _check_flag(bit: int) -> None:
    if bit not in _VALID_FLAGS:
        raise ValueError(f"Invalid flag bit: {bit:#010b}")


class Flags:
    """Carry, negative, half-carry and zero flags packed into one byte."""

    def __init__(self, bits: int = 0x00) -> None:
        self.bits = bits & 0xFF

    def get_flag(self, bit: int) -> bool:
        """Return whether the given flag is set."""
        _check_flag(bit)
        return bool(self.bits & bit)

    def set_flag(self, set_: bool, bit: int) -> None:
        """Set or clear the given flag."""
        _check_flag(bit)
        if set_:
            self.bits |= bit
        else:
            self.bits &= ~bit & 0xFF

    def set_flags(self, c: bool, n: bool, h: bool, z: bool) -> None:
        """Set all four flags at once."""
        self.set_flag(c, C_FLAG)
        self.set_flag(n, N_FLAG)
        self.set_flag(h, H_FLAG)
        self.set_flag(z, Z_FLAG)

    def __repr__(self) -> str:
        return f"Flags(bits={self.bits:#010b})"