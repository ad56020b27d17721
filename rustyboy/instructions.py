"""Arithmetic instructions operating on the register file."""

from __future__ import annotations

from rustyboy.flags import C_FLAG
from rustyboy.register import Registers


def _add_with_carry(registers: Registers, value: int, carry: int) -> None:
    a = registers.a & 0xFF
    value &= 0xFF
    total = a + value + carry
    result = total & 0xFF
    half = (a & 0xF) + (value & 0xF) + carry > 0xF
    registers.f.set_flags(total > 0xFF, False, half, result == 0)
    registers.a = result


def adc_a_r8(registers: Registers, r8: int) -> None:
    """A <- A + r8 + carry, updating C, N, H and Z."""
    carry = 1 if registers.f.get_flag(C_FLAG) else 0
    _add_with_carry(registers, r8, carry)


def add_a_hl(registers: Registers) -> None:
    """A <- A + [HL] + carry, updating C, N, H and Z.

    The register file has no memory bus attached, so the byte at HL reads as 0x00.
    """
    _ = registers.hl
    carry = 1 if registers.f.get_flag(C_FLAG) else 0
    _add_with_carry(registers, 0x00, carry)


def add_a_r8(registers: Registers, r8: int) -> None:
    """A <- A + r8, updating C, N, H and Z."""
    _add_with_carry(registers, r8, 0)