"""Addressable RAM regions."""

from __future__ import annotations

from abc import ABC, abstractmethod

WRAM_BANK_SIZE = 0x1000


class InvalidAddressError(Exception):
    """Raised when a memory access falls outside a region."""

    def __init__(self, address: int) -> None:
        super().__init__(f"Invalid address: {address:#06x}")
        self.address = address


class RAM(ABC):
    """A memory region that can be read and written byte by byte."""

    @abstractmethod
    def read(self, address: int) -> int:
        """Return the byte at the address."""

    @abstractmethod
    def write(self, address: int, value: int) -> None:
        """Store a byte at the address."""


class WRAM(RAM):
    """Work RAM mapped at 0xC000-0xDFFF.

    Both halves of the address range are backed by the first bank.
    """

    def __init__(self) -> None:
        self.w1 = bytearray(WRAM_BANK_SIZE)
        self.w2 = bytearray(WRAM_BANK_SIZE)

    def _offset(self, address: int) -> int:
        if 0xC000 <= address <= 0xCFFF:
            return address - 0xC000
        if 0xD000 <= address <= 0xDFFF:
            return address - 0xD000
        raise InvalidAddressError(address)

    def read(self, address: int) -> int:
        return self.w1[self._offset(address)]

    def write(self, address: int, value: int) -> None:
        self.w1[self._offset(address)] = value


class VRAM:
    """Video RAM; holds no storage yet."""