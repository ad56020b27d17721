"""The memory bus joining ROM and RAM regions."""

from __future__ import annotations

from dataclasses import dataclass, field

from rustyboy.ram import VRAM, WRAM
from rustyboy.rom import ROM


@dataclass
class MemoryBus:
    """Cartridge ROM, work RAM and video RAM."""

    rom: ROM = field(default_factory=ROM)
    w_ram: WRAM = field(default_factory=WRAM)
    v_ram: VRAM = field(default_factory=VRAM)