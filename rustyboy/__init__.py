"""Early Game Boy emulator core: registers, flags, ALU instructions, opcode decoding, work RAM and ROM loading."""

__version__ = "0.1.0"