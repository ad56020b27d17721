# rustyboy

The early stages of a Game Boy emulator. At present it has:

- the CPU register file, `rustyboy.register.Registers`. It holds the 8-bit registers `a`, `b`, `c`, `d`, `e`, `h` and `l`, a read-only `hl` property for the 16-bit pair, and the flag register `f`.
- the flag register, `rustyboy.flags.Flags`, with the flag masks `Z_FLAG`, `N_FLAG`, `H_FLAG` and `C_FLAG`. `get_flag`, `set_flag` and `set_flags` raise `ValueError` for any bit that is not one of these masks.
- 8-bit ALU instructions on the accumulator in `rustyboy.instructions`: `add_a_r8`, `adc_a_r8` and `add_a_hl`. Each one sets the C, H and Z flags and clears N.
- `rustyboy.cpu.CPU`, which holds `pc`, `sp` and `registers`. `CPU.decode(opcode)` splits an opcode into a `DecodedOpcode(x, y, z)`: bits 7–6, 5–3 and 2–0.
- work RAM at `0xC000`–`0xDFFF`, `rustyboy.ram.WRAM`, which implements the abstract `RAM` interface (`read`, `write`). An address outside that range raises `InvalidAddressError`, which carries the `address`.
- cartridge ROM, `rustyboy.rom.ROM`, with two 16 KiB banks. `read(path)` loads up to 32 KiB from a file.
- a `MemoryBus` (`rom`, `w_ram`, `v_ram`) and a `Gameboy` (`cpu`, `memory_bus`) that tie these together.

## Installation

```
pip install .
```

## Command line

```
rustyboy [ROM]
```

This command loads the ROM file. If no file is given, it uses `cpu_instrs/cpu_instrs.gb` relative to the current directory. It prints `ROM read result: Success`, or `ROM read result: Error: ...` when the file cannot be opened. It then prints ROM bank 1 as a hex dump with 16 bytes on each line.

## Library use

```python
from rustyboy.gameboy import Gameboy
from rustyboy.instructions import add_a_r8

gb = Gameboy()
gb.start("game.gb")          # prints the read result
print(gb.memory_bus.rom.bank0[:16].hex(" "))

regs = gb.cpu.registers
regs.a = 0x0F
add_a_r8(regs, 0x01)
print(hex(regs.a))           # 0x10, with the half-carry flag set
```

## What it does not do yet

- No instructions are fetched or executed. `CPU.decode` only splits an opcode into its fields and does not dispatch on them.
- There is no display, sound, input, timer or interrupt handling. `VRAM` holds no storage.
- `add_a_hl` does not read memory. The byte at HL is taken as `0x00`, so the instruction adds only the carry flag to A.
- `WRAM` maps both `0xC000`–`0xCFFF` and `0xD000`–`0xDFFF` onto its first bank. The two halves therefore alias each other.
- `ROM.read` loads only the first 32 KiB of a file, and there is no bank switching.

## Tests

```
pip install ".[test]"
pytest
```