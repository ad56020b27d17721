from rustyboy.gameboy import Gameboy, main
from rustyboy.rom import BANK_SIZE


def test_start_success(tmp_path, capsys):
    path = tmp_path / "game.gb"
    data = bytes([0x31]) * (2 * BANK_SIZE)
    path.write_bytes(data)
    gb = Gameboy()
    gb.start(path)
    assert capsys.readouterr().out == "ROM read result: Success\n"
    assert bytes(gb.memory_bus.rom.bank0) == data[:BANK_SIZE]


def test_start_missing_file_reports_error(tmp_path, capsys):
    gb = Gameboy()
    gb.start(tmp_path / "absent.gb")
    out = capsys.readouterr().out
    assert out.startswith("ROM read result: Error: ")
    assert not any(gb.memory_bus.rom.bank0)


def test_new_gameboy_state():
    gb = Gameboy()
    assert gb.cpu.pc == 0
    assert not any(gb.memory_bus.rom.bank1)


def test_main_dumps_bank1(tmp_path, capsys):
    path = tmp_path / "game.gb"
    path.write_bytes(b"\x00" * BANK_SIZE + b"\xAB" * BANK_SIZE)
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "ROM read result: Success"
    dump = lines[1:]
    assert len(dump) == BANK_SIZE // 16
    assert all(line == "AB " * 16 for line in dump)


def test_main_with_missing_rom_dumps_zeros(tmp_path, capsys):
    assert main([str(tmp_path / "absent.gb")]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("ROM read result: Error: ")
    assert len(lines) == 1 + BANK_SIZE // 16
    assert lines[1] == "00 " * 16