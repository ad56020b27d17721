import pytest

from rustyboy.ram import RAM, WRAM, InvalidAddressError


def test_new_wram_reads_zero():
    wram = WRAM()
    assert wram.read(0xC000) == 0
    assert wram.read(0xDFFF) == 0


@pytest.mark.parametrize("address", [0xC000, 0xC123, 0xCFFF, 0xD000, 0xD456, 0xDFFF])
def test_write_read_round_trip(address):
    wram = WRAM()
    wram.write(address, 0xAB)
    assert wram.read(address) == 0xAB


@pytest.mark.parametrize("address", [0x0000, 0xBFFF, 0xE000, 0xFFFF])
def test_out_of_range_read_raises(address):
    wram = WRAM()
    with pytest.raises(InvalidAddressError) as info:
        wram.read(address)
    assert info.value.address == address


@pytest.mark.parametrize("address", [0xBFFF, 0xE000])
def test_out_of_range_write_raises(address):
    wram = WRAM()
    with pytest.raises(InvalidAddressError) as info:
        wram.write(address, 1)
    assert info.value.address == address


def test_write_rejects_non_byte_value():
    wram = WRAM()
    with pytest.raises(ValueError):
        wram.write(0xC000, 256)


def test_ram_is_abstract():
    with pytest.raises(TypeError):
        RAM()