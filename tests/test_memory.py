import pytest

from gbemu.memory import MemoryBus


def test_new_bus_is_zeroed():
    bus = MemoryBus()
    view = bus.memory()
    assert len(view) == 0xFFFF
    assert not any(view)


def test_byte_round_trip():
    bus = MemoryBus()
    bus.write_byte(0x1234, 0x42)
    assert bus.read_byte(0x1234) == 0x42
    assert bus.memory()[0x1234] == 0x42


def test_read_word_is_little_endian():
    bus = MemoryBus()
    bus.write_byte(0x300, 0x34)
    bus.write_byte(0x301, 0x12)
    assert bus.read_word(0x300) == 0x1234


def test_write_word_byte_order():
    bus = MemoryBus()
    bus.write_word(0x200, 0xABCD)
    assert bus.read_byte(0x200) == 0xCD
    assert bus.read_byte(0x201) == 0xAB
    assert bus.read_word(0x200) == 0xABCD


def test_load_program_copies_bytes():
    bus = MemoryBus()
    program = bytes([0x00, 0x0C, 0x0D, 0x81, 0x79, 0xC3, 0x00, 0x01])
    bus.load_program(0x100, program)
    assert bytes(bus.memory()[0x100:0x100 + len(program)]) == program
    assert bus.read_byte(0x100 + len(program)) == 0


def test_load_program_drops_bytes_past_end():
    bus = MemoryBus()
    bus.load_program(0xFFFC, [1, 2, 3, 4, 5])
    assert bytes(bus.memory()[0xFFFC:]) == bytes([1, 2, 3])


def test_out_of_range_addresses_raise():
    bus = MemoryBus()
    with pytest.raises(IndexError):
        bus.read_byte(0xFFFF)
    with pytest.raises(IndexError):
        bus.write_byte(-1, 0)
    with pytest.raises(IndexError):
        bus.read_word(0xFFFE)


def test_write_byte_rejects_wide_values():
    bus = MemoryBus()
    with pytest.raises(ValueError):
        bus.write_byte(0x10, 256)


def test_memory_view_is_read_only():
    bus = MemoryBus()
    view = bus.memory()
    with pytest.raises(TypeError):
        view[0] = 1
    assert bus.read_byte(0) == 0