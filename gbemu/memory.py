"""Flat memory bus addressed by 16-bit addresses."""

from __future__ import annotations

_MEMORY_SIZE = 0xFFFF


class MemoryBus:
    """Byte-addressable memory of 0xFFFF bytes."""

    def __init__(self) -> None:
        self._memory = bytearray(_MEMORY_SIZE)

    @staticmethod
    def _check(address: int, span: int = 1) -> None:
        if address < 0 or address + span > _MEMORY_SIZE:
            raise IndexError(f"address out of range: 0x{address:04X}")

    def read_byte(self, address: int) -> int:
        """Return the byte stored at ``address``."""
        self._check(address)
        return self._memory[address]

    def write_byte(self, address: int, value: int) -> None:
        """Store one byte at ``address``."""
        self._check(address)
        self._memory[address] = value

    def read_word(self, address: int) -> int:
        """Return the little-endian 16-bit word starting at ``address``."""
        self._check(address, 2)
        return int.from_bytes(self._memory[address:address + 2], "little")

    def write_word(self, address: int, value: int) -> None:
        """Store a 16-bit word at ``address`` in little-endian order."""
        self._check(address, 2)
        self._memory[address:address + 2] = (value & 0xFFFF).to_bytes(2, "little")

    def load_program(self, start_address: int, program: bytes) -> None:
        """Copy ``program`` into memory; bytes past the end of memory are dropped."""
        if start_address < 0:
            raise IndexError(f"address out of range: {start_address}")
        end = min(start_address + len(program), _MEMORY_SIZE)
        if end > start_address:
            self._memory[start_address:end] = bytes(program[: end - start_address])

    def memory(self) -> memoryview:
        """Return a read-only view of the whole memory."""
        return memoryview(self._memory).toreadonly()