# gbemu

Building blocks of a Game Boy style machine — a flat memory bus and an LCD
controller model with sprites and tile maps — together with two console
falling-block games.

## Installation

```
pip install .
```

For running the test suite:

```
pip install .[test]
pytest
```

## Memory bus

`gbemu.memory.MemoryBus` holds 0xFFFF bytes, all zero at the start.

```python
from gbemu.memory import MemoryBus

bus = MemoryBus()
bus.load_program(0x100, bytes([0x00, 0x0C, 0x81]))
bus.write_word(0x200, 0x1234)          # stored little-endian
print(bus.read_byte(0x101))            # 12
print(hex(bus.read_word(0x200)))       # 0x1234
view = bus.memory()                    # read-only memoryview
```

Reads and writes outside the memory raise `IndexError`. `load_program`
silently drops bytes that would fall past the end of memory.

## LCD, sprites and tile maps

`gbemu.gpu.LCD` steps through the modes of `LCDMode` (`H_BLANK`, `OAM`,
`TRANSFER`, `V_BLANK`) as `update(cycles)` is called, counting scanlines in
`line` and wrapping after line 153. Its `framebuffer` is a `bytearray` of
160 × 144 RGB pixels. No video memory is attached, so each drawn scanline is
filled with colour index 0 (white). `reset()` returns to the first scanline
and clears the framebuffer.

`Sprite` is a dataclass of object attributes. `TileMap(width, height)` holds
tile indices; `get_tile` returns 0 outside the grid and `set_tile` ignores
writes outside it.

## Games

Both games read one command per line from standard input, act on its first
character, and draw with ANSI escape sequences. The game ends on `q` or at
the end of input, and a summary of the statistics is printed.

```
gbemu-tetris
```

Classic falling blocks on a 10 × 20 board: `a`/`d` move, `s` drops one row,
`w` rotates (with wall kicks), a space hard-drops, `p` pauses, `r` restarts
after game over, `q` quits. The rules live in `gbemu.tetris.TetrisGame` and
can be driven without a terminal:

```python
from gbemu.tetris import TetrisGame

game = TetrisGame()
game.move_piece(-1, 0)
game.rotate_piece()
game.hard_drop()
print(game.stats.total_pieces, game.stats.score)
```

```
gbemu-quantum-tetris
```

A playful variant on a 12 × 24 board with superposition, entanglement and
tunnelling pieces: `o` observes the cell at (6, 12), `e` entangles the
current pieces, `t` tunnels them, `s` puts them into superposition, `q`
quits. The rules are in `gbemu.quantum_game.QuantumTetrisGame`, which takes
the operations `Observe`, `Entangle`, `Tunnel` and `Superposition`; pieces
and board are in `gbemu.quantum`.

The front ends are `gbemu.tetris_app.WindowsTetris` and
`gbemu.quantum_app.QuantumTetrisApp`; both accept any text streams for input
and output, which makes them easy to script.

## What this package does not do

There is no CPU here: the package cannot decode or execute machine code, and
it has no registers, debugger, breakpoints or disassembler. The memory bus
and LCD model stand alone, and the LCD does not read tile or sprite data from
memory. The games are plain Python and do not run on an emulated machine.