"""LCD controller, sprites and tile maps."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_SHADES = (
    (255, 255, 255),
    (192, 192, 192),
    (96, 96, 96),
    (0, 0, 0),
)

_HBLANK_CYCLES = 204
_VBLANK_LINE_CYCLES = 456
_OAM_CYCLES = 80
_TRANSFER_CYCLES = 172
_VISIBLE_LINES = 144
_LAST_LINE = 153


class LCDMode(enum.Enum):
    """Phase of the LCD controller."""

    H_BLANK = "HBlank"
    V_BLANK = "VBlank"
    OAM = "OAM"
    TRANSFER = "Transfer"


class LCD:
    """LCD controller stepping through its modes and drawing scanlines."""

    def __init__(self) -> None:
        self.width = 160
        self.height = 144
        self.mode = LCDMode.H_BLANK
        self.mode_clock = 0
        self.line = 0
        self.scanline = 0
        self.lcd_enabled = True
        self.window_tile_map = 0x9800
        self.window_enabled = False
        self.bg_window_tile_data = 0x8000
        self.bg_tile_map = 0x9800
        self.sprite_size = 8
        self.sprite_enabled = True
        self.bg_enabled = True
        self.scroll_x = 0
        self.scroll_y = 0
        self.window_x = 0
        self.window_y = 0
        self.lcdc = 0x91
        self.stat = 0x00
        self.scy = 0x00
        self.scx = 0x00
        self.ly = 0x00
        self.lyc = 0x00
        self.dma = 0x00
        self.bgp = 0xFC
        self.obp0 = 0xFF
        self.obp1 = 0xFF
        self.wy = 0x00
        self.wx = 0x00
        self.framebuffer = bytearray(self.width * self.height * 3)

    def update(self, cycles: int) -> None:
        """Advance the controller by ``cycles`` clock cycles."""
        if not self.lcd_enabled:
            return
        self.mode_clock += cycles

        if self.mode is LCDMode.H_BLANK:
            if self.mode_clock >= _HBLANK_CYCLES:
                self.mode_clock = 0
                self.line += 1
                self.mode = LCDMode.V_BLANK if self.line == _VISIBLE_LINES else LCDMode.OAM
        elif self.mode is LCDMode.V_BLANK:
            if self.mode_clock >= _VBLANK_LINE_CYCLES:
                self.mode_clock = 0
                self.line += 1
                if self.line > _LAST_LINE:
                    self.line = 0
                    self.mode = LCDMode.OAM
        elif self.mode is LCDMode.OAM:
            if self.mode_clock >= _OAM_CYCLES:
                self.mode_clock = 0
                self.mode = LCDMode.TRANSFER
        elif self.mode_clock >= _TRANSFER_CYCLES:
            self.mode_clock = 0
            self.mode = LCDMode.H_BLANK
            self._render_scanline()

    def _render_scanline(self) -> None:
        if self.bg_enabled:
            self._render_background()

    def _render_background(self) -> None:
        # No video memory is attached, so every background pixel has colour index 0.
        if self.line >= self.height:
            return
        row = bytes(_SHADES[0]) * self.width
        start = self.line * self.width * 3
        self.framebuffer[start:start + len(row)] = row

    def reset(self) -> None:
        """Return to the first scanline and clear the framebuffer."""
        self.mode = LCDMode.H_BLANK
        self.mode_clock = 0
        self.line = 0
        self.scanline = 0
        self.framebuffer[:] = bytes(len(self.framebuffer))


@dataclass
class Sprite:
    """An object attribute entry."""

    x: int = 0
    y: int = 0
    tile_index: int = 0
    palette: int = 0
    x_flip: bool = False
    y_flip: bool = False
    priority: bool = False


class TileMap:
    """A grid of tile indices; reads outside the grid give 0 and writes are ignored."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.tiles = bytearray(width * height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x: int, y: int) -> int:
        if self._inside(x, y):
            return self.tiles[y * self.width + x]
        return 0

    def set_tile(self, x: int, y: int, tile: int) -> None:
        if self._inside(x, y):
            self.tiles[y * self.width + x] = tile