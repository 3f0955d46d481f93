"""Falling-block puzzle game logic."""

from __future__ import annotations

import copy
import enum
import time
from collections import deque
from dataclasses import dataclass, field

_BOARD_WIDTH = 10
_BOARD_HEIGHT = 20
_LINE_SCORES = {1: 100, 2: 300, 3: 500, 4: 800}
_WALL_KICKS = ((-1, 0), (1, 0), (0, -1), (-1, -1), (1, -1))


class GameState(enum.Enum):
    PLAYING = "Playing"
    PAUSED = "Paused"
    GAME_OVER = "GameOver"
    MENU = "Menu"


class Color(enum.Enum):
    CYAN = "Cyan"
    YELLOW = "Yellow"
    PURPLE = "Purple"
    GREEN = "Green"
    RED = "Red"
    BLUE = "Blue"
    ORANGE = "Orange"
    GRAY = "Gray"
    BLACK = "Black"


class TetrominoType(enum.Enum):
    I = "I"  # noqa: E741
    O = "O"  # noqa: E741
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


def _rows(*lines: str) -> list[list[bool]]:
    return [[ch == "#" for ch in line] for line in lines]


_SHAPES: dict[TetrominoType, tuple[tuple[str, ...], Color]] = {
    TetrominoType.I: (("....", "####", "....", "...."), Color.CYAN),
    TetrominoType.O: (("##", "##"), Color.YELLOW),
    TetrominoType.T: ((".#.", "###", "..."), Color.PURPLE),
    TetrominoType.S: ((".##", "##.", "..."), Color.GREEN),
    TetrominoType.Z: (("##.", ".##", "..."), Color.RED),
    TetrominoType.J: (("#..", "###", "..."), Color.BLUE),
    TetrominoType.L: (("..#", "###", "..."), Color.ORANGE),
}


class Tetromino:
    """A piece with its shape grid, colour, position and rotation."""

    def __init__(self, tetromino_type: TetrominoType) -> None:
        lines, color = _SHAPES[tetromino_type]
        self.tetromino_type = tetromino_type
        self.color = color
        self.shape = _rows(*lines)
        self.x = 3
        self.y = 0
        self.rotation = 0

    def cells(self):
        """Yield the (column, row) offsets of the filled cells of the shape."""
        for py, row in enumerate(self.shape):
            for px, filled in enumerate(row):
                if filled:
                    yield px, py

    def copy(self) -> Tetromino:
        return copy.deepcopy(self)

    def rotate(self) -> None:
        """Rotate the shape a quarter turn clockwise."""
        self.shape = [list(row) for row in zip(*reversed(self.shape))]
        self.rotation = (self.rotation + 1) % 4


class GameBoard:
    """Grid of settled cells, black where empty."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.grid = [[Color.BLACK] * width for _ in range(height)]

    def is_valid_position(self, piece: Tetromino, dx: int, dy: int) -> bool:
        """Return whether ``piece`` moved by (dx, dy) lies inside and on empty cells."""
        for px, py in piece.cells():
            x = piece.x + dx + px
            y = piece.y + dy + py
            if not (0 <= x < self.width and 0 <= y < self.height):
                return False
            if self.grid[y][x] is not Color.BLACK:
                return False
        return True

    def place_piece(self, piece: Tetromino) -> None:
        """Write the piece's colour into the grid where it lies inside the board."""
        for px, py in piece.cells():
            x = piece.x + px
            y = piece.y + py
            if 0 <= x < self.width and 0 <= y < self.height:
                self.grid[y][x] = piece.color

    def clear_lines(self) -> int:
        """Remove full rows, add empty rows on top and return how many were removed."""
        kept = [row for row in self.grid if any(c is Color.BLACK for c in row)]
        cleared = self.height - len(kept)
        empty = [[Color.BLACK] * self.width for _ in range(cleared)]
        self.grid = empty + kept
        return cleared

    def is_game_over(self) -> bool:
        """Return whether anything has settled in the top row."""
        return any(c is not Color.BLACK for c in self.grid[0])


@dataclass
class GameStats:
    score: int = 0
    lines_cleared: int = 0
    level: int = 1
    tetris_count: int = 0
    total_pieces: int = 0
    start_time: float = field(default_factory=time.monotonic)
    play_time: float = 0.0


class TetrisGame:
    """Game state: board, falling piece, piece bag, timing and score."""

    def __init__(self) -> None:
        self.board = GameBoard(_BOARD_WIDTH, _BOARD_HEIGHT)
        self.current_piece: Tetromino | None = None
        self.next_piece: Tetromino | None = None
        self.state = GameState.MENU
        self.stats = GameStats()
        self.drop_timer = time.monotonic()
        self.drop_interval = 1.0
        self.piece_bag: deque[TetrominoType] = deque()
        self.ghost_piece: Tetromino | None = None

        self._fill_piece_bag()
        self._spawn_next_piece()
        self.state = GameState.PLAYING

    def _fill_piece_bag(self) -> None:
        pieces = list(TetrominoType)
        count = len(pieces)
        # deterministic shuffle
        for i in range(count):
            j = (i * 7 + 13) % count
            pieces[i], pieces[j] = pieces[j], pieces[i]
        self.piece_bag.extend(pieces)

    def _spawn_next_piece(self) -> None:
        if not self.piece_bag:
            self._fill_piece_bag()
        piece = Tetromino(self.piece_bag.popleft())
        if not self.board.is_valid_position(piece, 0, 0):
            self.state = GameState.GAME_OVER
            return
        self.current_piece = piece
        self._update_ghost_piece()

    def _update_ghost_piece(self) -> None:
        if self.current_piece is None:
            return
        ghost = self.current_piece.copy()
        while self.board.is_valid_position(ghost, 0, 1):
            ghost.y += 1
        self.ghost_piece = ghost

    def move_piece(self, dx: int, dy: int) -> bool:
        """Move the falling piece if the target is free; return whether it moved."""
        piece = self.current_piece
        if piece is None or not self.board.is_valid_position(piece, dx, dy):
            return False
        piece.x += dx
        piece.y += dy
        self._update_ghost_piece()
        return True

    def rotate_piece(self) -> bool:
        """Rotate the falling piece, trying wall kicks; return whether it rotated."""
        piece = self.current_piece
        if piece is None:
            return False
        original_shape = piece.shape
        original_rotation = piece.rotation
        piece.rotate()
        if self.board.is_valid_position(piece, 0, 0):
            self._update_ghost_piece()
            return True
        for kx, ky in _WALL_KICKS:
            if self.board.is_valid_position(piece, kx, ky):
                piece.x += kx
                piece.y += ky
                self._update_ghost_piece()
                return True
        piece.shape = original_shape
        piece.rotation = original_rotation
        return False

    def hard_drop(self) -> None:
        """Drop the falling piece as far as it goes and lock it."""
        piece = self.current_piece
        if piece is None:
            return
        while self.board.is_valid_position(piece, 0, 1):
            piece.y += 1
        self._place_current_piece()

    def _place_current_piece(self) -> None:
        piece, self.current_piece = self.current_piece, None
        if piece is None:
            return
        self.board.place_piece(piece)
        self.stats.total_pieces += 1

        cleared = self.board.clear_lines()
        if cleared > 0:
            self.stats.lines_cleared += cleared
            self.stats.score += _LINE_SCORES.get(cleared, 0) * self.stats.level
            if cleared == 4:
                self.stats.tetris_count += 1
            self.stats.level = self.stats.lines_cleared // 10 + 1
            millis = int(max(1000.0 / (1.0 + self.stats.level * 0.1), 50.0))
            self.drop_interval = millis / 1000

        if self.board.is_game_over():
            self.state = GameState.GAME_OVER
        else:
            self._spawn_next_piece()

    def update(self) -> None:
        """Apply gravity when the drop interval has passed and track play time."""
        if self.state is not GameState.PLAYING:
            return
        now = time.monotonic()
        if now - self.drop_timer >= self.drop_interval:
            if not self.move_piece(0, 1):
                self._place_current_piece()
            self.drop_timer = time.monotonic()
        self.stats.play_time = time.monotonic() - self.stats.start_time

    def toggle_pause(self) -> None:
        if self.state is GameState.PLAYING:
            self.state = GameState.PAUSED
        elif self.state is GameState.PAUSED:
            self.state = GameState.PLAYING

    def reset(self) -> None:
        """Start a fresh game."""
        self.board = GameBoard(_BOARD_WIDTH, _BOARD_HEIGHT)
        self.current_piece = None
        self.next_piece = None
        self.state = GameState.PLAYING
        self.stats = GameStats()
        self.drop_timer = time.monotonic()
        self.drop_interval = 1.0
        self.piece_bag.clear()
        self.ghost_piece = None
        self._fill_piece_bag()
        self._spawn_next_piece()