"""Terminal front end for the falling-block game."""

from __future__ import annotations

import sys
import time
from typing import TextIO

from .tetris import Color, GameState, TetrisGame, Tetromino

_BOARD_LEFT = 2
_BOARD_TOP = 3
_PANEL_COLUMN = 25
_RENDER_INTERVAL = 0.1
_FRAME_DELAY = 0.016

_CLEAR = "\x1b[2J\x1b[H"
_RULE = "=" * 50

_STATE_LABELS = {
    GameState.PLAYING: "   playing  ",
    GameState.PAUSED: "   paused   ",
    GameState.GAME_OVER: "  game over ",
    GameState.MENU: "  main menu ",
}

_CONTROLS = (
    "A/D: move left/right",
    "S: soft drop",
    "W: rotate",
    "Space: hard drop",
    "P: pause",
    "R: restart",
    "Q: quit",
)


def _at(row: int, column: int) -> str:
    return f"\x1b[{row};{column}H"


def _cell_char(color: Color) -> str:
    if color is Color.BLACK:
        return " "
    if color is Color.GRAY:
        return "░"
    return "█"


class WindowsTetris:
    """Runs the game in a terminal, reading one command per line."""

    def __init__(self, input_stream: TextIO | None = None, output: TextIO | None = None) -> None:
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self.tetris = TetrisGame()
        self.running = True
        self.last_render_time = time.monotonic()
        self.render_interval = _RENDER_INTERVAL
        self.frame_delay = _FRAME_DELAY

    def _write(self, text: str) -> None:
        self.output.write(text)

    def run(self) -> None:
        """Show the welcome screen, play until quit or end of input, then show the results."""
        self._write(_CLEAR)
        self._show_welcome()
        while self.running:
            self.tetris.update()
            now = time.monotonic()
            if now - self.last_render_time >= self.render_interval:
                self.last_render_time = now
                self.render()
            line = self.input_stream.readline()
            if not line:
                self.running = False
                break
            self.handle_command(line)
            if self.frame_delay > 0:
                time.sleep(self.frame_delay)
        self._show_game_over()

    def render(self) -> None:
        """Draw the board, pieces, statistics and controls."""
        self._write(_CLEAR)
        self._render_board()
        if self.tetris.current_piece is not None:
            self._render_piece(self.tetris.current_piece, ghost=False)
        if self.tetris.ghost_piece is not None:
            self._render_piece(self.tetris.ghost_piece, ghost=True)
        self._render_stats()
        self._render_controls()
        self.output.flush()

    def handle_command(self, line: str) -> None:
        """Act on the first character of ``line``."""
        if not line:
            return
        game = self.tetris
        match line[0].lower():
            case "a":
                game.move_piece(-1, 0)
            case "d":
                game.move_piece(1, 0)
            case "s":
                game.move_piece(0, 1)
            case "w":
                game.rotate_piece()
            case " ":
                game.hard_drop()
            case "p":
                game.toggle_pause()
            case "r":
                if game.state is GameState.GAME_OVER:
                    game.reset()
            case "q":
                self.running = False

    def _render_board(self) -> None:
        board = self.tetris.board
        self._write(_at(_BOARD_TOP, _BOARD_LEFT) + "┌" + "─" * board.width + "┐")
        for y, row in enumerate(board.grid):
            cells = "".join(_cell_char(color) for color in row)
            self._write(_at(_BOARD_TOP + y + 1, _BOARD_LEFT) + "│" + cells + "│")
        self._write(_at(_BOARD_TOP + board.height + 1, _BOARD_LEFT) + "└" + "─" * board.width + "┘")

    def _render_piece(self, piece: Tetromino, ghost: bool) -> None:
        board = self.tetris.board
        char = _cell_char(Color.GRAY if ghost else piece.color)
        for px, py in piece.cells():
            x = piece.x + px
            y = piece.y + py
            if 0 <= x < board.width and 0 <= y < board.height:
                self._write(_at(_BOARD_TOP + y + 1, _BOARD_LEFT + x + 1) + char)

    def _render_stats(self) -> None:
        stats = self.tetris.stats
        col = _PANEL_COLUMN
        lines = [
            "┌─ Statistics ─┐",
            f"│ Score: {stats.score:>8} │",
            f"│ Level: {stats.level:>8} │",
            f"│ Lines: {stats.lines_cleared:>8} │",
            f"│ Tetris: {stats.tetris_count:>7} │",
            f"│ Pieces: {stats.total_pieces:>7} │",
            "└──────────────┘",
        ]
        for offset, text in enumerate(lines):
            self._write(_at(3 + offset, col) + text)
        status = [
            "┌─ Status ─────┐",
            f"│{_STATE_LABELS[self.tetris.state]}│",
            "└────────────┘",
        ]
        for offset, text in enumerate(status):
            self._write(_at(11 + offset, col) + text)

    def _render_controls(self) -> None:
        col = _PANEL_COLUMN
        self._write(_at(15, col) + "┌─ Controls ───┐")
        for offset, text in enumerate(_CONTROLS):
            self._write(_at(16 + offset, col) + f"│ {text:<16} │")
        self._write(_at(16 + len(_CONTROLS), col) + "└──────────────┘")

    def _show_welcome(self) -> None:
        self._write(_CLEAR)
        lines = [
            "Falling blocks",
            _RULE,
            "",
            "Welcome!",
            "",
            "Features:",
            "  - complete game logic",
            "  - live statistics",
            "  - ghost piece preview",
            "",
            "Press Enter to start...",
        ]
        self._write("\n".join(lines) + "\n")
        self.output.flush()
        self.input_stream.readline()

    def _show_game_over(self) -> None:
        self._write(_CLEAR)
        stats = self.tetris.stats
        lines = [
            "Game over!",
            _RULE,
            "",
            "Final statistics:",
            f"  Score: {stats.score}",
            f"  Level: {stats.level}",
            f"  Lines cleared: {stats.lines_cleared}",
            f"  Tetrises: {stats.tetris_count}",
            f"  Pieces: {stats.total_pieces}",
            f"  Play time: {stats.play_time:.1f}s",
            "",
            "Thanks for playing!",
            "",
        ]
        self._write("\n".join(lines) + "\n")
        self.output.flush()


def main(argv: list[str] | None = None) -> int:
    """Start the game on the terminal."""
    print("Starting falling blocks...")
    print()
    if sys.platform.startswith("win"):
        print("Windows detected")
    else:
        print("Not running on Windows; the game still works")
    app = WindowsTetris()
    app.run()
    print("Game closed. Thanks for playing!")
    return 0