"""Terminal front end for the quantum falling-block game."""

from __future__ import annotations

import math
import sys
import time
from typing import TextIO

from .quantum import QuantumCell, QuantumState, QuantumTetromino
from .quantum_game import Entangle, Observe, QuantumTetrisGame, Superposition, Tunnel

_BOARD_LEFT = 2
_BOARD_TOP = 3
_PANEL_COLUMN = 30
_RENDER_INTERVAL = 0.1
_FRAME_DELAY = 0.016

_CLEAR = "\x1b[2J\x1b[H"
_RULE = "=" * 50

_STATE_CHARS = {
    QuantumState.SUPERPOSITION: "◐",
    QuantumState.ENTANGLED: "◑",
    QuantumState.COLLAPSED: "█",
    QuantumState.TUNNELING: "◯",
}

_CONTROLS = (
    "O: observe",
    "E: entangle",
    "T: tunnel",
    "S: superpose",
    "Q: quit",
)


def _at(row: int, column: int) -> str:
    return f"\x1b[{row};{column}H"


def _index(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return sys.maxsize
    return int(value)


def _cell_char(cell: QuantumCell) -> str:
    return _STATE_CHARS[cell.quantum_state]


class QuantumTetrisApp:
    """Runs the quantum game in a terminal, reading one command per line."""

    def __init__(self, input_stream: TextIO | None = None, output: TextIO | None = None) -> None:
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self.game = QuantumTetrisGame()
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
            self.game.quantum_update()
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
        for piece in self.game.current_quantum_pieces:
            self._render_piece(piece)
        self._render_stats()
        self._render_controls()
        self.output.flush()

    def handle_command(self, line: str) -> None:
        """Act on the first character of ``line``."""
        if not line:
            return
        game = self.game
        match line[0].lower():
            case "o":
                game.quantum_operation(Observe(6, 12))
            case "e":
                game.quantum_operation(Entangle())
            case "t":
                score = _index(game.stats.quantum_score)
                game.quantum_operation(Tunnel(float(score % 12), float(score % 24)))
            case "s":
                game.quantum_operation(Superposition())
            case "q":
                self.running = False

    def _render_board(self) -> None:
        board = self.game.board
        self._write(_at(_BOARD_TOP, _BOARD_LEFT) + "┌" + "─" * board.width + "┐")
        for y, row in enumerate(board.quantum_grid):
            cells = "".join(_cell_char(cell) for cell in row)
            self._write(_at(_BOARD_TOP + y + 1, _BOARD_LEFT) + "│" + cells + "│")
        self._write(_at(_BOARD_TOP + board.height + 1, _BOARD_LEFT) + "└" + "─" * board.width + "┘")

    def _render_piece(self, piece: QuantumTetromino) -> None:
        board = self.game.board
        char = _STATE_CHARS[piece.quantum_state]
        for coord in piece.spacetime_coords:
            x = _index(coord.x)
            y = _index(coord.y)
            if x < board.width and y < board.height:
                self._write(_at(_BOARD_TOP + y + 1, _BOARD_LEFT + x + 1) + char)

    def _render_stats(self) -> None:
        stats = self.game.stats
        col = _PANEL_COLUMN
        lines = [
            "┌─ Quantum stats ──┐",
            f"│ Score:    {stats.quantum_score:>6.1f} │",
            f"│ Entangle: {stats.entanglement_count:>6} │",
            f"│ Superpos: {stats.superposition_events:>6} │",
            f"│ Tunnels:  {stats.tunneling_events:>6} │",
            f"│ Observed: {stats.observer_interactions:>6} │",
            f"│ Cohere:   {stats.quantum_coherence:>6.2f} │",
            "└──────────────────┘",
        ]
        for offset, text in enumerate(lines):
            self._write(_at(3 + offset, col) + text)
        fields = [
            "┌─ Quantum field ──┐",
            f"│ Strength: {self.game.quantum_field_strength:>6.2f} │",
            f"│ Warp:     {self.game.spacetime_distortion:>6.2f} │",
            f"│ Observer: {self.game.observer_presence:>6.2f} │",
            "└──────────────────┘",
        ]
        for offset, text in enumerate(fields):
            self._write(_at(12 + offset, col) + text)

    def _render_controls(self) -> None:
        col = _PANEL_COLUMN
        self._write(_at(18, col) + "┌─ Controls ───────┐")
        for offset, text in enumerate(_CONTROLS):
            self._write(_at(19 + offset, col) + f"│ {text:<16} │")
        self._write(_at(19 + len(_CONTROLS), col) + "└──────────────────┘")

    def _show_welcome(self) -> None:
        self._write(_CLEAR)
        lines = [
            "Quantum falling blocks",
            _RULE,
            "",
            "Welcome to the quantum world!",
            "",
            "Features:",
            "  - entanglement: several pieces act together",
            "  - spacetime warp: pieces travel through time",
            "  - superposition: pieces exist in several states",
            "  - tunnelling: pieces pass through obstacles",
            "  - observer effect: looking changes the board",
            "",
            "Press Enter to enter the quantum world...",
        ]
        self._write("\n".join(lines) + "\n")
        self.output.flush()
        self.input_stream.readline()

    def _show_game_over(self) -> None:
        self._write(_CLEAR)
        stats = self.game.stats
        lines = [
            "Quantum game over!",
            _RULE,
            "",
            "Quantum statistics:",
            f"  Quantum score: {stats.quantum_score:.1f}",
            f"  Entanglements: {stats.entanglement_count}",
            f"  Superposition events: {stats.superposition_events}",
            f"  Tunnelling events: {stats.tunneling_events}",
            f"  Observations: {stats.observer_interactions}",
            f"  Coherence: {stats.quantum_coherence:.2f}",
            f"  Play time: {stats.play_time:.1f}s",
            "",
            "Thanks for visiting the quantum world!",
            "",
        ]
        self._write("\n".join(lines) + "\n")
        self.output.flush()


def main(argv: list[str] | None = None) -> int:
    """Start the quantum game on the terminal."""
    print("Starting quantum falling blocks...")
    print()
    app = QuantumTetrisApp()
    app.run()
    print("Quantum game closed. Thanks for playing!")
    return 0