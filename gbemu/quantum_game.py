"""Game state and rules of the quantum variant of the falling-block game."""

from __future__ import annotations

import enum
import math
import time
from dataclasses import dataclass, field

from .quantum import QuantumGameBoard, QuantumState, QuantumTetromino, QuantumTetrominoType

_BOARD_WIDTH = 12
_BOARD_HEIGHT = 24
_QUANTUM_INTERVAL = 0.5
_SPAWN_TYPES = (
    QuantumTetrominoType.QUANTUM_I,
    QuantumTetrominoType.ENTANGLED_PAIR,
    QuantumTetrominoType.SUPERPOSITION_BLOCK,
)
_SPAWN_STATES = (
    QuantumState.SUPERPOSITION,
    QuantumState.ENTANGLED,
    QuantumState.TUNNELING,
    QuantumState.COLLAPSED,
)


def _whole(value: float) -> int:
    """Truncate to a non-negative integer, as an unsigned conversion would."""
    if math.isnan(value) or value <= 0:
        return 0
    return int(value)


@dataclass
class QuantumGameStats:
    """Counters and measures collected while the game runs."""

    quantum_score: float = 0.0
    entanglement_count: int = 0
    superposition_events: int = 0
    tunneling_events: int = 0
    observer_interactions: int = 0
    quantum_coherence: float = 1.0
    spacetime_distortion: float = 0.0
    start_time: float = field(default_factory=time.monotonic)
    play_time: float = 0.0


class QuantumGameState(enum.Enum):
    QUANTUM_SUPERPOSITION = "QuantumSuperposition"
    QUANTUM_COLLAPSE = "QuantumCollapse"
    ENTANGLEMENT_MODE = "EntanglementMode"
    TUNNELING_MODE = "TunnelingMode"
    OBSERVER_MODE = "ObserverMode"
    QUANTUM_GAME_OVER = "QuantumGameOver"


@dataclass(frozen=True)
class Observe:
    """Observe the board cell at (x, y)."""

    x: int
    y: int


@dataclass(frozen=True)
class Entangle:
    """Entangle the current pieces."""


@dataclass(frozen=True)
class Tunnel:
    """Tunnel every current piece to (x, y)."""

    x: float
    y: float


@dataclass(frozen=True)
class Superposition:
    """Put every current piece into superposition."""


QuantumOperation = Observe | Entangle | Tunnel | Superposition


class QuantumTetrisGame:
    """Board, current pieces, fields and statistics of one quantum game."""

    def __init__(self) -> None:
        self.board = QuantumGameBoard(_BOARD_WIDTH, _BOARD_HEIGHT)
        self.current_quantum_pieces: list[QuantumTetromino] = []
        self.quantum_field_strength = 1.0
        self.spacetime_distortion = 0.0
        self.observer_presence = 0.0
        self.state = QuantumGameState.QUANTUM_SUPERPOSITION
        self.stats = QuantumGameStats()
        self.quantum_timer = time.monotonic()
        self.quantum_interval = _QUANTUM_INTERVAL
        self.entanglement_network: list[list[int]] = []

        self._spawn_quantum_pieces()
        self.state = QuantumGameState.QUANTUM_SUPERPOSITION

    def _spawn_quantum_pieces(self) -> None:
        self.current_quantum_pieces.clear()
        state = _SPAWN_STATES[_whole(self.stats.quantum_score) % 4]
        for piece_type in _SPAWN_TYPES:
            piece = QuantumTetromino(piece_type)
            piece.quantum_state = state
            self.current_quantum_pieces.append(piece)
        if len(self.current_quantum_pieces) >= 2:
            self._create_entanglement_network()

    def _create_entanglement_network(self) -> None:
        pieces = self.current_quantum_pieces
        for i, first in enumerate(pieces):
            for j in range(i + 1, len(pieces)):
                if (i + j) % 2 == 0:
                    first.create_entanglement(pieces[j])
                    self.stats.entanglement_count += 1

    def quantum_update(self) -> None:
        """Advance fields and statistics, moving pieces when the interval has passed."""
        if self.state is not QuantumGameState.QUANTUM_SUPERPOSITION:
            return

        self.quantum_field_strength += 0.01
        self.spacetime_distortion = math.sin(self.stats.quantum_score * 0.001)
        self.observer_presence = min(self.stats.observer_interactions * 0.1, 1.0)
        self.stats.quantum_coherence = max(1.0 - self.observer_presence * 0.1, 0.1)

        if time.monotonic() - self.quantum_timer >= self.quantum_interval:
            for piece in self.current_quantum_pieces:
                match piece.quantum_state:
                    case QuantumState.SUPERPOSITION:
                        piece.quantum_move(0.0, 1.0)
                        piece.quantum_move(0.5, 0.0)
                        piece.quantum_move(-0.5, 0.0)
                    case QuantumState.ENTANGLED | QuantumState.COLLAPSED:
                        piece.quantum_move(0.0, 1.0)
                    case QuantumState.TUNNELING:
                        score = _whole(self.stats.quantum_score)
                        piece.quantum_tunnel(
                            float(score % self.board.width),
                            float(score % self.board.height),
                        )
                        self.stats.tunneling_events += 1
            self.quantum_timer = time.monotonic()

        self.stats.play_time = time.monotonic() - self.stats.start_time

    def quantum_operation(self, operation: QuantumOperation) -> None:
        """Apply a player operation to the board or the current pieces."""
        match operation:
            case Observe(x, y):
                self.board.observer_effect(x, y)
                self.stats.observer_interactions += 1
            case Entangle():
                if len(self.current_quantum_pieces) >= 2:
                    self._create_entanglement_network()
            case Tunnel(x, y):
                for piece in self.current_quantum_pieces:
                    piece.quantum_tunnel(float(x), float(y))
                    self.stats.tunneling_events += 1
            case Superposition():
                for piece in self.current_quantum_pieces:
                    piece.quantum_state = QuantumState.SUPERPOSITION
                    self.stats.superposition_events += 1
            case _:
                raise TypeError(f"not a quantum operation: {operation!r}")