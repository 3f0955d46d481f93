"""Pieces and board of the quantum variant of the falling-block game."""

from __future__ import annotations

import copy
import enum
import math
from dataclasses import dataclass, field

_INDEX_CEILING = 1 << 64


class QuantumState(enum.Enum):
    SUPERPOSITION = "Superposition"
    ENTANGLED = "Entangled"
    COLLAPSED = "Collapsed"
    TUNNELING = "Tunneling"


class QuantumTetrominoType(enum.Enum):
    QUANTUM_I = "QuantumI"
    QUANTUM_O = "QuantumO"
    QUANTUM_T = "QuantumT"
    QUANTUM_S = "QuantumS"
    QUANTUM_Z = "QuantumZ"
    QUANTUM_J = "QuantumJ"
    QUANTUM_L = "QuantumL"
    ENTANGLED_PAIR = "EntangledPair"
    SUPERPOSITION_BLOCK = "SuperpositionBlock"


@dataclass
class SpacetimeCoord:
    """A position in space and time with the probability of being there."""

    x: float
    y: float
    t: float = 0.0
    probability: float = 1.0


def _to_index(value: float) -> int:
    """Convert a coordinate to a grid index; negatives and NaN map to 0."""
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return _INDEX_CEILING
    return int(value)


class QuantumTetromino:
    """A piece spread over several coordinates, with a wave function and phase."""

    def __init__(self, tetromino_type: QuantumTetrominoType) -> None:
        coords: list[SpacetimeCoord] = []
        wave: list[float] = []
        if tetromino_type is QuantumTetrominoType.QUANTUM_I:
            for i in range(4):
                coords.append(SpacetimeCoord(3.0 + i, 0.0, 0.0, 1.0 / 4.0))
                wave.append(math.sin(i * math.pi / 2.0))
        elif tetromino_type is QuantumTetrominoType.ENTANGLED_PAIR:
            coords.append(SpacetimeCoord(3.0, 0.0, 0.0, 0.5))
            coords.append(SpacetimeCoord(7.0, 0.0, 0.0, 0.5))
            wave.extend((1.0, -1.0))
        else:
            coords.append(SpacetimeCoord(3.0, 0.0, 0.0, 1.0))
            wave.append(1.0)

        self.tetromino_type = tetromino_type
        self.quantum_state = QuantumState.SUPERPOSITION
        self.spacetime_coords = coords
        self.entanglement_partners: list[int] = []
        self.wave_function = wave
        self.phase = 0.0
        self.energy = 1.0

    def copy(self) -> QuantumTetromino:
        return copy.deepcopy(self)

    def quantum_rotate(self) -> None:
        """Advance the phase by a quarter of pi and reshape wave and probabilities."""
        self.phase += math.pi / 4.0
        self.wave_function = [
            math.sin(self.phase + i * math.pi / 2.0) for i in range(len(self.wave_function))
        ]
        damping = abs(math.cos(self.phase))
        for coord in self.spacetime_coords:
            coord.probability = max(coord.probability * damping, 0.1)

    def quantum_move(self, dx: float, dy: float) -> None:
        """Shift every coordinate and advance its time by 0.1."""
        for coord in self.spacetime_coords:
            coord.x += dx
            coord.y += dy
            coord.t += 0.1

    def create_entanglement(self, other: QuantumTetromino) -> None:
        """Entangle with ``other``, giving it the opposite phase of this wave function."""
        self.quantum_state = QuantumState.ENTANGLED
        other.quantum_state = QuantumState.ENTANGLED
        self.entanglement_partners.append(len(other.spacetime_coords))
        other.entanglement_partners.append(len(self.spacetime_coords))
        for i, wave in enumerate(self.wave_function[: len(other.wave_function)]):
            other.wave_function[i] = -wave

    def quantum_tunnel(self, target_x: float, target_y: float) -> None:
        """Move every coordinate to the target, losing a fifth of its probability."""
        self.quantum_state = QuantumState.TUNNELING
        for coord in self.spacetime_coords:
            coord.x = target_x
            coord.y = target_y
            coord.probability *= 0.8


@dataclass
class QuantumCell:
    """One board cell with its occupancy probability, energy and phase."""

    occupied_probability: float = 0.0
    quantum_state: QuantumState = QuantumState.COLLAPSED
    energy_level: float = 0.0
    phase: float = 0.0
    entangled_with: list[int] = field(default_factory=list)


class QuantumGameBoard:
    """Grid of quantum cells with spacetime and quantum fields."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.quantum_grid = [[QuantumCell() for _ in range(width)] for _ in range(height)]
        self.spacetime_field = [
            [math.sin((x + y) * 0.1) for x in range(width)] for y in range(height)
        ]
        self.quantum_field = [
            [math.cos((x - y) * 0.1) for x in range(width)] for y in range(height)
        ]
        self.observer_effect_strength = 0.0

    def is_quantum_position_valid(self, piece: QuantumTetromino) -> bool:
        """Return whether every coordinate of ``piece`` is on the board, likely and free."""
        for coord in piece.spacetime_coords:
            x = _to_index(coord.x)
            y = _to_index(coord.y)
            if x >= self.width or y >= self.height:
                return False
            if coord.probability < 0.1:
                return False
            if self.quantum_grid[y][x].occupied_probability > 0.5:
                return False
        return True

    def quantum_interference(self, piece: QuantumTetromino) -> None:
        """Add the piece's probability and energy into the cells it covers."""
        for coord in piece.spacetime_coords:
            x = _to_index(coord.x)
            y = _to_index(coord.y)
            if x < self.width and y < self.height:
                cell = self.quantum_grid[y][x]
                interference = cell.phase + piece.phase
                cell.occupied_probability += coord.probability * abs(math.cos(interference))
                cell.energy_level += piece.energy * coord.probability
                cell.phase = interference

    def observer_effect(self, x: int, y: int) -> None:
        """Collapse the cell at (x, y) and damp it and its neighbours."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        cell = self.quantum_grid[y][x]
        cell.occupied_probability = 1.0 if cell.occupied_probability > 0.5 else 0.0
        cell.quantum_state = QuantumState.COLLAPSED
        for ny in range(y - 1, y + 2):
            for nx in range(x - 1, x + 2):
                if 0 <= nx < self.width and 0 <= ny < self.height:
                    self.quantum_grid[ny][nx].occupied_probability *= 0.9

    def quantum_line_clear(self) -> int:
        """Remove rows that are nearly certainly full and return how many went."""
        kept: list[list[QuantumCell]] = []
        cleared = 0
        for y, row in enumerate(self.quantum_grid):
            if all(cell.occupied_probability >= 0.8 for cell in row):
                cleared += 1
                self.quantum_field[y] = [value * 2.0 for value in self.quantum_field[y]]
            else:
                kept.append(row)
        fresh = [
            [QuantumCell(quantum_state=QuantumState.SUPERPOSITION) for _ in range(self.width)]
            for _ in range(self.height - len(kept))
        ]
        self.quantum_grid = fresh + kept
        return cleared