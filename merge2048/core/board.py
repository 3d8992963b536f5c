from dataclasses import dataclass
from enum import Enum, IntEnum

import numpy as np


class Direction(IntEnum):
    """Move directions. Values double as env action indices."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


class InitMode(Enum):
    FRESH = "fresh"
    SCRAMBLED = "scrambled"


# Rotation count that turns each direction into a move to the left
# up -> rot 1, down -> rot 3, left -> rot 0, right -> rot 2
_ROTATIONS = {
    Direction.UP: 1,
    Direction.DOWN: 3,
    Direction.LEFT: 0,
    Direction.RIGHT: 2,
}

# First index the skip loop may reach. The down scan stops one cell short.
_SKIP_FLOOR = {
    Direction.UP: 0,
    Direction.DOWN: 1,
    Direction.LEFT: 0,
    Direction.RIGHT: 0,
}

# Highest exponent drawn for scrambled boards (2**11 == 2048)
MAX_SCRAMBLE_EXPONENT = 11


@dataclass(frozen=True)
class MoveOutcome:
    grid: np.ndarray
    changed: bool
    spawned: tuple[int, int] | None = None


def validate_grid(grid: np.ndarray, size: int) -> None:
    """Raise ValueError unless `grid` is a size x size board of 0 or powers of two."""
    arr = np.asarray(grid)
    if arr.shape != (size, size):
        raise ValueError(f"Expected a {size}x{size} grid, got shape {arr.shape}")
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"Grid must hold integers, got dtype {arr.dtype}")
    if (arr < 0).any():
        raise ValueError("Grid cells must be non-negative")
    if (arr > np.iinfo(np.int32).max).any():
        raise ValueError("Grid cells must fit in int32")
    nz = arr[arr != 0]
    if np.any(nz & (nz - 1)):
        raise ValueError("Non-zero grid cells must be powers of two")


def _slide_line(line: np.ndarray, floor: int = 0) -> None:
    """Slide and merge one line toward index 0, in place.

    Cells are scanned from the leading edge backwards. A lifted tile skips
    over empty cells, then lands on an empty cell, merges into an equal tile
    that has not merged yet, or stops just behind a blocking tile.
    """
    merged = [False] * len(line)
    for pos in range(1, len(line)):
        value = int(line[pos])
        if value == 0:
            continue

        line[pos] = 0
        while pos - 1 >= floor and line[pos - 1] == 0:
            pos -= 1

        target = pos - 1
        if target < 0:
            line[pos] = value
        elif line[target] == 0:
            line[target] = value
        elif line[target] == value and not merged[target]:
            line[target] = value * 2
            merged[target] = True
        else:
            line[pos] = value


class BoardEngine:
    """Board initialization and move transitions for an N x N board.

    The engine keeps no board state. Callers hold the current grid and pass
    it in; every returned grid is a fresh array.
    """

    def __init__(
        self,
        size: int = 4,
        spawn_prob_2: float = 0.75,
        distinct_start_tiles: bool = False,
        rng: np.random.Generator | None = None,
    ):
        if int(size) < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = int(size)
        self.spawn_prob_2 = float(spawn_prob_2)
        self.distinct_start_tiles = bool(distinct_start_tiles)
        self.rng = rng if rng is not None else np.random.default_rng()

    def initialize(self, mode: InitMode | str = InitMode.FRESH) -> np.ndarray:
        mode = InitMode(mode)
        if mode is InitMode.SCRAMBLED:
            exponents = self.rng.integers(0, MAX_SCRAMBLE_EXPONENT + 1, size=(self.size, self.size))
            grid = (2 ** exponents).astype(np.int32)
            grid[grid == 1] = 0
            return grid

        grid = np.zeros((self.size, self.size), dtype=np.int32)
        cells = self.size * self.size
        if self.distinct_start_tiles and cells > 1:
            picks = self.rng.choice(cells, size=2, replace=False)
        else:
            # Independent draws; both tiles may land on the same cell
            picks = self.rng.integers(0, cells, size=2)
        for idx in picks:
            y, x = divmod(int(idx), self.size)
            grid[y, x] = self._tile_value()
        return grid

    def compute_next_board(self, grid: np.ndarray, direction: Direction | int) -> np.ndarray:
        """Return the board after sliding and merging every line toward `direction`."""
        direction = Direction(direction)
        validate_grid(grid, self.size)

        k = _ROTATIONS[direction]
        floor = _SKIP_FLOOR[direction]
        work = np.rot90(np.asarray(grid, dtype=np.int32), k).copy()
        for i in range(self.size):
            _slide_line(work[i, :], floor)

        # rotate back
        return np.ascontiguousarray(np.rot90(work, (4 - k) % 4))

    def spawn_tile(self, grid: np.ndarray) -> tuple[np.ndarray, tuple[int, int] | None]:
        new_grid = np.array(grid, dtype=np.int32, copy=True)
        empty_positions = np.argwhere(new_grid == 0)
        if empty_positions.size == 0:
            return new_grid, None
        idx = self.rng.integers(0, len(empty_positions))
        y, x = (int(v) for v in empty_positions[idx])
        new_grid[y, x] = self._tile_value()
        return new_grid, (y, x)

    def move(self, grid: np.ndarray, direction: Direction | int) -> MoveOutcome:
        """Apply a move and, if anything changed, spawn one tile."""
        candidate = self.compute_next_board(grid, direction)
        if np.array_equal(candidate, grid):
            return MoveOutcome(grid=candidate, changed=False)
        new_grid, spawned = self.spawn_tile(candidate)
        return MoveOutcome(grid=new_grid, changed=True, spawned=spawned)

    def valid_directions(self, grid: np.ndarray) -> list[Direction]:
        return [d for d in Direction if not np.array_equal(self.compute_next_board(grid, d), grid)]

    def _tile_value(self) -> int:
        return 2 if self.rng.random() < self.spawn_prob_2 else 4
