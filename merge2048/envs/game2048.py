import logging

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from merge2048.core.board import BoardEngine, Direction, InitMode

log = logging.getLogger(__name__)


class Game2048Env(gym.Env):
    """
    Gymnasium-compatible 2048 game that owns the current board.

    - Actions: 0=up, 1=down, 2=left, 3=right (see `Direction`)
    - Observation: (size, size) int32 grid of tile values
    - Reward: always 0.0, no score is kept
    - Terminated/Truncated: always False, the game has no terminal state
    - Reset options: {"mode": "fresh" | "scrambled"}
    """

    metadata = {"render_modes": ["human", "ansi"]}

    def __init__(
        self,
        size: int = 4,
        spawn_prob_2: float = 0.75,
        distinct_start_tiles: bool = False,
        start_mode: str = "fresh",
        render_mode: str | None = None,
    ):
        super().__init__()
        self.size = int(size)
        self.start_mode = InitMode(start_mode)
        self.render_mode = render_mode
        self.engine = BoardEngine(
            size=self.size,
            spawn_prob_2=spawn_prob_2,
            distinct_start_tiles=distinct_start_tiles,
            rng=self.np_random,
        )

        # 4 directions
        self.action_space = spaces.Discrete(len(Direction))
        # Conservative upper bound for tile values
        self.observation_space = spaces.Box(low=0, high=2 ** 16, shape=(self.size, self.size), dtype=np.int32)

        self.board: np.ndarray | None = None

    def reset(self, *, seed: int | None = None, options: dict | None = None):
        super().reset(seed=seed)
        # np_random is replaced when reseeded
        self.engine.rng = self.np_random
        mode = InitMode((options or {}).get("mode", self.start_mode))
        self.board = self.engine.initialize(mode)
        log.debug("New %dx%d board (%s)", self.size, self.size, mode.value)
        info = {
            "mode": mode.value,
            "max_tile": int(self.board.max()),
            "valid_actions": self._valid_actions(),
        }
        return self.board.copy(), info

    def new_game(self) -> np.ndarray:
        obs, _ = self.reset(options={"mode": InitMode.FRESH})
        return obs

    def mid_game(self) -> np.ndarray:
        obs, _ = self.reset(options={"mode": InitMode.SCRAMBLED})
        return obs

    def step(self, action: int):
        if not self.action_space.contains(action):
            raise gym.error.InvalidAction(f"Invalid action: {action}")
        assert self.board is not None

        direction = Direction(int(action))
        outcome = self.engine.move(self.board, direction)
        self.board = outcome.grid
        log.debug("%s: moved=%s spawned=%s", direction.name.lower(), outcome.changed, outcome.spawned)

        info = {
            "moved": outcome.changed,
            "spawned": outcome.spawned,
            "max_tile": int(self.board.max()),
            "valid_actions": self._valid_actions(),
        }
        return self.board.copy(), 0.0, False, False, info

    def render(self):
        assert self.board is not None
        lines = ["+" + "------+" * self.size]
        for r in range(self.size):
            row = "|".join(f"{int(v):^6}" if v > 0 else "      " for v in self.board[r])
            lines.append("|" + row + "|")
            lines.append("+" + "------+" * self.size)
        text = "\n".join(lines) + "\n"
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human" or self.render_mode is None:
            print(text)

    def _valid_actions(self) -> np.ndarray:
        """Return boolean mask of actions that would change the board."""
        assert self.board is not None
        mask = np.zeros(len(Direction), dtype=bool)
        for d in self.engine.valid_directions(self.board):
            mask[d] = True
        return mask


def make_env(cfg_env) -> Game2048Env:
    return Game2048Env(
        size=int(cfg_env.size),
        spawn_prob_2=float(cfg_env.spawn_prob_2),
        distinct_start_tiles=bool(cfg_env.get("distinct_start_tiles", False)),
        start_mode=str(cfg_env.get("start_mode", "fresh")),
        render_mode=cfg_env.get("render_mode"),
    )
