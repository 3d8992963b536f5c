"""merge2048: sliding-tile merge puzzle engine and Gym environment.

Expose the move engine as `BoardEngine` and the stateful game as `Game2048Env`.
"""

from .core.board import BoardEngine, Direction, InitMode, MoveOutcome
from .envs.game2048 import Game2048Env, make_env

__all__ = ["BoardEngine", "Direction", "InitMode", "MoveOutcome", "Game2048Env", "make_env"]
