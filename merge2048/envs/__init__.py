from .game2048 import Game2048Env, make_env

__all__ = ["Game2048Env", "make_env"]
