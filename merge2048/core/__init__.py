from .board import BoardEngine, Direction, InitMode, MoveOutcome, validate_grid

__all__ = ["BoardEngine", "Direction", "InitMode", "MoveOutcome", "validate_grid"]
