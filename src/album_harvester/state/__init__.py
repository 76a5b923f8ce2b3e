from .cursor import batch_count, next_batch
from .manager import StateError, StateManager

__all__ = ["StateError", "StateManager", "batch_count", "next_batch"]
