"""Ultimate tic-tac-toe: board state and rules, and a terminal game loop."""

__version__ = "0.1.0"
__all__ = ["game", "state"]