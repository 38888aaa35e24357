"""Sort integers on two stacks with a restricted set of moves and report the moves."""

__version__ = "0.1.0"
__all__ = ["__version__"]