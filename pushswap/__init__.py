"""Two-stack sorting puzzle: a solver that lists operations and a checker that verifies them."""

__version__ = "1.0.0"
__all__ = ["args", "cli", "solver", "stacks"]