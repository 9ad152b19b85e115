"""Two-stack sorting: a solver that emits push_swap instructions and a checker that replays them."""

__version__ = "0.1.0"