from .solver import NoSolutionError, SolveResult, solve

__all__ = [
    "solve",
    "SolveResult",
    "NoSolutionError",
]
