from .query import SolveResult, solve
from .model import LadderSolver

__all__ = ["SolveResult", "solve", "LadderSolver"]
