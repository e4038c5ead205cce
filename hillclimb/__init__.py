"""
Hill Climbing Search for Module Clustering

This package partitions the classes of a project into clusters by
first-improvement hill climbing with random restarts, maximizing a
fitness computed by an external oracle.

Key Features:
- External fitness evaluation (any object with move_class/MQ/get_solution)
- One global evaluation budget shared by all restarts
- Optional minimum/maximum cluster size constraints
- Reproducible runs from a seeded numpy Generator

Modules:
- data_models: Neighborhood results, size bounds, best solution, search result
- generators: Unconstrained and size-constrained random solutions
- strategies: Solution generation and feasibility per search variant
- search: Neighborhood visit, local search and restart loop
- progress: Progress sinks (console, CSV trace, in-memory recorder)
- orchestration: Single-run and trials workflows
- cli: Run configuration loading and mode dispatch
"""

__version__ = "0.1.0"
__author__ = "Module Clustering Team"

from .data_models import (
    BestSolution,
    Exhausted,
    FoundBetter,
    NeighborhoodStatus,
    NoBetter,
    SearchResult,
    SizeBounds,
)
from .search import HillClimbingSearch, run_hill_climbing
from .strategies import SizeConstrainedStrategy, UnconstrainedStrategy

__all__ = [
    "BestSolution",
    "Exhausted",
    "FoundBetter",
    "NeighborhoodStatus",
    "NoBetter",
    "SearchResult",
    "SizeBounds",
    "HillClimbingSearch",
    "run_hill_climbing",
    "SizeConstrainedStrategy",
    "UnconstrainedStrategy",
]
