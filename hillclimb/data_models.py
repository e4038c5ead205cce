"""
Data models for the hill climbing search.

Core data structures: neighborhood visit results, size bounds, the best
solution tracked across restarts and the final search result.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Protocol, Union

import numpy as np

from clustering.config_loader import ConfigurationError


class FitnessOracle(Protocol):
    """Mutable fitness state queried by the search."""

    def move_class(self, class_index: int, cluster: int) -> None: ...

    def calculate_modularization_quality(self) -> float: ...

    def get_solution(self) -> list[int]: ...


class NeighborhoodStatus(Enum):
    """Possible outcomes of a neighborhood visit"""
    FOUND_BETTER_NEIGHBOR = "found_better_neighbor"
    NO_BETTER_NEIGHBOR = "no_better_neighbor"
    SEARCH_EXHAUSTED = "search_exhausted"


@dataclass(frozen=True)
class FoundBetter:
    """A strictly improving neighbor was accepted."""
    fitness: float
    status = NeighborhoodStatus.FOUND_BETTER_NEIGHBOR


@dataclass(frozen=True)
class NoBetter:
    """No neighbor improves on the starting solution (local optimum)."""
    status = NeighborhoodStatus.NO_BETTER_NEIGHBOR


@dataclass(frozen=True)
class Exhausted:
    """The evaluation budget ran out during the visit."""
    status = NeighborhoodStatus.SEARCH_EXHAUSTED


NeighborhoodResult = Union[FoundBetter, NoBetter, Exhausted]


@dataclass(frozen=True)
class SizeBounds:
    """
    Minimum and maximum number of classes per cluster.

    Attributes:
        min_size: Minimum size of each cluster
        max_size: Maximum size of each cluster
    """
    min_size: int
    max_size: int

    def __post_init__(self):
        """Validate bounds."""
        if self.min_size > self.max_size:
            raise ConfigurationError("minClusterSize cannot be bigger than maxClusterSize")
        if self.min_size < 1:
            raise ConfigurationError(f"minClusterSize must be positive, got {self.min_size}")

    def contains(self, size: int) -> bool:
        return self.min_size <= size <= self.max_size


@dataclass
class BestSolution:
    """
    Best solution found so far.

    Attributes:
        solution: Cluster index of every class
        fitness: Fitness of the solution
        restart: Random restart in which the solution was found
        cluster_count: Number of clusters available when it was found
    """
    solution: list[int]
    fitness: float
    restart: int = 0
    cluster_count: int = 0

    def update(self, solution: list[int], fitness: float, restart: int, cluster_count: int):
        """Overwrite with a copy of a better solution."""
        self.solution = list(solution)
        self.fitness = fitness
        self.restart = restart
        self.cluster_count = cluster_count


@dataclass
class SearchResult:
    """
    Outcome of a complete hill climbing run.

    Attributes:
        solution: Best assignment found
        fitness: Fitness of the best assignment
        restart_count: Number of random restarts executed
        restart_best_found: Restart in which the best assignment was found
        evaluations: Number of fitness evaluations executed
        cluster_count: Number of clusters available when the best was found
        seed: Random seed of the run, if known
        metadata: Additional information (strategy, size bounds, timings, etc.)
    """
    solution: list[int]
    fitness: float
    restart_count: int
    restart_best_found: int
    evaluations: int
    cluster_count: int
    seed: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def cluster_sizes(self) -> dict[int, int]:
        """Number of classes in each non-empty cluster."""
        sizes = np.bincount(np.asarray(self.solution, dtype=np.int64))
        return {int(cluster): int(size) for cluster, size in enumerate(sizes) if size > 0}

    def used_cluster_count(self) -> int:
        return len(self.cluster_sizes())

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the result to a dictionary for reports.

        Returns:
            Dictionary with plain Python values
        """
        return {
            "fitness": self.fitness,
            "restart_count": self.restart_count,
            "restart_best_found": self.restart_best_found,
            "evaluations": self.evaluations,
            "cluster_count": self.cluster_count,
            "used_clusters": self.used_cluster_count(),
            "seed": self.seed,
            "solution": format_solution(self.solution),
        }


def format_solution(solution: list[int]) -> str:
    """Print a solution as '[a b c]'."""
    return "[" + " ".join(str(cluster) for cluster in solution) + "]"
