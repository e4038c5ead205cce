"""
Search strategies for the hill climbing search.

A strategy decides how a fresh solution is generated at every restart, how
many clusters the neighborhood scan may use, and which neighbors are
feasible. The unconstrained strategy accepts every neighbor.
"""

from typing import List, Optional
import numpy as np

from clustering.config_loader import ConfigurationError
from .data_models import SizeBounds
from .generators import generate_random, generate_constrained, feasible_cluster_range


class UnconstrainedStrategy:
    """Every class may go to any of class_count clusters."""

    name = "unconstrained"
    constrained = False

    def __init__(self, class_count: int, rng: np.random.Generator):
        if class_count <= 0:
            raise ConfigurationError(f"Class count must be positive, got {class_count}")

        self.class_count = class_count
        self.cluster_count = class_count
        self.rng = rng

    def generate_initial_solution(self) -> List[int]:
        return generate_random(self.class_count, self.cluster_count, self.rng)

    def is_feasible(self, solution: List[int]) -> bool:
        return True

    def describe(self) -> dict:
        return {"strategy": self.name}


class SizeConstrainedStrategy:
    """
    Every cluster holds between min_size and max_size classes.

    The cluster count is drawn again from the feasible range each time a
    solution is generated; the neighborhood scan then works on that count.
    """

    name = "size_constrained"
    constrained = True

    def __init__(
        self,
        class_count: int,
        bounds: SizeBounds,
        rng: np.random.Generator
    ):
        """
        Validate the bounds against the class count.

        Args:
            class_count: Number of classes
            bounds: Minimum and maximum size of each cluster
            rng: Random number generator

        Raises:
            ConfigurationError: If no clustering can satisfy the bounds
        """
        if class_count < bounds.min_size or class_count < bounds.max_size:
            raise ConfigurationError(
                "Impossible to create clusters with given minClusterSize/maxClusterSize. "
                f"classCount too small ({class_count})"
            )

        self.class_count = class_count
        self.bounds = bounds
        self.rng = rng
        self.min_cluster_count, self.max_cluster_count = feasible_cluster_range(
            class_count, bounds.min_size, bounds.max_size
        )
        self.cluster_count: Optional[int] = None

    def generate_initial_solution(self) -> List[int]:
        solution, self.cluster_count = generate_constrained(
            self.class_count, self.bounds.min_size, self.bounds.max_size, self.rng
        )
        return solution

    def is_feasible(self, solution: List[int]) -> bool:
        """
        Check that every non-empty cluster respects the bounds.

        Clusters emptied by a move are not counted; every class must still
        sit in [0, cluster_count).
        """
        sizes = np.bincount(np.asarray(solution, dtype=np.int64), minlength=self.cluster_count)
        if len(sizes) > self.cluster_count:
            return False
        return all(self.bounds.contains(int(size)) for size in sizes[sizes > 0])

    def describe(self) -> dict:
        return {
            "strategy": self.name,
            "min_cluster_size": self.bounds.min_size,
            "max_cluster_size": self.bounds.max_size,
            "cluster_count_range": (self.min_cluster_count, self.max_cluster_count),
        }


def create_strategy(
    class_count: int,
    rng: np.random.Generator,
    size_bounds: Optional[SizeBounds] = None
):
    """Strategy for the given bounds, or the unconstrained one without bounds."""
    if size_bounds is None:
        return UnconstrainedStrategy(class_count, rng)
    return SizeConstrainedStrategy(class_count, size_bounds, rng)
