"""
Random solution generators for the hill climbing search.

Unconstrained solutions draw every cluster independently; constrained
solutions first pick a feasible number of clusters and then fill the
clusters so that every size stays within the bounds.
"""

from typing import List, Tuple
import numpy as np

from clustering.config_loader import ConfigurationError


def generate_random(
    class_count: int,
    cluster_count: int,
    rng: np.random.Generator
) -> List[int]:
    """
    Assign every class to a uniformly random cluster.

    Args:
        class_count: Number of classes
        cluster_count: Number of available clusters
        rng: Random number generator

    Returns:
        Cluster index in [0, cluster_count) for every class
    """
    return rng.integers(0, cluster_count, size=class_count).tolist()


def feasible_cluster_range(
    class_count: int,
    min_size: int,
    max_size: int
) -> Tuple[int, int]:
    """
    Range of cluster counts compatible with the size bounds.

    The upper end is the largest K with K * min_size <= class_count, the
    lower end the smallest K with K * max_size >= class_count.

    Args:
        class_count: Number of classes
        min_size: Minimum size of each cluster
        max_size: Maximum size of each cluster

    Returns:
        Tuple of (min_cluster_count, max_cluster_count), both inclusive

    Raises:
        ConfigurationError: If no cluster count satisfies both bounds
    """
    if min_size < 1 or max_size < 1:
        raise ConfigurationError(
            f"Cluster size bounds must be positive, got [{min_size}, {max_size}]"
        )

    max_count = class_count // min_size
    min_count = -(-class_count // max_size)

    if min_count > max_count or max_count < 1:
        raise ConfigurationError(
            f"Impossible to create clusters of {min_size} to {max_size} classes "
            f"for {class_count} classes"
        )

    return min_count, max_count


def select_cluster_count(
    class_count: int,
    min_size: int,
    max_size: int,
    rng: np.random.Generator
) -> int:
    """Draw a cluster count uniformly from the feasible range."""
    min_count, max_count = feasible_cluster_range(class_count, min_size, max_size)
    return int(rng.integers(min_count, max_count, endpoint=True))


def generate_constrained(
    class_count: int,
    min_size: int,
    max_size: int,
    rng: np.random.Generator
) -> Tuple[List[int], int]:
    """
    Generate a solution respecting the minimum and maximum cluster sizes.

    Algorithm:
    1. Select the number of clusters from the feasible range
    2. Fill each cluster, in order, with min_size classes drawn without
       replacement from the unassigned ones
    3. Assign every remaining class to a random cluster that is not full

    Args:
        class_count: Number of classes
        min_size: Minimum size of each cluster
        max_size: Maximum size of each cluster
        rng: Random number generator

    Returns:
        Tuple of (solution, cluster_count)
    """
    cluster_count = select_cluster_count(class_count, min_size, max_size, rng)

    solution = [0] * class_count
    sizes = [0] * cluster_count
    unassigned = list(range(class_count))

    for cluster in range(cluster_count):
        while sizes[cluster] < min_size:
            position = int(rng.integers(0, len(unassigned)))
            solution[unassigned.pop(position)] = cluster
            sizes[cluster] += 1

    for class_index in unassigned:
        not_full = [cluster for cluster in range(cluster_count) if sizes[cluster] < max_size]
        cluster = not_full[int(rng.integers(0, len(not_full)))]
        solution[class_index] = cluster
        sizes[cluster] += 1

    return solution, cluster_count
