"""
Modularization Quality Calculator

Keeps the cluster of every class of a project and the number of intra- and
inter-cluster dependencies of every cluster, so that moving a single class
only touches the dependencies of that class.

MQ is the sum over non-empty clusters of the cluster factor

    CF(k) = 2 * intra(k) / (2 * intra(k) + inter(k))

where inter(k) counts dependencies with exactly one end in cluster k.
"""

from typing import List, Optional
import numpy as np

from .project_model import Project


class ClusteringCalculator:
    """
    Fitness oracle for the clustering problem.

    A calculator is mutable state owned by exactly one search at a time;
    move_class() changes are visible to the next MQ query.
    """

    def __init__(self, project: Project, cluster_count: Optional[int] = None):
        """
        Initialize the calculator with every class in cluster 0

        Args:
            project: Project whose classes will be distributed into clusters
            cluster_count: Number of available clusters (defaults to class count)
        """
        self.class_count = project.get_class_count()
        self.cluster_count = cluster_count if cluster_count is not None else self.class_count

        if self.class_count <= 0:
            raise ValueError(f"Project {project.name} has no classes")
        if self.cluster_count <= 0:
            raise ValueError(f"Cluster count must be positive, got {self.cluster_count}")

        # Undirected view of the dependency graph: a pair of mutual dependencies
        # weighs 2 on both sides
        self.neighbors: List[dict] = [dict() for _ in range(self.class_count)]
        for source, target in project.dependency_edges():
            self.neighbors[source][target] = self.neighbors[source].get(target, 0) + 1
            self.neighbors[target][source] = self.neighbors[target].get(source, 0) + 1

        self.clusters = np.zeros(self.class_count, dtype=np.int64)
        self.intra_edges = np.zeros(self.cluster_count, dtype=np.int64)
        self.inter_edges = np.zeros(self.cluster_count, dtype=np.int64)
        self.intra_edges[0] = len(project.dependency_edges())

    def move_class(self, class_index: int, cluster: int):
        """Move a class to a cluster, updating the dependency counts"""
        if not 0 <= cluster < self.cluster_count:
            raise IndexError(f"Cluster {cluster} out of range [0, {self.cluster_count})")

        old_cluster = int(self.clusters[class_index])
        if old_cluster == cluster:
            return

        for neighbor, weight in self.neighbors[class_index].items():
            neighbor_cluster = int(self.clusters[neighbor])

            if neighbor_cluster == old_cluster:
                self.intra_edges[old_cluster] -= weight
            else:
                self.inter_edges[old_cluster] -= weight
                self.inter_edges[neighbor_cluster] -= weight

            if neighbor_cluster == cluster:
                self.intra_edges[cluster] += weight
            else:
                self.inter_edges[cluster] += weight
                self.inter_edges[neighbor_cluster] += weight

        self.clusters[class_index] = cluster

    def calculate_modularization_quality(self) -> float:
        """MQ of the current cluster state"""
        mask = self.intra_edges > 0
        intra = 2.0 * self.intra_edges[mask]
        return float(np.sum(intra / (intra + self.inter_edges[mask])))

    def get_solution(self) -> List[int]:
        """Current cluster of every class"""
        return self.clusters.tolist()

    def get_cluster_sizes(self) -> np.ndarray:
        return np.bincount(self.clusters, minlength=self.cluster_count)


def calculate_mq(project: Project, solution: List[int]) -> float:
    """
    Compute the MQ of a complete assignment on a fresh calculator

    Args:
        project: Project whose classes are clustered
        solution: Cluster index of every class

    Returns:
        Modularization quality of the assignment
    """
    cluster_count = max(project.get_class_count(), max(solution) + 1)
    calculator = ClusteringCalculator(project, cluster_count)
    for class_index, cluster in enumerate(solution):
        calculator.move_class(class_index, cluster)
    return calculator.calculate_modularization_quality()
