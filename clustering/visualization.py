"""
Visualization for Clustering Results

Plots the convergence trace of a search and the cluster sizes of the best
solution found.
"""

import matplotlib.pyplot as plt
import numpy as np
from typing import Dict, List, Optional, Tuple


class ClusteringVisualizer:
    """Plots for hill climbing clustering runs"""

    def __init__(self, title: str = "Hill Climbing Clustering"):
        self.title = title

    def plot_convergence(self,
                         trace: List[Tuple[int, float]],
                         ax: Optional[plt.Axes] = None,
                         reference_fitness: Optional[float] = None):
        """
        Plot best fitness against the number of evaluations

        Args:
            trace: (evaluations, best fitness) pairs
            ax: Axes to draw on (a new figure is created when omitted)
            reference_fitness: MQ of the declared package layout, drawn as a reference line
        """
        if ax is None:
            _, ax = plt.subplots(figsize=(8, 4))

        if trace:
            evaluations, fitness = zip(*trace)
            ax.step(evaluations, fitness, where='post', color='tab:blue', label='best MQ')
            ax.scatter(evaluations, fitness, s=10, color='tab:blue')
        else:
            ax.text(0.5, 0.5, 'No progress recorded', ha='center', va='center',
                    transform=ax.transAxes)

        if reference_fitness is not None:
            ax.axhline(reference_fitness, color='gray', linestyle='--', linewidth=1, label='package MQ')

        ax.set_xlabel('Evaluations')
        ax.set_ylabel('Modularization quality')
        ax.set_title('Convergence')
        ax.grid(True, alpha=0.3)
        if trace or reference_fitness is not None:
            ax.legend(loc='lower right')
        return ax

    def plot_cluster_sizes(self,
                           cluster_sizes: Dict[int, int],
                           ax: Optional[plt.Axes] = None,
                           size_bounds: Optional[Tuple[int, int]] = None):
        """
        Bar chart of the number of classes per cluster

        Args:
            cluster_sizes: Cluster index to number of classes
            ax: Axes to draw on (a new figure is created when omitted)
            size_bounds: Optional (min, max) cluster size drawn as horizontal lines
        """
        if ax is None:
            _, ax = plt.subplots(figsize=(8, 4))

        clusters = sorted(cluster_sizes)
        sizes = np.array([cluster_sizes[c] for c in clusters])
        ax.bar(range(len(clusters)), sizes, color='tab:orange', edgecolor='k')
        ax.set_xticks(range(len(clusters)))
        ax.set_xticklabels([str(c) for c in clusters], rotation=90 if len(clusters) > 20 else 0)

        if size_bounds is not None:
            min_size, max_size = size_bounds
            ax.axhline(min_size, color='red', linestyle='--', linewidth=1, label=f'min {min_size}')
            ax.axhline(max_size, color='red', linestyle=':', linewidth=1, label=f'max {max_size}')
            ax.legend(loc='upper right')

        ax.set_xlabel('Cluster')
        ax.set_ylabel('Classes')
        ax.set_title(f'Cluster sizes ({len(clusters)} clusters)')
        return ax

    def plot_search_summary(self,
                            trace: List[Tuple[int, float]],
                            cluster_sizes: Dict[int, int],
                            size_bounds: Optional[Tuple[int, int]] = None,
                            figsize: Tuple[int, int] = (14, 5),
                            save_path: Optional[str] = None,
                            reference_fitness: Optional[float] = None):
        """Convergence and cluster sizes side by side"""
        fig, (ax_trace, ax_sizes) = plt.subplots(1, 2, figsize=figsize)
        self.plot_convergence(trace, ax_trace, reference_fitness)
        self.plot_cluster_sizes(cluster_sizes, ax_sizes, size_bounds)
        fig.suptitle(self.title)
        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')
            plt.close(fig)
        return fig
