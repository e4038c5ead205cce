"""
Orchestration module for the hill climbing search.

Implements the single-run and multiple-trials workflows: load the project,
build the MQ calculator, run the search and print the reports.
"""

import time
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np

from clustering.cda_reader import read_project
from clustering.config_loader import (
    get_output_config,
    get_search_config,
    get_size_bounds,
    load_config,
    resolve_project_path,
    resolve_random_seed,
    validate_config,
    ConfigurationError
)
from clustering.mq_calculator import ClusteringCalculator, calculate_mq
from clustering.project_model import Project

from .data_models import SearchResult, SizeBounds, format_solution
from .progress import CsvProgressWriter, PrintProgress, ProgressFanout, ProgressRecorder
from .search import run_hill_climbing


def load_search_setup(config_path: str) -> Tuple[Dict, Project, Optional[SizeBounds]]:
    """
    Load and validate configuration, then read the project.

    Returns:
        Tuple of (config, project, size_bounds)

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    config = load_config(config_path)

    issues = validate_config(config)
    if issues:
        raise ConfigurationError("; ".join(issues))

    project_path = resolve_project_path(config, config_path)
    print(f"Loading project from: {project_path}")
    project = read_project(project_path)
    print(f"Project: {project.name}")
    print(f"  Classes: {project.get_class_count()}")
    print(f"  Packages: {project.get_package_count()}")
    print(f"  Dependencies: {project.get_dependency_count()}")

    bounds = get_size_bounds(config)
    size_bounds = SizeBounds(*bounds) if bounds is not None else None

    return config, project, size_bounds


def run_search(
    project: Project,
    max_evaluations: int,
    seed: int,
    size_bounds: Optional[SizeBounds] = None,
    progress=None
) -> SearchResult:
    """Run one seeded search on a fresh calculator."""
    calculator = ClusteringCalculator(project)
    start_time = time.time()

    result = run_hill_climbing(
        project.get_class_count(),
        calculator,
        max_evaluations,
        seed=seed,
        size_bounds=size_bounds,
        progress=progress
    )

    result.metadata['elapsed_seconds'] = time.time() - start_time
    return result


def print_search_report(project: Project, result: SearchResult, size_bounds: Optional[SizeBounds] = None):
    """Print the outcome of a search next to the original package layout."""
    print()
    print("=" * 70)
    print("SEARCH RESULT")
    print("=" * 70)

    original_mq = calculate_mq(project, project.package_assignment())
    improvement = result.fitness - original_mq

    print(f"Best MQ: {result.fitness:.6f}")
    print(f"Original package MQ: {original_mq:.6f} ({improvement:+.6f})")
    print(f"Evaluations: {result.evaluations}")
    print(f"Random restarts: {result.restart_count}")
    print(f"Best found in restart: {result.restart_best_found}")
    print(f"Clusters used: {result.used_cluster_count()} of {result.cluster_count}")

    if size_bounds is not None:
        sizes = list(result.cluster_sizes().values())
        print(f"Cluster sizes: {min(sizes)} - {max(sizes)} "
              f"(bounds {size_bounds.min_size} - {size_bounds.max_size})")

    if 'elapsed_seconds' in result.metadata:
        print(f"Elapsed: {result.metadata['elapsed_seconds']:.3f} seconds")

    print(f"Solution: {format_solution(result.solution)}")


def run_single_mode(config_path: str) -> SearchResult:
    """
    Run one search as described by the configuration file.

    Algorithm:
        1. Load config, project and size bounds
        2. Setup seed and progress sinks (console, optional CSV trace)
        3. Run the search
        4. Print report and, if configured, save the convergence plot

    Returns:
        SearchResult of the run
    """
    print("=" * 70)
    print("HILL CLIMBING CLUSTERING")
    print("=" * 70)

    config, project, size_bounds = load_search_setup(config_path)
    search_config = get_search_config(config)
    output_config = get_output_config(config)

    seed = resolve_random_seed(search_config['random_seed'])
    print(f"Random seed: {seed}")
    print(f"Max evaluations: {search_config['max_evaluations']}")
    print()

    recorder = ProgressRecorder()
    csv_writer = None
    if output_config.get('progress_csv'):
        csv_writer = CsvProgressWriter(output_config['progress_csv'])

    try:
        progress = ProgressFanout(PrintProgress(), recorder, csv_writer)
        result = run_search(
            project, search_config['max_evaluations'], seed, size_bounds, progress
        )
    finally:
        if csv_writer is not None:
            csv_writer.close()

    recorder(result.evaluations, result.fitness)
    print_search_report(project, result, size_bounds)

    if output_config.get('plot'):
        package_mq = calculate_mq(project, project.package_assignment())
        save_convergence_plot(
            result, recorder, output_config['plot'], size_bounds, package_mq
        )

    return result


def save_convergence_plot(
    result: SearchResult,
    recorder: ProgressRecorder,
    plot_path: str,
    size_bounds: Optional[SizeBounds] = None,
    package_mq: Optional[float] = None
):
    """Save the convergence and cluster size plots of a run."""
    import matplotlib
    matplotlib.use('Agg')
    from clustering.visualization import ClusteringVisualizer

    Path(plot_path).parent.mkdir(parents=True, exist_ok=True)
    bounds = (size_bounds.min_size, size_bounds.max_size) if size_bounds is not None else None

    try:
        ClusteringVisualizer().plot_search_summary(
            recorder.trace, result.cluster_sizes(), bounds,
            save_path=plot_path, reference_fitness=package_mq
        )
        print(f"  ✓ Plot: {plot_path}")
    except Exception as e:
        print(f"  ✗ Plot: Failed - {e}")


def run_trials_mode(config_path: str, num_trials: int) -> List[SearchResult]:
    """
    Run several independent searches with consecutive seeds.

    Returns:
        List of SearchResult, one per trial
    """
    print("=" * 70)
    print(f"RUNNING {num_trials} TRIALS")
    print("=" * 70)

    config, project, size_bounds = load_search_setup(config_path)
    search_config = get_search_config(config)
    base_seed = resolve_random_seed(search_config['random_seed'])

    results = []
    for trial in range(num_trials):
        seed = base_seed + trial
        print(f"\nTrial {trial + 1}/{num_trials} (seed {seed})...")
        result = run_search(project, search_config['max_evaluations'], seed, size_bounds)
        print(f"  MQ: {result.fitness:.6f}, restarts: {result.restart_count}")
        results.append(result)

    print_trials_summary(results)
    return results


def print_trials_summary(results: List[SearchResult]):
    """Print a table of trial results with fitness statistics."""
    print("\n" + "=" * 70)
    print("TRIAL SUMMARY")
    print("=" * 70)
    print("Trial | Seed      | MQ         | Restarts | Best@ | Clusters")
    print("------|-----------|------------|----------|-------|---------")

    for trial, r in enumerate(results, start=1):
        print(f"{trial:5} | {r.seed:9} | {r.fitness:10.6f} | {r.restart_count:8} | "
              f"{r.restart_best_found:5} | {r.used_cluster_count():8}")

    if results:
        fitness = np.array([r.fitness for r in results])
        best = results[int(np.argmax(fitness))]

        print(f"\nMQ Statistics:")
        print(f"  Average: {fitness.mean():.6f}")
        print(f"  Range: {fitness.min():.6f} - {fitness.max():.6f}")
        print(f"  Std Dev: {fitness.std():.6f}")
        print(f"  Best seed: {best.seed}")
