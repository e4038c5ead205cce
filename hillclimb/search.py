"""
Hill climbing search with random restarts.

The search owns its fitness oracle for the whole run: every move and every
evaluation goes through this object, one at a time. Each restart starts
from a fresh random solution and climbs with first-improvement moves of a
single class to another cluster until no move improves the fitness. All
restarts share one evaluation budget; once it runs out the best solution
seen is returned.
"""

from typing import Callable, List, Optional
import numpy as np

from .data_models import (
    BestSolution, Exhausted, FitnessOracle, FoundBetter, NeighborhoodResult,
    NeighborhoodStatus, NoBetter, SearchResult, SizeBounds
)
from .progress import PROGRESS_INTERVAL
from .strategies import create_strategy

ProgressSink = Callable[[int, float], None]


class HillClimbingSearch:
    """
    Hill climbing searcher for the clustering problem.

    Attributes:
        class_count: Number of classes being clustered
        calculator: Fitness oracle, mutated only by this search
        strategy: Solution generator and feasibility check
        max_evaluations: Budget of fitness evaluations
        evaluations: Number of fitness evaluations executed
        random_restart_count: Number of random restarts executed
    """

    def __init__(
        self,
        class_count: int,
        calculator: FitnessOracle,
        max_evaluations: int,
        strategy,
        progress: Optional[ProgressSink] = None
    ):
        """
        Initialize the search.

        Args:
            class_count: Number of classes in the project under evaluation
            calculator: Fitness oracle holding the current cluster of each class
            max_evaluations: Budget of fitness evaluations
            strategy: UnconstrainedStrategy or SizeConstrainedStrategy
            progress: Optional sink notified every PROGRESS_INTERVAL evaluations
        """
        if max_evaluations <= 0:
            raise ValueError(f"max_evaluations must be positive, got {max_evaluations}")

        self.class_count = class_count
        self.calculator = calculator
        self.max_evaluations = max_evaluations
        self.strategy = strategy
        self.progress = progress

        self.evaluations = 0
        self.random_restart_count = 0
        self.best: Optional[BestSolution] = None

    @property
    def fitness(self) -> float:
        """Fitness of the best solution found so far."""
        return self.best.fitness if self.best is not None else float('-inf')

    def apply_solution(self, solution: List[int]):
        """Move every class of the calculator to its cluster in solution."""
        for class_index in range(self.class_count):
            self.calculator.move_class(class_index, solution[class_index])

    def evaluate(self) -> float:
        """Evaluate the calculator state, counting one evaluation."""
        fit = self.calculator.calculate_modularization_quality()
        self.evaluations += 1

        if self.evaluations % PROGRESS_INTERVAL == 0 and self.progress is not None:
            self.progress(self.evaluations, self.fitness)

        return fit

    def _exhausted(self) -> bool:
        return self.evaluations > self.max_evaluations

    def visit_neighbors(self, solution: List[int]) -> NeighborhoodResult:
        """
        Run a neighborhood visit starting from a given solution.

        Neighbors are scanned class by class, cluster by cluster, in
        ascending order; the first one better than the starting solution is
        committed into solution.
        """
        self.apply_solution(solution)
        starting_fitness = self.evaluate()

        if self._exhausted():
            return Exhausted()

        if starting_fitness > self.fitness:
            return FoundBetter(starting_fitness)

        cluster_count = self.strategy.cluster_count

        for i in range(self.class_count):
            for j in range(cluster_count):
                if solution[i] == j:
                    continue

                self.calculator.move_class(i, j)

                if self.strategy.constrained and not self.strategy.is_feasible(
                        self.calculator.get_solution()):
                    self.calculator.move_class(i, solution[i])
                    continue

                neighbor_fitness = self.evaluate()

                if self._exhausted():
                    return Exhausted()

                if neighbor_fitness > starting_fitness:
                    solution[i] = j
                    return FoundBetter(neighbor_fitness)

                self.calculator.move_class(i, solution[i])

        return NoBetter()

    def local_search(self, solution: List[int]) -> bool:
        """
        Climb from a given solution until no neighbor improves it.

        Returns:
            True if a local optimum was reached, False if the budget ran out
        """
        while True:
            result = self.visit_neighbors(solution)

            if result.status is not NeighborhoodStatus.FOUND_BETTER_NEIGHBOR:
                break

            if result.fitness > self.fitness:
                self.best.update(
                    solution, result.fitness,
                    self.random_restart_count, self.strategy.cluster_count
                )

        return result.status is NeighborhoodStatus.NO_BETTER_NEIGHBOR

    def execute(self) -> List[int]:
        """
        Execute the hill climbing search with random restarts.

        Returns:
            Best solution found before the budget ran out
        """
        initial = self.strategy.generate_initial_solution()
        self.apply_solution(initial)
        self.best = BestSolution(
            solution=list(initial),
            fitness=self.evaluate(),
            restart=0,
            cluster_count=self.strategy.cluster_count
        )

        solution = list(initial)

        while self.local_search(solution):
            self.random_restart_count += 1
            solution = self.strategy.generate_initial_solution()

        return self.best.solution

    def result(self, seed: Optional[int] = None) -> SearchResult:
        """Summary of the finished run."""
        if self.best is None:
            raise RuntimeError("Search has not been executed")

        return SearchResult(
            solution=list(self.best.solution),
            fitness=self.best.fitness,
            restart_count=self.random_restart_count,
            restart_best_found=self.best.restart,
            evaluations=self.evaluations,
            cluster_count=self.best.cluster_count,
            seed=seed,
            metadata=self.strategy.describe()
        )


def run_hill_climbing(
    class_count: int,
    calculator: FitnessOracle,
    max_evaluations: int,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    size_bounds: Optional[SizeBounds] = None,
    progress: Optional[ProgressSink] = None
) -> SearchResult:
    """
    Run a complete hill climbing search.

    Args:
        class_count: Number of classes to cluster
        calculator: Fitness oracle for the project
        max_evaluations: Budget of fitness evaluations
        rng: Random number generator (created from seed when not given)
        seed: Random seed, used when rng is not given
        size_bounds: Optional cluster size bounds (constrained variant)
        progress: Optional progress sink

    Returns:
        SearchResult with the best solution, its fitness and restart counts

    Raises:
        ConfigurationError: If the size bounds cannot be satisfied
    """
    if rng is None:
        rng = np.random.default_rng(seed)

    strategy = create_strategy(class_count, rng, size_bounds)
    search = HillClimbingSearch(class_count, calculator, max_evaluations, strategy, progress)
    search.execute()
    return search.result(seed)
