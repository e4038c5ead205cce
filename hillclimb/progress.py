"""
Progress sinks for the hill climbing search.

A sink is any callable taking (evaluations, fitness). The search notifies it
every PROGRESS_INTERVAL evaluations with the best fitness found so far.
"""

import csv
from pathlib import Path
from typing import List, Tuple, Union

PROGRESS_INTERVAL = 10000


class PrintProgress:
    """Print progress lines to the console."""

    def __init__(self, prefix: str = "  "):
        self.prefix = prefix

    def __call__(self, evaluations: int, fitness: float):
        print(f"{self.prefix}Evaluations: {evaluations:>9} | Best fitness: {fitness:.6f}")


class ProgressRecorder:
    """Keep the progress trace in memory (used for convergence plots)."""

    def __init__(self):
        self.trace: List[Tuple[int, float]] = []

    def __call__(self, evaluations: int, fitness: float):
        self.trace.append((evaluations, fitness))

    def evaluations(self) -> List[int]:
        return [evaluations for evaluations, _ in self.trace]

    def fitness_values(self) -> List[float]:
        return [fitness for _, fitness in self.trace]

    def __len__(self) -> int:
        return len(self.trace)


class CsvProgressWriter:
    """
    Write the progress trace as 'evaluations;fitness' lines.

    Usable as a context manager; the file is opened on first use.
    """

    def __init__(self, output_path: Union[str, Path], overwrite: bool = True):
        self.output_path = Path(output_path)

        if self.output_path.exists() and not overwrite:
            raise FileExistsError(f"Output file already exists: {self.output_path}")

        self._file = None
        self._writer = None

    def _open(self):
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.output_path, 'w', newline='')
        self._writer = csv.writer(self._file, delimiter=';')

    def __call__(self, evaluations: int, fitness: float):
        if self._writer is None:
            self._open()
        self._writer.writerow([evaluations, fitness])

    def close(self):
        if self._file is not None:
            self._file.close()
            self._file = None
            self._writer = None

    def __enter__(self) -> "CsvProgressWriter":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class ProgressFanout:
    """Forward progress to several sinks."""

    def __init__(self, *sinks):
        self.sinks = [sink for sink in sinks if sink is not None]

    def __call__(self, evaluations: int, fitness: float):
        for sink in self.sinks:
            sink(evaluations, fitness)


def load_progress_csv(csv_path: Union[str, Path]) -> List[Tuple[int, float]]:
    """
    Read a trace written by CsvProgressWriter.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If a line is not 'evaluations;fitness'
    """
    csv_path = Path(csv_path)

    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    trace = []
    with open(csv_path, 'r') as f:
        for row in csv.reader(f, delimiter=';'):
            if not row:
                continue
            if len(row) != 2:
                raise ValueError(f"Invalid progress line in {csv_path}: {row}")
            trace.append((int(row[0]), float(row[1])))
    return trace
