"""
Shared test fixtures: small projects and scripted fitness oracles.
"""

from clustering.project_model import Project, ProjectClass, DependencyType


SAMPLE_ODEM = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE ODEM PUBLIC "-//PFSW//DTD ODEM 1.1" "http://pfsw.org/ODEM/schema/dtd/odem-1.1.dtd">
<ODEM version="1">
  <context name="shop">
    <container name="shop.jar" classification="jar">
      <namespace name="shop.core">
        <type name="shop.core.Cart" classification="class" visibility="public" isAbstract="no">
          <dependencies count="2">
            <depends-on name="shop.core.Item" classification="uses" />
            <depends-on name="java.lang.Object" classification="extends" />
          </dependencies>
        </type>
        <type name="shop.core.Item" classification="interface" visibility="default" isAbstract="yes">
          <dependencies count="0">
          </dependencies>
        </type>
      </namespace>
      <namespace name="shop.web">
        <type name="shop.web.CartPage" classification="class" visibility="public">
          <dependencies count="2">
            <depends-on name="shop.core.Cart" classification="uses" />
            <depends-on name="shop.core.Item" classification="implements" />
          </dependencies>
        </type>
      </namespace>
    </container>
  </context>
</ODEM>
"""


def build_project(name, packages, dependencies):
    """
    Build a project from plain data.

    Args:
        name: Project name
        packages: Mapping of package name to list of class names
        dependencies: List of (source, target) class name pairs
    """
    project = Project(name)
    for package_name, class_names in packages.items():
        package = project.add_package(package_name)
        for class_name in class_names:
            project.add_class(ProjectClass(class_name, package=package))

    for source, target in dependencies:
        project.get_class_by_name(source).add_dependency(target, DependencyType.USES)

    return project


def two_pairs_project():
    """A<->B and C->D, declared in two packages that split both pairs."""
    return build_project(
        "pairs",
        {"p1": ["A", "C"], "p2": ["B", "D"]},
        [("A", "B"), ("B", "A"), ("C", "D")]
    )


def chain_project(class_count):
    """Classes C0..Cn-1 where each class depends on the next one."""
    names = [f"C{i}" for i in range(class_count)]
    return build_project(
        "chain",
        {"pkg": names},
        [(names[i], names[i + 1]) for i in range(class_count - 1)]
    )


class TargetOracle:
    """
    Fitness is the number of classes sitting in their target cluster.

    Counts MQ queries so tests can check the evaluation accounting.
    """

    def __init__(self, target):
        self.target = list(target)
        self.state = [0] * len(self.target)
        self.calls = 0

    def move_class(self, class_index, cluster):
        self.state[class_index] = cluster

    def calculate_modularization_quality(self):
        self.calls += 1
        return float(sum(1 for s, t in zip(self.state, self.target) if s == t))

    def get_solution(self):
        return list(self.state)


class QueuedStrategy:
    """Strategy handing out prepared solutions, for scripted searches."""

    constrained = False

    def __init__(self, solutions, cluster_count):
        self.solutions = [list(s) for s in solutions]
        self.cluster_count = cluster_count
        self.generated = 0

    def generate_initial_solution(self):
        solution = self.solutions[min(self.generated, len(self.solutions) - 1)]
        self.generated += 1
        return list(solution)

    def is_feasible(self, solution):
        return True

    def describe(self):
        return {"strategy": "queued"}
