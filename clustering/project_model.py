"""
Project Model for Module Clustering

In-memory representation of a software project read from a dependency
document: packages, the classes they hold and the dependencies between
classes. The search core only reads the class count from it.
"""

from typing import List, Dict, Optional
from dataclasses import dataclass, field
from enum import Enum


class DependencyType(Enum):
    """Kinds of dependency between two classes"""
    USES = "uses"
    EXTENDS = "extends"
    IMPLEMENTS = "implements"

    @classmethod
    def from_identifier(cls, identifier: str) -> Optional["DependencyType"]:
        for item in cls:
            if item.value == identifier:
                return item
        return None


class ElementType(Enum):
    """Kinds of type declared in a package"""
    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    ANNOTATION = "annotation"

    @classmethod
    def from_identifier(cls, identifier: str) -> Optional["ElementType"]:
        for item in cls:
            if item.value == identifier:
                return item
        return None


class ElementVisibility(Enum):
    """Declared visibility of a type"""
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    PACKAGE = "default"

    @classmethod
    def from_identifier(cls, identifier: str) -> Optional["ElementVisibility"]:
        if identifier == "package":
            return cls.PACKAGE
        for item in cls:
            if item.value == identifier:
                return item
        return None


@dataclass
class Dependency:
    """A dependency from one class to another class, by name"""
    target: str
    dependency_type: DependencyType = DependencyType.USES


@dataclass
class ProjectPackage:
    """A package (cluster) of the original project"""
    name: str
    index: int


@dataclass
class ProjectClass:
    """A class (entity) of the project and its outgoing dependencies"""
    name: str
    element_type: ElementType = ElementType.CLASS
    visibility: ElementVisibility = ElementVisibility.PUBLIC
    is_abstract: bool = False
    package: Optional[ProjectPackage] = None
    dependencies: List[Dependency] = field(default_factory=list)

    def add_dependency(self, target: str, dependency_type: DependencyType = DependencyType.USES):
        """Record a dependency on another class"""
        self.dependencies.append(Dependency(target, dependency_type))

    def depends_on(self, target: str) -> bool:
        return any(dep.target == target for dep in self.dependencies)


class Project:
    """A project whose classes will be distributed into clusters"""

    def __init__(self, name: str):
        self.name = name
        self.packages: List[ProjectPackage] = []
        self.classes: List[ProjectClass] = []
        self._class_index: Dict[str, int] = {}
        self._package_index: Dict[str, ProjectPackage] = {}

    def add_package(self, name: str) -> ProjectPackage:
        """Add a package, or return the existing one with the same name"""
        if name in self._package_index:
            return self._package_index[name]

        package = ProjectPackage(name, len(self.packages))
        self.packages.append(package)
        self._package_index[name] = package
        return package

    def add_class(self, project_class: ProjectClass):
        """Add a class to the project"""
        if project_class.name in self._class_index:
            raise ValueError(f"Duplicate class in project {self.name}: {project_class.name}")

        self._class_index[project_class.name] = len(self.classes)
        self.classes.append(project_class)

    def get_class_count(self) -> int:
        return len(self.classes)

    def get_package_count(self) -> int:
        return len(self.packages)

    def get_class_index(self, name: str) -> Optional[int]:
        return self._class_index.get(name)

    def get_class_by_name(self, name: str) -> Optional[ProjectClass]:
        index = self.get_class_index(name)
        return self.classes[index] if index is not None else None

    def get_dependency_count(self) -> int:
        """Number of dependencies between classes of this project"""
        return sum(
            1
            for project_class in self.classes
            for dep in project_class.dependencies
            if dep.target in self._class_index
        )

    def dependency_edges(self) -> List[tuple]:
        """
        Internal dependencies as (source index, target index) pairs

        Dependencies on classes outside the project and self-dependencies
        are left out.
        """
        edges = []
        for source, project_class in enumerate(self.classes):
            for dep in project_class.dependencies:
                target = self.get_class_index(dep.target)
                if target is not None and target != source:
                    edges.append((source, target))
        return edges

    def package_assignment(self) -> List[int]:
        """Assignment of each class to the package it is declared in"""
        assignment = []
        for project_class in self.classes:
            if project_class.package is None:
                raise ValueError(f"Class {project_class.name} has no package")
            assignment.append(project_class.package.index)
        return assignment
