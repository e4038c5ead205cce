"""
Dependency Document Reader

Loads ODEM/CDA XML dependency documents into a Project. The expected layout
is ODEM > context > container > namespace > type > dependencies > depends-on.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Union

from .project_model import (
    Project, ProjectClass, ProjectPackage, DependencyType, ElementType, ElementVisibility
)


class CDAParseError(Exception):
    """Raised when a dependency document cannot be read"""
    pass


def _get_attribute(element: ET.Element, name: str) -> str:
    value = element.get(name)
    if value is None:
        raise CDAParseError(f"missing attribute '{name}' for element '{element.tag}'")
    return value


def _get_first_element(element: ET.Element, tag: str) -> ET.Element:
    child = next(element.iter(tag), None)
    if child is None or child is element:
        raise CDAParseError(f"missing child tag '{tag}' under '{element.tag}'")
    return child


def _parse_flag(value: str) -> bool:
    """
    ODEM flags such as isAbstract are written as yes/no; true and 1 are
    accepted as well, so "yes" reads as True.
    """
    return value.strip().lower() in ("true", "yes", "1")


def _load_dependencies(project_class: ProjectClass, element: ET.Element):
    """Load the dependencies declared for a type"""
    dependency_root = element.find("dependencies")
    if dependency_root is None:
        raise CDAParseError(f"missing child tag 'dependencies' under '{project_class.name}'")

    for child in dependency_root.iter("depends-on"):
        name = _get_attribute(child, "name")
        classification = _get_attribute(child, "classification")

        dependency_type = DependencyType.from_identifier(classification)
        if dependency_type is None:
            raise CDAParseError(
                f"invalid classification '{classification}' for dependency "
                f"from '{project_class.name}' to '{name}'"
            )

        project_class.add_dependency(name, dependency_type)


def _load_classes(project: Project, package: ProjectPackage, element: ET.Element):
    """Load the types declared in a namespace"""
    for child in element.iter("type"):
        name = _get_attribute(child, "name")
        classification = _get_attribute(child, "classification")
        visibility_name = _get_attribute(child, "visibility")
        is_abstract = _parse_flag(child.get("isAbstract", "false"))

        element_type = ElementType.from_identifier(classification)
        if element_type is None:
            raise CDAParseError(f"invalid classification '{classification}' for type '{name}'")

        visibility = ElementVisibility.from_identifier(visibility_name)
        if visibility is None:
            raise CDAParseError(f"invalid visibility '{visibility_name}' for type '{name}'")

        project_class = ProjectClass(
            name=name,
            element_type=element_type,
            visibility=visibility,
            is_abstract=is_abstract,
            package=package
        )
        try:
            project.add_class(project_class)
        except ValueError as e:
            raise CDAParseError(str(e))

        _load_dependencies(project_class, child)


def _load_application(root: ET.Element) -> Project:
    context = _get_first_element(root, "context")
    project = Project(_get_attribute(context, "name"))

    for container in context.iter("container"):
        for namespace in container.iter("namespace"):
            package = project.add_package(_get_attribute(namespace, "name"))
            _load_classes(project, package, namespace)

    return project


def read_project(filename: Union[str, Path]) -> Project:
    """
    Load a project from an ODEM/CDA XML file

    Args:
        filename: Path to the dependency document

    Returns:
        Project with its packages, classes and dependencies

    Raises:
        CDAParseError: If the file is missing or its content is invalid
    """
    path = Path(filename)

    if not path.exists():
        raise CDAParseError(f"unable to load file '{filename}'")

    # External DTDs referenced by the DOCTYPE are not fetched by ElementTree
    try:
        tree = ET.parse(path)
    except ET.ParseError:
        raise CDAParseError(f"invalid XML content in file '{filename}'")

    return _load_application(tree.getroot())


def read_project_from_string(content: str) -> Project:
    """Load a project from an ODEM/CDA XML string"""
    try:
        root = ET.fromstring(content)
    except ET.ParseError:
        raise CDAParseError("invalid XML content")

    return _load_application(root)
