"""
Module Clustering - Project model and fitness oracle

Reads software projects from ODEM/CDA dependency documents and evaluates
class-to-cluster assignments by modularization quality (MQ).
"""

__version__ = "1.0.0"
__author__ = "Module Clustering Team"

from .project_model import (
    Project,
    ProjectClass,
    ProjectPackage,
    Dependency,
    DependencyType,
    ElementType,
    ElementVisibility
)

from .cda_reader import read_project, read_project_from_string, CDAParseError
from .mq_calculator import ClusteringCalculator, calculate_mq
from .config_loader import load_config, validate_config, ConfigurationError

__all__ = [
    'Project',
    'ProjectClass',
    'ProjectPackage',
    'Dependency',
    'DependencyType',
    'ElementType',
    'ElementVisibility',
    'read_project',
    'read_project_from_string',
    'CDAParseError',
    'ClusteringCalculator',
    'calculate_mq',
    'load_config',
    'validate_config',
    'ConfigurationError'
]
