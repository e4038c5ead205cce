"""
Configuration Loading System

Loads YAML configuration files and converts them to the parameters of the
hill climbing clustering search.
"""

import time
import yaml
from typing import Dict, List, Any, Optional, Tuple
from pathlib import Path


class ConfigurationError(Exception):
    """Raised when configuration is invalid"""
    pass


DEFAULT_MAX_EVALUATIONS = 20000


def load_config(config_path: str = "config.yaml") -> Dict[str, Any]:
    """Load configuration from YAML file"""
    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Configuration file not found: {config_path}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file: {e}")

    if config is None:
        raise ConfigurationError(f"Configuration file is empty: {config_path}")
    return config


def resolve_project_path(config: Dict[str, Any], config_path: Optional[str] = None) -> Path:
    """
    Path of the dependency document named in the configuration

    Relative paths are resolved against the configuration file directory
    when it is known.
    """
    project_config = config.get("project", {})
    if "path" not in project_config:
        raise ConfigurationError("Missing required field: 'project.path'")

    project_path = Path(project_config["path"])
    if not project_path.is_absolute() and config_path is not None:
        candidate = Path(config_path).parent / project_path
        if candidate.exists():
            return candidate
    return project_path


def resolve_random_seed(random_seed: Any) -> int:
    """Turn the configured seed into an integer seed"""
    if random_seed is None or random_seed == "random":
        random_seed = int(time.time() * 1000000) % 2147483647
        print(f"Using random seed: {random_seed}")
    elif isinstance(random_seed, str) and random_seed.isdigit():
        random_seed = int(random_seed)
    elif not isinstance(random_seed, int) or isinstance(random_seed, bool) or random_seed < 0:
        raise ConfigurationError(f"Invalid random seed: {random_seed}")
    return random_seed


def get_search_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Search parameters with defaults filled in"""
    search_config = config.get("search", {}) or {}
    return {
        "max_evaluations": search_config.get("max_evaluations", DEFAULT_MAX_EVALUATIONS),
        "random_seed": search_config.get("random_seed", 0),
    }


def get_size_bounds(config: Dict[str, Any]) -> Optional[Tuple[int, int]]:
    """
    Cluster size bounds, if the configuration asks for them

    Returns:
        (min_cluster_size, max_cluster_size) or None for the unconstrained search
    """
    constraints = config.get("constraints")
    if not constraints:
        return None

    if "min_cluster_size" not in constraints or "max_cluster_size" not in constraints:
        raise ConfigurationError(
            "'constraints' requires both 'min_cluster_size' and 'max_cluster_size'"
        )
    return constraints["min_cluster_size"], constraints["max_cluster_size"]


def get_output_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Get output configuration"""
    return config.get("output", {}) or {}


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of issues

    Returns:
        List of validation error messages (empty if valid)
    """
    issues = []

    project_config = config.get("project")
    if not project_config:
        issues.append("Missing required section: project")
    elif "path" not in project_config:
        issues.append("Missing required field: project.path")

    search_config = config.get("search", {}) or {}
    max_evaluations = search_config.get("max_evaluations", DEFAULT_MAX_EVALUATIONS)
    if (not isinstance(max_evaluations, int) or isinstance(max_evaluations, bool)
            or max_evaluations <= 0):
        issues.append("search.max_evaluations must be a positive integer")

    random_seed = search_config.get("random_seed", 0)
    valid_int_seed = (isinstance(random_seed, int) and not isinstance(random_seed, bool)
                      and random_seed >= 0)
    if not (random_seed is None or random_seed == "random" or valid_int_seed
            or (isinstance(random_seed, str) and random_seed.isdigit())):
        issues.append(f"Invalid search.random_seed: {random_seed}")

    constraints = config.get("constraints")
    if constraints:
        min_size = constraints.get("min_cluster_size")
        max_size = constraints.get("max_cluster_size")

        if not isinstance(min_size, int) or isinstance(min_size, bool) or min_size <= 0:
            issues.append("constraints.min_cluster_size must be a positive integer")
        if not isinstance(max_size, int) or isinstance(max_size, bool) or max_size <= 0:
            issues.append("constraints.max_cluster_size must be a positive integer")
        if isinstance(min_size, int) and isinstance(max_size, int) and min_size > max_size:
            issues.append("constraints.min_cluster_size cannot be bigger than max_cluster_size")

    return issues


def print_config_summary(config_path: str = "config.yaml"):
    """Print a summary of the configuration"""
    try:
        config = load_config(config_path)

        print("=" * 50)
        print("CONFIGURATION SUMMARY")
        print("=" * 50)

        project_config = config.get("project", {}) or {}
        print(f"Project: {project_config.get('path', 'N/A')}")

        search_config = get_search_config(config)
        print(f"Max evaluations: {search_config['max_evaluations']}")
        print(f"Random seed: {search_config['random_seed']}")

        constraints = config.get("constraints")
        if constraints:
            print(f"Cluster size: {constraints.get('min_cluster_size', 'N/A')}"
                  f" - {constraints.get('max_cluster_size', 'N/A')}")
        else:
            print("Cluster size: unconstrained")

        issues = validate_config(config)
        if issues:
            print(f"\nValidation Issues ({len(issues)}):")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print("\nConfiguration is valid ✓")

        print("=" * 50)

    except ConfigurationError as e:
        print(f"Configuration Error: {e}")
