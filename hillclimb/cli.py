"""
CLI module for the hill climbing search.

Handles run configuration loading, validation, and mode dispatching.
"""

from typing import Dict, Any
from pathlib import Path
import yaml


class ConfigValidationError(Exception):
    """Raised when run configuration is invalid."""
    pass


def load_run_config(config_path: str) -> Dict[str, Any]:
    """
    Load run configuration from YAML file.

    Args:
        config_path: Path to run configuration YAML file

    Returns:
        Dictionary containing run configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigValidationError: If config is invalid
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML in configuration file: {e}")

    if config is None:
        raise ConfigValidationError("Configuration file is empty")

    return config


def validate_run_config(config: Dict[str, Any], base_dir: Path = Path(".")) -> None:
    """
    Validate run configuration structure.

    Args:
        config: Run configuration dictionary
        base_dir: Directory against which a relative 'config' path is checked

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if 'mode' not in config:
        raise ConfigValidationError("Missing required field: 'mode'")

    mode = config['mode']
    if mode not in ['single', 'trials']:
        raise ConfigValidationError(
            f"Invalid mode: '{mode}'. Must be 'single' or 'trials'"
        )

    if 'config' not in config:
        raise ConfigValidationError("Missing required field: 'config'")

    search_config_path = resolve_search_config_path(config, base_dir)
    if not search_config_path.exists():
        raise ConfigValidationError(f"Search configuration not found: {search_config_path}")

    if mode == 'trials':
        if 'trials' not in config:
            raise ConfigValidationError("Trials mode requires 'trials' field")

        num_trials = config['trials']
        if not isinstance(num_trials, int) or isinstance(num_trials, bool) or num_trials <= 0:
            raise ConfigValidationError(
                f"'trials' must be a positive integer, got: {num_trials}"
            )


def resolve_search_config_path(config: Dict[str, Any], base_dir: Path = Path(".")) -> Path:
    """Search configuration path, relative to the run configuration directory."""
    search_config_path = Path(config['config'])
    if not search_config_path.is_absolute():
        search_config_path = base_dir / search_config_path
    return search_config_path


def run_from_config(config_path: str) -> None:
    """
    Load run configuration and execute appropriate mode.

    Called by main.py for the --run option.

    Args:
        config_path: Path to run configuration YAML file

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigValidationError: If config is invalid
        Various exceptions from mode implementations
    """
    print(f"Loading configuration from: {config_path}")
    config = load_run_config(config_path)
    base_dir = Path(config_path).parent

    print(f"Validating configuration...")
    validate_run_config(config, base_dir)

    mode = config['mode']
    search_config_path = str(resolve_search_config_path(config, base_dir))
    print(f"Mode: {mode}\n")

    if mode == 'single':
        from .orchestration import run_single_mode
        run_single_mode(search_config_path)
    elif mode == 'trials':
        from .orchestration import run_trials_mode
        run_trials_mode(search_config_path, config['trials'])
    else:
        raise ConfigValidationError(f"Invalid mode: {mode}")

    print("\n✅ Run completed successfully!")
