"""
Config Loader - YAML configuration loading with Pydantic validation.

This module discovers the YAML game configurations in the modes/ directory
and validates them into CrossingConfig models. Any field left out of a file
keeps its default from games/BugCrossing/config.py.

Examples:
    >>> loader = ConfigLoader()
    >>> cfg = loader.load("classic")
    >>> cfg.name
    'Classic'
    >>> 'classic' in loader.list_available()
    True
"""

from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import ValidationError

from arcadekit.logging import get_logger
from models import CrossingConfig

log = get_logger('config_loader')

DEFAULT_MODES_DIR = Path(__file__).resolve().parent.parent / "modes"


class ConfigLoader:
    """Loads and validates game configurations from YAML files.

    Attributes:
        modes_dir: Path to the directory containing configuration YAML files
    """

    def __init__(self, modes_dir: Optional[Path] = None):
        """Initialize the config loader.

        Args:
            modes_dir: Optional custom path to the modes directory.
                      Defaults to the modes/ directory of the game.
        """
        self.modes_dir = Path(modes_dir) if modes_dir is not None else DEFAULT_MODES_DIR

    def load(self, name_or_path: Union[str, Path]) -> CrossingConfig:
        """Load a configuration by mode name or by file path.

        A value ending in .yaml/.yml, or naming an existing file, is read
        as a path; anything else is looked up in the modes directory.

        Args:
            name_or_path: Mode name (without extension) or path to a YAML file

        Returns:
            Validated CrossingConfig instance

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            yaml.YAMLError: If the YAML syntax is malformed
            ValueError: If the YAML content is not a valid configuration
        """
        candidate = Path(name_or_path)
        if candidate.suffix in ('.yaml', '.yml') or candidate.is_file():
            return self.load_file(candidate)

        yaml_path = self.modes_dir / f"{name_or_path}.yaml"
        if not yaml_path.exists():
            raise FileNotFoundError(
                f"Game mode '{name_or_path}' not found. "
                f"Expected file: {yaml_path}"
            )
        return self.load_file(yaml_path)

    def load_file(self, yaml_path: Union[str, Path]) -> CrossingConfig:
        """Load and validate a configuration file.

        An empty file yields the default configuration.

        Raises:
            FileNotFoundError: If the file doesn't exist
            yaml.YAMLError: If the YAML syntax is malformed
            ValueError: If the YAML content is not a valid configuration
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(yaml_path, 'r') as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(
                f"Failed to parse YAML file '{yaml_path}': {e}"
            )

        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise ValueError(
                f"Invalid game configuration in '{yaml_path}': expected a mapping"
            )

        try:
            config = CrossingConfig(**config_dict)
        except ValidationError as e:
            raise ValueError(
                f"Invalid game configuration in '{yaml_path}':\n{e}"
            ) from e

        log.debug("Loaded config '%s' from %s", config.name, yaml_path)
        return config

    def list_available(self) -> List[str]:
        """List all available mode names, sorted alphabetically."""
        if not self.modes_dir.exists():
            return []
        return sorted(f.stem for f in self.modes_dir.glob("*.yaml"))

    def exists(self, name: str) -> bool:
        """Check if a mode with this name exists."""
        return (self.modes_dir / f"{name}.yaml").exists()
