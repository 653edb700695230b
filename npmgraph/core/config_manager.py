"""
Configuration management for npmgraph.

Handles loading, merging, and discovery of configuration files.
"""
import os
from typing import Optional

import yaml
import importlib.resources as importlib_resources

CONFIG_FILENAME = "npmgraph.config.yaml"


class ConfigManager:
    """Manages npmgraph configuration loading and merging operations."""

    def load_config(self, path: str) -> dict:
        """Load configuration from YAML file."""
        with open(path, "r") as f:
            return yaml.safe_load(f) or {}

    def deep_merge(self, default: dict, user: Optional[dict]) -> dict:
        """Deep merge user config into default config."""
        result = default.copy()
        if user is None:
            return result
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def load_package_default_config(self) -> dict:
        """Load default config from package."""
        import npmgraph.config
        default_config_path = importlib_resources.files(npmgraph.config) / "default.yaml"
        with default_config_path.open("r") as f:
            return yaml.safe_load(f)

    def discover_and_load_config(self, config_arg: Optional[str], cwd: str = ".") -> dict:
        """Discover config file with simple priority order."""
        default_config = self.load_package_default_config()

        # Priority 1: --config argument
        if config_arg:
            return self.deep_merge(default_config, self.load_config(config_arg))

        # Priority 2: npmgraph.config.yaml in the working directory
        local_config = os.path.join(cwd, CONFIG_FILENAME)
        if os.path.exists(local_config):
            return self.deep_merge(default_config, self.load_config(local_config))

        # Priority 3: Package default config
        return default_config

    def merge_config_and_args(
        self,
        config: dict,
        output: Optional[str] = None,
        output_format: Optional[str] = None,
        max_depth: Optional[int] = None,
        root_config_path: Optional[str] = None,
        verbose: bool = False,
    ) -> dict:
        """Merge configuration with CLI arguments."""
        overrides = {"traversal": {}, "output": {}, "root": {}, "logging": {}}
        if output is not None:
            overrides["output"]["file"] = output
        if output_format is not None:
            overrides["output"]["format"] = output_format
        if max_depth is not None:
            overrides["traversal"]["max_depth"] = max_depth
        if root_config_path is not None:
            overrides["root"]["config_path"] = root_config_path
        if verbose:
            overrides["logging"]["level"] = "DEBUG"
        return self.deep_merge(config, {key: value for key, value in overrides.items() if value})
