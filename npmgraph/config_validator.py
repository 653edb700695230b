"""Configuration validation for npmgraph."""

import logging
from typing import Any, Dict, List

OUTPUT_FORMATS = ("tree", "json")
SECTIONS = ("traversal", "output", "root", "logging")


class ConfigValidator:
    """Validates npmgraph configuration values."""

    def validate_config(self, config: Dict[str, Any]) -> List[str]:
        """Validate complete configuration.

        Args:
            config: Configuration dictionary

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []
        sections = {}
        for key in SECTIONS:
            value = config.get(key)
            if value is None:
                value = {}
            elif not isinstance(value, dict):
                errors.append(f"'{key}' section must be a mapping")
                value = {}
            sections[key] = value

        errors.extend(self.validate_traversal(sections["traversal"]))
        errors.extend(self.validate_output(sections["output"]))
        errors.extend(self.validate_logging(sections["logging"]))

        root_config_path = sections["root"].get("config_path")
        if root_config_path is not None and not isinstance(root_config_path, str):
            errors.append("root.config_path must be a string")

        return errors

    def validate_traversal(self, traversal_config: Dict[str, Any]) -> List[str]:
        errors = []
        max_depth = traversal_config.get("max_depth")
        if max_depth is not None:
            if isinstance(max_depth, bool) or not isinstance(max_depth, int):
                errors.append("traversal.max_depth must be an integer or null")
            elif max_depth < 0:
                errors.append("traversal.max_depth must be >= 0")

        include_optional = traversal_config.get("include_optional", True)
        if not isinstance(include_optional, bool):
            errors.append("traversal.include_optional must be a boolean")
        return errors

    def validate_output(self, output_config: Dict[str, Any]) -> List[str]:
        errors = []
        output_format = output_config.get("format", "tree")
        if output_format not in OUTPUT_FORMATS:
            errors.append(
                f"output.format must be one of {', '.join(OUTPUT_FORMATS)} (got '{output_format}')"
            )
        output_file = output_config.get("file")
        if output_file is not None and not isinstance(output_file, str):
            errors.append("output.file must be a string or null")
        return errors

    def validate_logging(self, logging_config: Dict[str, Any]) -> List[str]:
        level = logging_config.get("level", "WARNING")
        if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
            return [f"logging.level '{level}' is not a valid logging level"]
        return []
