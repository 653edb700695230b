"""
Graph service implementation for npmgraph.

Loads configuration, drives the npm dependency provider through the
bundled traversal engine and reports the result.
"""
import asyncio
import json
import logging
from typing import Optional, Tuple

from rich.console import Console
from rich.markup import escape

from npmgraph.config_validator import ConfigValidator
from npmgraph.graph.provider import NodePackageDependencies
from npmgraph.graph.traversal import DependencyGraph, build_graph
from npmgraph.rich_utils.ui_helpers import get_console, render_tree
from npmgraph.utils.exceptions import GraphProviderError

from npmgraph.core.config_manager import ConfigManager

logger = logging.getLogger(__name__)


class GraphService:
    """Builds and reports the dependency graph of an npm project."""

    def __init__(self):
        self.config_manager = ConfigManager()
        self.config_validator = ConfigValidator()
        self.console = get_console()

    def initialize(
        self,
        cwd: str,
        config_path: Optional[str],
        output: Optional[str],
        output_format: Optional[str],
        max_depth: Optional[int],
        root_config_path: Optional[str],
        verbose: bool,
    ) -> Tuple[dict, list]:
        """Load, merge and validate the configuration."""
        config = self.config_manager.discover_and_load_config(config_path, cwd=cwd)
        config = self.config_manager.merge_config_and_args(
            config,
            output=output,
            output_format=output_format,
            max_depth=max_depth,
            root_config_path=root_config_path,
            verbose=verbose,
        )
        return config, self.config_validator.validate_config(config)

    def configure_logging(self, config: dict) -> None:
        level = config.get("logging", {}).get("level", "WARNING").upper()
        logging.basicConfig(
            level=getattr(logging, level),
            format="%(asctime)s - %(levelname)s - %(message)s",
        )

    def build(self, cwd: str, config: dict) -> DependencyGraph:
        """Run the traversal for the project at ``cwd``."""
        traversal = config.get("traversal", {})
        provider = NodePackageDependencies(
            cwd=cwd,
            root_config_path=config.get("root", {}).get("config_path"),
        )
        return asyncio.run(build_graph(
            provider,
            max_depth=traversal.get("max_depth"),
            include_optional=traversal.get("include_optional", True),
        ))

    def report(self, graph: DependencyGraph, config: dict) -> None:
        """Print or save the graph in the configured format."""
        output_config = config.get("output", {})
        output_file = output_config.get("file")

        if output_config.get("format", "tree") == "json":
            content = json.dumps(graph.to_dict(), indent=4)
            if output_file:
                with open(output_file, "w") as fp:
                    fp.write(content)
                self.console.print(f"📊 Dependency graph saved to {output_file}")
            else:
                self.console.print_json(content)
            return

        tree = render_tree(graph)
        if output_file:
            with open(output_file, "w") as fp:
                Console(file=fp, no_color=True, width=200).print(tree)
            self.console.print(f"📊 Dependency tree saved to {output_file}")
        else:
            self.console.print(tree)
        self.console.print(f"📦 {len(graph)} packages")

    def execute(
        self,
        cwd: str = ".",
        config_path: Optional[str] = None,
        output: Optional[str] = None,
        output_format: Optional[str] = None,
        max_depth: Optional[int] = None,
        root_config_path: Optional[str] = None,
        verbose: bool = False,
    ) -> int:
        """Execute the complete workflow and return the process exit code."""
        config, errors = self.initialize(
            cwd, config_path, output, output_format, max_depth, root_config_path, verbose
        )
        if errors:
            for error in errors:
                self.console.print(f"❌ {escape(error)}", style="red")
            return 2

        self.configure_logging(config)

        try:
            graph = self.build(cwd, config)
        except GraphProviderError as e:
            logger.debug("Dependency graph construction failed", exc_info=True)
            self.console.print(f"❌ {escape(str(e))}", style="red")
            return 1

        self.report(graph, config)
        return 0
