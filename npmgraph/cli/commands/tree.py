"""
Tree command implementation.

Thin wrapper around GraphService that handles CLI argument parsing
and delegates business logic to the service layer.
"""
import sys
from typing import Optional

import typer

from npmgraph.core.graph_service import GraphService


def tree_command(
    cwd: str = typer.Argument(".", help="Directory to start searching for the root package.json"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    output: Optional[str] = typer.Option(None, "-o", "--output", help="Write the result to this file"),
    output_format: Optional[str] = typer.Option(None, "--format", help="Output format: tree or json"),
    max_depth: Optional[int] = typer.Option(None, "--max-depth", help="Number of dependency levels to expand"),
    root_config: Optional[str] = typer.Option(None, "--root-config", help="Build configuration file for the root project"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """Build the dependency graph of an npm project from its installed packages."""

    graph_service = GraphService()
    exit_code = graph_service.execute(
        cwd=cwd,
        config_path=config_path,
        output=output,
        output_format=output_format,
        max_depth=max_depth,
        root_config_path=root_config,
        verbose=verbose,
    )

    if exit_code != 0:
        sys.exit(exit_code)
