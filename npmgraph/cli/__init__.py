"""
CLI module for npmgraph.

Provides command-line interface components.
"""
from npmgraph.cli.app import app as _app

# Export app function for pyproject.toml entry point
def app():
    """Entry point function for pyproject.toml scripts."""
    _app()

__all__ = ['app']
