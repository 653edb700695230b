"""
Utility modules for npmgraph.

This package contains shared utility functions and classes used throughout
the npmgraph codebase, including the provider exception hierarchy.
"""

from npmgraph.utils.exceptions import (
    GraphProviderError,
    ManifestNotFoundError,
    ModuleResolutionError,
)

__all__ = [
    "GraphProviderError",
    "ManifestNotFoundError",
    "ModuleResolutionError",
]
