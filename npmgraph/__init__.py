"""
npmgraph - dependency graphs from installed npm packages.

Walks ``package.json`` manifests below ``node_modules`` directories,
starting from a root project, and exposes the result as lazily expanded
graph nodes.
"""

from npmgraph.graph import (
    DependencyDescriptor,
    DependencyGraph,
    GraphNode,
    NodePackageDependencies,
    build_graph,
    classify,
)
from npmgraph.utils.exceptions import (
    GraphProviderError,
    ManifestNotFoundError,
    ModuleResolutionError,
)

__version__ = "0.1.0"

__all__ = [
    "DependencyDescriptor",
    "DependencyGraph",
    "GraphNode",
    "NodePackageDependencies",
    "build_graph",
    "classify",
    "GraphProviderError",
    "ManifestNotFoundError",
    "ModuleResolutionError",
]
