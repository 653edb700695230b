"""Dependency graph construction from installed npm packages."""

from .classifier import classify
from .models import DependencyDescriptor, GraphNode
from .provider import NodePackageDependencies
from .traversal import DependencyGraph, build_graph

__all__ = [
    "classify",
    "DependencyDescriptor",
    "GraphNode",
    "NodePackageDependencies",
    "DependencyGraph",
    "build_graph",
]
