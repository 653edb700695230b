"""
Data models for the package dependency graph.

Nodes and descriptors are frozen once created; the graph engine that
consumes them owns their lifetime.
"""

from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class DependencyDescriptor:
    """A dependency of a node that is still to be resolved"""
    name: str
    optional: bool = False


@dataclass(frozen=True)
class GraphNode:
    """A package instance in the dependency graph.

    ``path`` is always a real path, so two nodes with the same ``path``
    describe the same installed package. ``id`` and ``version`` mirror the
    manifest fields and are None when the package.json leaves them out.
    """
    id: Optional[str]
    version: Optional[str]
    path: str
    optional: bool = False
    configuration: Optional[Any] = None
    config_path: Optional[str] = None
    pending_dependencies: Tuple[DependencyDescriptor, ...] = ()
