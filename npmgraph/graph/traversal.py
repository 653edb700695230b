"""
Minimal graph engine driving a dependency provider.

Walks the provider breadth first, expanding each installed package instance
(identified by its real path) at most once, which is what breaks cycles.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .models import GraphNode
from .provider import NodePackageDependencies

logger = logging.getLogger(__name__)


@dataclass
class DependencyGraph:
    """Package nodes keyed by real path, plus parent -> children edges"""
    root: str
    nodes: Dict[str, GraphNode] = field(default_factory=dict)
    edges: Dict[str, List[str]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.nodes)

    def add_node(self, node: GraphNode) -> bool:
        """Register ``node``; returns False if its path was already known."""
        if node.path in self.nodes:
            return False
        self.nodes[node.path] = node
        self.edges[node.path] = []
        return True

    def dependencies_of(self, path: str) -> List[GraphNode]:
        return [self.nodes[child] for child in self.edges.get(path, [])]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "root": self.root,
            "nodes": [
                {
                    "id": node.id,
                    "version": node.version,
                    "path": node.path,
                    "optional": node.optional,
                    "dependencies": list(self.edges[path]),
                }
                for path, node in self.nodes.items()
            ],
        }


async def build_graph(
    provider: NodePackageDependencies,
    max_depth: Optional[int] = None,
    include_optional: bool = True,
) -> DependencyGraph:
    """
    Build the complete dependency graph reachable from the provider's root.

    Args:
        provider: Provider supplying the root node and node expansion
        max_depth: Number of dependency levels to expand (None for unlimited)
        include_optional: Whether nodes flagged optional are expanded further

    Returns:
        DependencyGraph holding every visited node and the edges between them
    """
    root = await provider.get_root_node()
    graph = DependencyGraph(root=root.path)
    graph.add_node(root)

    frontier = [root]
    queued = {root.path}
    depth = 0
    while frontier and (max_depth is None or depth < max_depth):
        logger.debug(f"Expanding {len(frontier)} node(s) at depth {depth}")
        expansions = await asyncio.gather(*(provider.expand(node) for node in frontier))

        next_frontier = []
        for parent, children in zip(frontier, expansions):
            for child in children:
                graph.edges[parent.path].append(child.path)
                known = graph.nodes.get(child.path)
                if known is None:
                    graph.add_node(child)
                elif known.optional and not child.optional:
                    # A required edge reaches a package first seen as optional
                    graph.nodes[child.path] = child
                else:
                    continue
                if child.optional and not include_optional:
                    continue
                if child.path in queued:
                    continue
                queued.add(child.path)
                next_frontier.append(child)

        frontier = next_frontier
        depth += 1

    logger.info(f"Dependency graph built with {len(graph)} package(s)")
    return graph
