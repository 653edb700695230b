"""
Dependency graph provider backed by installed npm packages.

Builds graph nodes lazily: the graph engine asks for the root node once and
then expands whichever nodes it decides to visit. Deduplication and cycle
handling are left to the engine; nodes are compared by their real ``path``.
"""

import asyncio
import logging
import os
from typing import Any, List, Optional

from aiofiles import ospath

from npmgraph.ecosystems.npm.reader import read_manifest, read_root_manifest
from npmgraph.ecosystems.npm.resolver import resolve_module_path

from .classifier import classify
from .models import DependencyDescriptor, GraphNode

logger = logging.getLogger(__name__)

_realpath = ospath.wrap(os.path.realpath)


class NodePackageDependencies:
    """Generates a project graph from npm modules installed on disk."""

    def __init__(
        self,
        cwd: str,
        root_configuration: Optional[Any] = None,
        root_config_path: Optional[str] = None,
    ):
        """
        Initialize the provider.

        Args:
            cwd: Directory to start searching for the root module
            root_configuration: Configuration object to use for the root
                module instead of reading it from a configuration file
            root_config_path: Configuration file to use for the root module
                instead of the default one
        """
        self.cwd = cwd
        self.root_configuration = root_configuration
        self.root_config_path = root_config_path

    async def get_root_node(self) -> GraphNode:
        """Locate the root package.json and build the root node."""
        manifest, manifest_dir = await read_root_manifest(self.cwd)
        module_path = await _realpath(manifest_dir)
        return GraphNode(
            id=manifest.name,
            version=manifest.version,
            path=module_path,
            optional=False,
            configuration=self.root_configuration,
            config_path=self.root_config_path,
            pending_dependencies=await classify(manifest, module_path, is_root=True),
        )

    async def expand(self, node: GraphNode) -> List[GraphNode]:
        """Build the child nodes for every pending dependency of ``node``.

        All dependencies are resolved concurrently; the first failure aborts
        the expansion.
        """
        if not node.pending_dependencies:
            return []
        logger.debug(f"Resolving dependencies of {node.id}...")
        return list(await asyncio.gather(
            *(self._get_node(node.path, dep) for dep in node.pending_dependencies)
        ))

    async def _get_node(self, base_dir: str, dependency: DependencyDescriptor) -> GraphNode:
        module_path = await resolve_module_path(base_dir, dependency.name)
        logger.debug(f"Reading package.json in directory {module_path}...")
        manifest = await read_manifest(module_path)
        return GraphNode(
            id=manifest.name,
            version=manifest.version,
            path=module_path,
            optional=dependency.optional,
            pending_dependencies=await classify(manifest, module_path),
        )
