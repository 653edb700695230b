"""
Dependency classification for package manifests.

Decides which declared dependencies of a package are pursued while building
the graph and whether each one is required or optional:

- ``dependencies`` are always required.
- ``devDependencies`` are required for the root project. For any other
  package they are only kept when they are actually installed, and are then
  flagged optional.
- ``optionalDependencies`` are ignored for the root project. For any other
  package they are only kept when they are actually installed.
"""

import asyncio
from typing import Iterable, List, Set, Tuple

from npmgraph.ecosystems.npm.reader import Manifest
from npmgraph.ecosystems.npm.resolver import resolve_module_path
from npmgraph.utils.exceptions import ModuleResolutionError

from .models import DependencyDescriptor


async def _is_installed(module_path: str, name: str) -> bool:
    try:
        await resolve_module_path(module_path, name)
    except ModuleResolutionError:
        return False
    return True


async def _installed(module_path: str, names: Iterable[str]) -> List[str]:
    """Return the subset of ``names`` resolvable from ``module_path``, in input order."""
    names = list(names)
    found = await asyncio.gather(*(_is_installed(module_path, name) for name in names))
    return [name for name, ok in zip(names, found) if ok]


async def classify(
    manifest: Manifest,
    module_path: str,
    is_root: bool = False,
) -> Tuple[DependencyDescriptor, ...]:
    """Produce the ordered dependency descriptors for a package.

    Args:
        manifest: Manifest of the package being classified
        module_path: Real path of the package directory, used as the base
            directory for the resolution attempts of non-root packages
        is_root: Whether the package is the root project

    Returns:
        Descriptors in emission order: production, development, optional.
        A name declared in several sections is emitted once, for the first
        section it appears in.
    """
    descriptors: List[DependencyDescriptor] = []
    seen: Set[str] = set()

    def emit(names: Iterable[str], optional: bool) -> None:
        for name in names:
            if name not in seen:
                seen.add(name)
                descriptors.append(DependencyDescriptor(name=name, optional=optional))

    emit(manifest.dependencies, optional=False)

    if is_root:
        emit(manifest.dev_dependencies, optional=False)
        return tuple(descriptors)

    dev_names = [name for name in manifest.dev_dependencies if name not in seen]
    optional_names = [name for name in manifest.optional_dependencies if name not in seen]
    installed_dev, installed_optional = await asyncio.gather(
        _installed(module_path, dev_names),
        _installed(module_path, optional_names),
    )
    emit(installed_dev, optional=True)
    emit(installed_optional, optional=False)
    return tuple(descriptors)
