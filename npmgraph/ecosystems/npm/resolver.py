"""Node-style module resolution against installed ``node_modules`` trees."""

from __future__ import annotations

import logging
import os
from typing import Iterator

from aiofiles import ospath

from npmgraph.utils.exceptions import ModuleResolutionError

from .reader import MANIFEST_FILENAME

logger = logging.getLogger(__name__)

NODE_MODULES = "node_modules"

_realpath = ospath.wrap(os.path.realpath)


def node_modules_paths(base_dir: str) -> Iterator[str]:
    """Yield candidate ``node_modules`` directories, nearest first.

    Directories that are themselves named ``node_modules`` are skipped, so a
    package installed at ``a/node_modules/b`` looks in
    ``a/node_modules/b/node_modules`` and then ``a/node_modules``.
    """
    directory = base_dir
    while True:
        if os.path.basename(directory) != NODE_MODULES:
            yield os.path.join(directory, NODE_MODULES)
        parent = os.path.dirname(directory)
        if parent == directory:
            return
        directory = parent


def is_valid_module_name(module_name: str) -> bool:
    """Reject names that are empty, absolute or step out of ``node_modules``."""
    if not module_name or os.path.isabs(module_name):
        return False
    segments = module_name.replace("\\", "/").split("/")
    return not any(segment in ("", ".", "..") for segment in segments)


async def resolve_module_path(base_dir: str, module_name: str) -> str:
    """Resolve ``module_name`` to the real directory of its installed package.

    Args:
        base_dir: Directory the lookup starts from
        module_name: Package name, scoped names such as ``@scope/pkg`` included

    Returns:
        Absolute path of the package directory with every symlink resolved

    Raises:
        ModuleResolutionError: If no ancestor ``node_modules`` holds the module
            or the name could point outside of it
    """
    logger.debug(f"Resolving module path for '{module_name}'...")
    if not is_valid_module_name(module_name):
        raise ModuleResolutionError(
            module_name,
            base_dir,
            reason=f"Invalid module name '{module_name}'",
        )

    real_base = await _realpath(os.path.abspath(base_dir))

    for modules_dir in node_modules_paths(real_base):
        candidate = os.path.join(modules_dir, module_name, MANIFEST_FILENAME)
        if await ospath.isfile(candidate):
            manifest_path = await _realpath(candidate)
            module_path = os.path.dirname(manifest_path)
            logger.debug(f"Resolved module {module_name} to path {module_path}")
            return module_path

    raise ModuleResolutionError(
        module_name,
        base_dir,
        reason=f"Cannot find module '{module_name}/{MANIFEST_FILENAME}' from '{real_base}'",
    )
