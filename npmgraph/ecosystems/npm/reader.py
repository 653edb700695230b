"""Utilities for reading NPM package manifests."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

import aiofiles
from aiofiles import ospath

from npmgraph.utils.exceptions import ManifestNotFoundError

MANIFEST_FILENAME = "package.json"


def _section(data: Dict[str, Any], key: str) -> Mapping[str, str]:
    value = data.get(key)
    if not isinstance(value, dict):
        return MappingProxyType({})
    return MappingProxyType(dict(value))


@dataclass(frozen=True)
class Manifest:
    """Parsed ``package.json`` content relevant to graph construction.

    ``name`` and ``version`` are None when the manifest omits them, which is
    common for private root projects. No value is made up for them.
    """

    name: Optional[str]
    version: Optional[str]
    dependencies: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    dev_dependencies: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    optional_dependencies: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Manifest":
        """Build a manifest from decoded ``package.json`` data.

        Dependency sections that are missing, or are not JSON objects, are
        exposed as empty mappings.
        """
        return cls(
            name=data.get("name"),
            version=data.get("version"),
            dependencies=_section(data, "dependencies"),
            dev_dependencies=_section(data, "devDependencies"),
            optional_dependencies=_section(data, "optionalDependencies"),
        )


async def read_manifest(directory: str) -> Manifest:
    """Read the ``package.json`` located directly inside ``directory``.

    Parameters
    ----------
    directory:
        Directory expected to contain the ``package.json`` file.

    Raises
    ------
    ManifestNotFoundError
        If the file is missing, unreadable or not a JSON object.
    """

    manifest_path = os.path.join(directory, MANIFEST_FILENAME)
    try:
        async with aiofiles.open(manifest_path, "r", encoding="utf-8") as f:
            content = await f.read()
    except OSError as e:
        raise ManifestNotFoundError(
            f"Failed to read {MANIFEST_FILENAME} in directory {directory}",
            path=os.path.abspath(manifest_path),
            original_exception=e,
        )

    try:
        data = json.loads(content)
    except ValueError as e:
        raise ManifestNotFoundError(
            f"Failed to parse {MANIFEST_FILENAME} in directory {directory}",
            path=os.path.abspath(manifest_path),
            original_exception=e,
        )

    if not isinstance(data, dict):
        raise ManifestNotFoundError(
            f"Invalid {MANIFEST_FILENAME} in directory {directory}: expected a JSON object",
            path=os.path.abspath(manifest_path),
        )

    return Manifest.from_dict(data)


async def read_root_manifest(start_dir: str) -> Tuple[Manifest, str]:
    """Find and read the nearest ``package.json`` at or above ``start_dir``.

    Returns
    -------
    tuple
        ``(manifest, directory)`` where ``directory`` is the absolute path of
        the directory holding the manifest that was found.
    """

    start = os.path.abspath(start_dir)
    directory = start
    while True:
        if await ospath.isfile(os.path.join(directory, MANIFEST_FILENAME)):
            return await read_manifest(directory), directory
        parent = os.path.dirname(directory)
        if parent == directory:
            break
        directory = parent

    raise ManifestNotFoundError(
        f"Failed to locate {MANIFEST_FILENAME} for directory {start}",
        path=start,
    )
