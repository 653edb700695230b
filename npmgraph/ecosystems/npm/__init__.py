"""NPM ecosystem helpers."""

from .reader import Manifest, read_manifest, read_root_manifest
from .resolver import resolve_module_path

__all__ = ["Manifest", "read_manifest", "read_root_manifest", "resolve_module_path"]
