"""
Exceptions raised while building a package dependency graph.

Each exception includes:
- Clear error message
- The filesystem context it was raised for
- Original exception preserved for debugging
"""

from typing import Optional


class GraphProviderError(Exception):
    """
    Base exception for all dependency graph provider errors.

    The final message is assembled from the message and whichever context
    parts were supplied, separated by `` | ``.
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        detail: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        Initialize GraphProviderError.

        Args:
            message: Human-readable error message
            path: Filesystem path the error relates to
            detail: Additional diagnostic text
            original_exception: The original exception that was caught
        """
        self.message = message
        self.path = path
        self.detail = detail
        self.original_exception = original_exception

        error_parts = [message]

        if path:
            error_parts.append(f"Path: {path}")

        if detail:
            error_parts.append(detail)

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class ManifestNotFoundError(GraphProviderError):
    """
    Raised when no usable package.json could be located.

    This typically indicates:
    - The directory (and none of its ancestors) contains a package.json
    - The package.json exists but is not valid JSON
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            path=path,
            original_exception=original_exception,
        )


class ModuleResolutionError(GraphProviderError):
    """
    Raised when a dependency name cannot be resolved to an installed module.

    This typically indicates:
    - The dependency was never installed (missing ``npm install``)
    - The package was installed outside of every ancestor node_modules
    """

    def __init__(
        self,
        module_name: str,
        base_dir: str,
        reason: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        Initialize ModuleResolutionError.

        Args:
            module_name: Name of the dependency that failed to resolve
            base_dir: Directory the lookup started from
            reason: Diagnostic produced by the resolver
            original_exception: The original exception, if any
        """
        self.module_name = module_name
        self.base_dir = base_dir
        self.reason = reason

        super().__init__(
            message=f"Unable to locate module {module_name} via resolve logic",
            path=base_dir,
            detail=reason,
            original_exception=original_exception,
        )


__all__ = [
    "GraphProviderError",
    "ManifestNotFoundError",
    "ModuleResolutionError",
]
