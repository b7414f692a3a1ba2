#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/transforms/registry.py
"""Transform registry for transform discovery and lookup.

The registry holds the four built-in transforms and any plugin transforms
published under the ``docdirectives.transforms`` entry-point group. Each
entry point must resolve to a :class:`TransformMetadata` instance.

Examples
--------
Get a transform:

    >>> from docdirectives.transforms import transform_registry
    >>> transformer = transform_registry.get_transform("embed")

List all transforms:

    >>> for name in transform_registry.list_transforms():
    ...     print(name, transform_registry.get_metadata(name).description)

Notes
-----
Import the global ``transform_registry`` instance rather than instantiating
TransformRegistry. Both work, since the class is a singleton.

"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import TYPE_CHECKING, Any, Optional

from docdirectives.ast.transforms import NodeTransformer

if TYPE_CHECKING:
    from docdirectives.transforms.metadata import TransformMetadata

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "docdirectives.transforms"


class TransformRegistry:
    """Singleton registry of directive transforms.

    Built-ins are registered and plugins discovered on first access.
    """

    _instance: Optional[TransformRegistry] = None
    _transforms: dict[str, TransformMetadata]
    _initialized: bool

    def __new__(cls) -> TransformRegistry:
        """Create or return singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._transforms = {}
            cls._instance._initialized = False
        return cls._instance

    def _ensure_initialized(self) -> None:
        """Register built-ins and run plugin discovery once."""
        if not self._initialized:
            self._initialized = True
            self._register_builtins()
            self.discover_plugins()

    def _register_builtins(self) -> None:
        from docdirectives.transforms._builtin_metadata import BUILTIN_TRANSFORMS

        for metadata in BUILTIN_TRANSFORMS:
            self.register(metadata)

    def register(self, metadata: TransformMetadata) -> None:
        """Register a transform with its metadata.

        Parameters
        ----------
        metadata : TransformMetadata
            Transform metadata to register

        Notes
        -----
        A different transform registered under an existing name replaces it
        and a warning is logged. Registering the same metadata object again
        is a no-op.

        """
        existing = self._transforms.get(metadata.name)
        if existing is metadata:
            return
        if existing is not None:
            logger.warning("Transform '%s' already registered, overwriting", metadata.name)

        self._transforms[metadata.name] = metadata
        logger.debug("Registered transform: %s", metadata.name)

    def unregister(self, name: str) -> bool:
        """Unregister a transform.

        Returns
        -------
        bool
            True if transform was unregistered, False if not found

        """
        if name in self._transforms:
            del self._transforms[name]
            logger.debug("Unregistered transform: %s", name)
            return True
        return False

    def clear(self) -> None:
        """Remove every registered transform, including the built-ins.

        The next lookup registers the built-ins and runs discovery again.
        """
        self._transforms.clear()
        self._initialized = False

    def get_metadata(self, name: str) -> TransformMetadata:
        """Get metadata for a transform.

        Raises
        ------
        KeyError
            If transform is not registered

        """
        self._ensure_initialized()

        if name not in self._transforms:
            raise KeyError(f"Transform '{name}' not registered")

        return self._transforms[name]

    def get_transform(self, name: str, options: Any = None, **kwargs: Any) -> NodeTransformer:
        """Get a transform instance by name.

        Parameters
        ----------
        name : str
            Transform name
        options : Any, optional
            Options object for the transform (e.g. ``CalloutOptions``)
        **kwargs
            Keyword parameters passed to the transform constructor

        Returns
        -------
        NodeTransformer
            Transform instance

        Raises
        ------
        KeyError
            If transform is not registered
        ValidationError
            If parameters are invalid

        Examples
        --------
        >>> transformer = transform_registry.get_transform("heading-ids", id_prefix="doc-")

        """
        metadata = self.get_metadata(name)
        return metadata.create_instance(options, **kwargs)

    def has_transform(self, name: str) -> bool:
        """Check if a transform is registered."""
        self._ensure_initialized()
        return name in self._transforms

    def list_transforms(self, tags: Optional[list[str]] = None) -> list[str]:
        """List registered transform names.

        Parameters
        ----------
        tags : list[str], optional
            Only return transforms with at least one matching tag

        Returns
        -------
        list[str]
            Transform names, sorted alphabetically

        """
        self._ensure_initialized()

        if tags is None:
            return sorted(self._transforms.keys())

        return sorted(name for name, metadata in self._transforms.items() if any(tag in metadata.tags for tag in tags))

    def discover_plugins(self) -> int:
        """Discover and register transforms from entry points.

        Entry points that fail to load or do not resolve to TransformMetadata
        are logged and skipped.

        Returns
        -------
        int
            Number of transforms discovered and registered

        """
        from docdirectives.transforms.metadata import TransformMetadata

        discovered_count = 0
        for ep in importlib.metadata.entry_points().select(group=ENTRY_POINT_GROUP):
            try:
                metadata = ep.load()
            except Exception as e:
                logger.warning("Failed to load transform entry point '%s': %s", ep.name, e)
                continue

            if not isinstance(metadata, TransformMetadata):
                logger.warning("Entry point '%s' did not return TransformMetadata, skipping", ep.name)
                continue

            self.register(metadata)
            discovered_count += 1
            logger.debug("Discovered transform from entry point: %s", ep.name)

        logger.debug("Discovered %d transform(s) from entry points", discovered_count)
        return discovered_count


transform_registry = TransformRegistry()


__all__ = [
    "ENTRY_POINT_GROUP",
    "TransformRegistry",
    "transform_registry",
]
