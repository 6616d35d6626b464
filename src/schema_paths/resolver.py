"""SchemaResolver: flatten-once lookups backed by a per-instance LRU cache.

The free functions in ``schema_paths.api`` re-flatten on every call. A
SchemaResolver keeps the flattened map of each root it has seen in its own
``LRUCache``, so repeated lookups against the same root flatten only once.
No cache state is shared between instances.

Entries are keyed by root identity. The root object itself is stored with
its map, which keeps it alive while cached and guarantees a recycled
``id()`` can never serve a stale map.

Example::

    from schema_paths import SchemaResolver

    resolver = SchemaResolver()
    resolver.resolve(schema, "posts[].title")   # flattens schema
    resolver.resolve(schema, "posts[]")         # served from the cache
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from cachetools import LRUCache

from schema_paths.algorithm.config import FlattenConfig
from schema_paths.algorithm.flattener import PathFlattener
from schema_paths.api import lookup
from schema_paths.tree.nodes import SchemaNode

__all__ = ["SchemaResolver"]

logger = logging.getLogger(__name__)


class SchemaResolver:
    """Resolves paths against roots whose flattened maps it caches.

    Args:
        config: Traversal options. Defaults to ``FlattenConfig()`` when None.
        max_cache_size: Maximum number of roots whose maps are held. When
            exceeded, the least-recently-used root is silently evicted.
            Defaults to 128.
    """

    def __init__(
        self,
        config: FlattenConfig | None = None,
        max_cache_size: int = 128,
    ) -> None:
        self._flattener = PathFlattener(config=config)
        self._cache: LRUCache[int, tuple[Any, Mapping[str, SchemaNode]]] = LRUCache(
            maxsize=max_cache_size
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> FlattenConfig:
        return self._flattener.config

    @property
    def max_size(self) -> int:
        """The maximum number of roots this resolver caches."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of cached roots."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def flatten(self, root: Any) -> Mapping[str, SchemaNode]:
        """Return the flattened map of ``root``, flattening on first use.

        The returned mapping is a read-only view; it is shared by every
        caller that asks this resolver about the same root.
        """
        entry = self._cache.get(id(root))
        if entry is not None and entry[0] is root:
            logger.debug("Cache hit for root %s", type(root).__name__)
            return entry[1]

        logger.debug("Cache miss for root %s", type(root).__name__)
        flat: Mapping[str, SchemaNode] = MappingProxyType(self._flattener.flatten(root))
        self._cache[id(root)] = (root, flat)
        return flat

    def paths(self, root: Any) -> list[str]:
        """Return every path below ``root`` in flatten order."""
        return list(self.flatten(root))

    def resolve(self, root: Any, path: str) -> SchemaNode:
        """Return the schema at ``path`` below ``root``.

        Raises:
            PathNotFound: ``path`` is not in the flattened map.
        """
        return lookup(self.flatten(root), path)

    def clear(self) -> None:
        """Drop every cached map."""
        self._cache.clear()
