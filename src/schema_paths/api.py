"""Public API functions for schema-path-resolver.

This module provides the user-facing functions: flatten, paths, resolve,
and lookup (resolve against an already flattened map). Each call flattens
the schema afresh; nothing is cached between calls. Callers issuing
many lookups against one root should flatten once and reuse the map, or
use ``SchemaResolver``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from schema_paths.algorithm.config import FlattenConfig
from schema_paths.algorithm.flattener import PathFlattener
from schema_paths.errors import PathNotFound
from schema_paths.suggest import suggest_paths
from schema_paths.tree.nodes import SchemaNode

__all__ = ["flatten", "lookup", "paths", "resolve"]


def flatten(root: Any, config: FlattenConfig | None = None) -> dict[str, SchemaNode]:
    """Return the complete path -> schema mapping for ``root``.

    Args:
        root:   Root schema node. The root itself gets no entry.
        config: Traversal options. Defaults to ``FlattenConfig()`` when None.

    Returns:
        A fresh dict mapping every reachable path to the schema declared
        there. Paths shared by several union branches map to a UnionSchema
        of the branch-specific schemas.

    Raises:
        UnsupportedSchemaKind: An unknown node kind was met under the
            default ``UnknownKindPolicy.ERROR``.
        CyclicSchema: The schema graph contains a cycle.
    """
    return PathFlattener(config=config).flatten(root)


def paths(root: Any, config: FlattenConfig | None = None) -> list[str]:
    """Return every path below ``root`` in flatten order."""
    return list(flatten(root, config=config))


def resolve(root: Any, path: str, config: FlattenConfig | None = None) -> SchemaNode:
    """Return the schema found at ``path`` below ``root``.

    Example::

        schema = ObjectSchema({"posts": ArraySchema(ObjectSchema({"title": title}))})
        resolve(schema, "posts[].title") is title   # True

    Args:
        root:   Root schema node.
        path:   Path string, e.g. ``"posts[].title"`` or ``"[0]"``.
        config: Traversal options. Defaults to ``FlattenConfig()`` when None.

    Returns:
        The identical schema object ``flatten(root)[path]`` holds.

    Raises:
        PathNotFound: ``path`` is not in ``flatten(root)``.
    """
    flat = flatten(root, config=config)
    return lookup(flat, path)


def lookup(flat: Mapping[str, SchemaNode], path: str) -> SchemaNode:
    """Look ``path`` up in an already flattened map.

    Raises:
        PathNotFound: With the closest known paths as suggestions.
    """
    try:
        return flat[path]
    except KeyError:
        raise PathNotFound(path, suggest_paths(path, flat)) from None
