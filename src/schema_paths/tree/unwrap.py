"""Kind detection and wrapper peeling.

``unwrap`` only decides which traversal rule applies next. It never changes
which schema object is stored as a path's value; the parent always stores
the node exactly as declared, wrappers included.
"""

from __future__ import annotations

from typing import Any

from schema_paths.errors import CyclicSchema
from schema_paths.tree.nodes import NodeKind, SchemaNode

__all__ = ["node_kind", "unwrap"]


def node_kind(node: Any) -> NodeKind | None:
    """Return the NodeKind tag of ``node``, or None if it is not a known kind."""
    if not isinstance(node, SchemaNode):
        return None
    kind = getattr(node, "kind", None)
    try:
        return NodeKind(kind)
    except ValueError:
        return None


def unwrap(node: Any, path: str = "") -> Any:
    """Peel every leading wrapper layer off ``node``.

    Any mix of optional, nullable and default wrappers is removed until a
    non-wrapper node is reached. Unknown node kinds are returned unchanged
    so the caller can apply its unknown-kind policy.

    Args:
        node: Node to unwrap.
        path: Path the node sits at, used only for error reporting.

    Returns:
        The first non-wrapper node in the chain.

    Raises:
        CyclicSchema: If the wrapper chain loops back on itself.
    """
    seen: set[int] = set()
    while node_kind(node) is NodeKind.WRAPPER:
        if id(node) in seen:
            raise CyclicSchema(path)
        seen.add(id(node))
        node = node.inner
    return node
