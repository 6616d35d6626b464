"""PathFlattener: depth-first path enumeration over a schema graph.

For a node ``n`` reached at prefix ``p`` the flattener unwraps ``n`` and
dispatches on the unwrapped node's kind:

- OBJECT: each field ``name`` gets ``name`` (root) or ``p.name``.
- ARRAY:  the element gets ``p[]``.
- TUPLE:  item ``i`` gets ``p[i]``.
- UNION:  every branch is flattened at ``p`` and the results are merged.
- LEAF:   no entries.

Each child path maps to the child exactly as declared (wrappers kept); the
child's own entries come from recursing into it. The root never gets an
entry of its own.

Cycle detection tracks the identity of every unwrapped node on the current
traversal stack. Shared sub-schemas reached through different parents are
fine; only a node reachable from itself is rejected.
"""

from __future__ import annotations

import logging
from typing import Any

from schema_paths.algorithm.config import FlattenConfig, UnknownKindPolicy
from schema_paths.algorithm.merge import merge_flattened
from schema_paths.errors import CyclicSchema, UnsupportedSchemaKind
from schema_paths.tree.nodes import NodeKind, SchemaNode
from schema_paths.tree.unwrap import node_kind, unwrap

__all__ = ["PathFlattener"]

logger = logging.getLogger(__name__)


class PathFlattener:
    """Builds the complete path -> schema mapping for a root schema.

    The flattener holds only its configuration. Each ``flatten`` call keeps
    its traversal state on the call stack, so one instance can be shared
    across threads.

    Example::

        from schema_paths.algorithm.flattener import PathFlattener
        from schema_paths.tree.nodes import ArraySchema, LeafSchema, ObjectSchema

        schema = ObjectSchema({"tags": ArraySchema(LeafSchema("string"))})
        PathFlattener().flatten(schema)
        # {"tags": ArraySchema(...), "tags[]": LeafSchema(type_name="string")}
    """

    def __init__(self, config: FlattenConfig | None = None) -> None:
        self._config: FlattenConfig = config if config is not None else FlattenConfig()

    @property
    def config(self) -> FlattenConfig:
        return self._config

    def flatten(self, root: Any) -> dict[str, SchemaNode]:
        """Return every reachable path below ``root`` mapped to its schema.

        Args:
            root: Root schema node. It gets no entry of its own.

        Returns:
            A fresh dict in depth-first, declaration order.

        Raises:
            UnsupportedSchemaKind: A node of unknown kind was met and the
                policy is ``UnknownKindPolicy.ERROR``.
            CyclicSchema: A node is reachable from itself.
        """
        flat = self._flatten_node(root, "", set())
        logger.debug(
            "Flattened %s schema into %d paths",
            node_kind(unwrap(root)) or type(root).__name__,
            len(flat),
        )
        return flat

    def _flatten_node(
        self, node: Any, prefix: str, active: set[int]
    ) -> dict[str, SchemaNode]:
        target = unwrap(node, prefix)
        if id(target) in active:
            raise CyclicSchema(prefix)

        kind = node_kind(target)
        if kind is None:
            return self._flatten_unknown(target, prefix)
        if kind is NodeKind.LEAF:
            return {}

        active.add(id(target))
        try:
            match kind:
                case NodeKind.OBJECT:
                    return self._flatten_object(target, prefix, active)
                case NodeKind.ARRAY:
                    return self._flatten_array(target, prefix, active)
                case NodeKind.TUPLE:
                    return self._flatten_tuple(target, prefix, active)
                case NodeKind.UNION:
                    return self._flatten_union(target, prefix, active)
                case _:
                    # unwrap() never returns a wrapper
                    msg = f"Unexpected node kind {kind!r} at {prefix!r}"
                    raise AssertionError(msg)
        finally:
            active.discard(id(target))

    def _flatten_unknown(self, node: Any, prefix: str) -> dict[str, SchemaNode]:
        if self._config.unknown_kinds is UnknownKindPolicy.LEAF:
            logger.debug(
                "Treating unsupported %s at %r as a leaf", type(node).__name__, prefix
            )
            return {}
        raise UnsupportedSchemaKind(node, prefix)

    def _flatten_child(
        self, child: Any, child_path: str, active: set[int]
    ) -> list[dict[str, SchemaNode]]:
        return [{child_path: child}, self._flatten_node(child, child_path, active)]

    def _flatten_object(
        self, node: Any, prefix: str, active: set[int]
    ) -> dict[str, SchemaNode]:
        contributions: list[dict[str, SchemaNode]] = []
        for name, child in node.fields.items():
            child_path = f"{prefix}.{name}" if prefix else name
            contributions.extend(self._flatten_child(child, child_path, active))
        return merge_flattened(contributions)

    def _flatten_array(
        self, node: Any, prefix: str, active: set[int]
    ) -> dict[str, SchemaNode]:
        return merge_flattened(
            self._flatten_child(node.element, f"{prefix}[]", active)
        )

    def _flatten_tuple(
        self, node: Any, prefix: str, active: set[int]
    ) -> dict[str, SchemaNode]:
        contributions: list[dict[str, SchemaNode]] = []
        for index, item in enumerate(node.items):
            contributions.extend(self._flatten_child(item, f"{prefix}[{index}]", active))
        return merge_flattened(contributions)

    def _flatten_union(
        self, node: Any, prefix: str, active: set[int]
    ) -> dict[str, SchemaNode]:
        return merge_flattened(
            self._flatten_node(branch, prefix, active) for branch in node.branches
        )
