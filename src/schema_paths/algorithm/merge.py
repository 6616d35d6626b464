"""Merge flattened path maps, folding shared paths into unions.

Used for union branches (each branch flattened at the same prefix) and for
sibling contributions inside objects and tuples.

Contract:
- Output keys are the union of all input keys, in first-occurrence order
  scanning the inputs left to right.
- A path present in one input keeps that input's schema object unchanged.
- A path present in two or more inputs maps to a new UnionSchema whose
  branches follow input order. Union values are spliced flat, so a merge
  never produces a union of unions and
  ``merge([a, b, c])`` has the same branches as ``merge([merge([a, b]), c])``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from schema_paths.tree.nodes import NodeKind, SchemaNode, UnionSchema
from schema_paths.tree.unwrap import node_kind

__all__ = ["merge_flattened"]


def merge_flattened(
    maps: Iterable[Mapping[str, SchemaNode]],
) -> dict[str, SchemaNode]:
    """Combine path maps into one.

    Args:
        maps: Path maps in branch-declaration order.

    Returns:
        A fresh dict; the inputs are not modified.
    """
    grouped: dict[str, list[SchemaNode]] = {}
    for flat in maps:
        for path, schema in flat.items():
            grouped.setdefault(path, []).append(schema)

    merged: dict[str, SchemaNode] = {}
    for path, schemas in grouped.items():
        if len(schemas) == 1:
            merged[path] = schemas[0]
        else:
            members: list[SchemaNode] = []
            for schema in schemas:
                _splice(schema, members)
            merged[path] = UnionSchema(tuple(members))
    return merged


def _splice(schema: SchemaNode, into: list[SchemaNode]) -> None:
    if node_kind(schema) is NodeKind.UNION:
        for branch in schema.branches:  # type: ignore[attr-defined]
            _splice(branch, into)
    else:
        into.append(schema)
