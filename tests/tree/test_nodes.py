"""Tests for the SchemaNode variants and the NodeKind / WrapperKind StrEnums.

Verifies:
- NodeKind has exactly six members with lowercase string values
- Each concrete node carries the matching class-level kind tag
- Nodes are frozen, slotted, and compare by identity
- Object fields keep declaration order behind a read-only view
- Tuple items and union branches are normalised to tuples
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from schema_paths.tree.nodes import (
    ArraySchema,
    LeafSchema,
    NodeKind,
    ObjectSchema,
    SchemaNode,
    TupleSchema,
    UnionSchema,
    WrapperKind,
    WrapperSchema,
    literal,
    nullable,
    optional,
    with_default,
)


class TestNodeKind:
    """Tests for the NodeKind StrEnum."""

    def test_has_exactly_six_members(self) -> None:
        assert len(NodeKind) == 6

    def test_values_are_lowercased(self) -> None:
        assert NodeKind.OBJECT == "object"
        assert NodeKind.ARRAY == "array"
        assert NodeKind.TUPLE == "tuple"
        assert NodeKind.UNION == "union"
        assert NodeKind.WRAPPER == "wrapper"
        assert NodeKind.LEAF == "leaf"

    def test_members_are_str_instances(self) -> None:
        for member in NodeKind:
            assert isinstance(member, str), f"{member!r} is not a str instance"


class TestWrapperKind:
    def test_members(self) -> None:
        assert {m.value for m in WrapperKind} == {"optional", "nullable", "default"}


class TestKindTags:
    """Each concrete class is tagged with exactly one NodeKind."""

    @pytest.mark.parametrize(
        ("node", "kind"),
        [
            (ObjectSchema({}), NodeKind.OBJECT),
            (ArraySchema(LeafSchema()), NodeKind.ARRAY),
            (TupleSchema(()), NodeKind.TUPLE),
            (UnionSchema(()), NodeKind.UNION),
            (WrapperSchema(LeafSchema()), NodeKind.WRAPPER),
            (LeafSchema(), NodeKind.LEAF),
        ],
    )
    def test_kind(self, node: SchemaNode, kind: NodeKind) -> None:
        assert node.kind is kind
        assert isinstance(node, SchemaNode)


class TestIdentitySemantics:
    def test_equal_looking_leaves_are_distinct(self) -> None:
        """Structurally identical leaves are still two different schema objects."""
        a = LeafSchema("string")
        b = LeafSchema("string")
        assert a != b
        assert a is not b

    def test_nodes_are_hashable(self) -> None:
        leaf = LeafSchema("number")
        obj = ObjectSchema({"n": leaf})
        assert len({leaf, obj, leaf}) == 2

    def test_nodes_are_frozen(self) -> None:
        leaf = LeafSchema("string")
        with pytest.raises(FrozenInstanceError):
            leaf.type_name = "number"  # type: ignore[misc]

    def test_uses_slots(self) -> None:
        assert hasattr(LeafSchema, "__slots__")
        assert hasattr(ObjectSchema, "__slots__")


class TestObjectSchema:
    def test_fields_keep_declaration_order(self) -> None:
        obj = ObjectSchema({"z": LeafSchema(), "a": LeafSchema(), "m": LeafSchema()})
        assert list(obj.fields) == ["z", "a", "m"]

    def test_fields_are_read_only(self) -> None:
        obj = ObjectSchema({"a": LeafSchema()})
        with pytest.raises(TypeError):
            obj.fields["b"] = LeafSchema()  # type: ignore[index]

    def test_fields_view_the_callers_mapping(self) -> None:
        """The caller owns the graph; the node is a view over its mapping."""
        fields: dict[str, SchemaNode] = {}
        obj = ObjectSchema(fields)
        leaf = LeafSchema()
        fields["late"] = leaf
        assert obj.fields["late"] is leaf

    def test_default_is_empty(self) -> None:
        assert len(ObjectSchema().fields) == 0


class TestSequenceNodes:
    def test_tuple_items_coerced_to_tuple(self) -> None:
        items = [LeafSchema(), LeafSchema()]
        node = TupleSchema(items)  # type: ignore[arg-type]
        assert isinstance(node.items, tuple)
        assert node.items[0] is items[0]

    def test_union_branches_coerced_to_tuple(self) -> None:
        branches = [LeafSchema(), LeafSchema()]
        node = UnionSchema(branches)  # type: ignore[arg-type]
        assert isinstance(node.branches, tuple)
        assert node.branches[1] is branches[1]


class TestHelpers:
    def test_optional(self) -> None:
        inner = LeafSchema("string")
        node = optional(inner)
        assert node.wrapper is WrapperKind.OPTIONAL
        assert node.inner is inner

    def test_nullable(self) -> None:
        assert nullable(LeafSchema()).wrapper is WrapperKind.NULLABLE

    def test_with_default(self) -> None:
        node = with_default(LeafSchema("number"), 3)
        assert node.wrapper is WrapperKind.DEFAULT
        assert node.default == 3

    def test_literal(self) -> None:
        node = literal("car")
        assert node.type_name == "literal"
        assert node.value == "car"
