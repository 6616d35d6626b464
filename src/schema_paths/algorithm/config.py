"""FlattenConfig and UnknownKindPolicy for path flattening.

FlattenConfig is a frozen (immutable) dataclass holding the traversal
options. UnknownKindPolicy selects what happens when traversal meets a node
that is none of the six known kinds.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class UnknownKindPolicy(StrEnum):
    """How to treat nodes outside the six known kinds.

    - ERROR: Raise UnsupportedSchemaKind where the node is met.
    - LEAF:  Treat the node as a leaf; it keeps its own path entry but
             contributes no children.
    """

    ERROR = auto()
    LEAF = auto()


@dataclass(frozen=True, slots=True)
class FlattenConfig:
    """Immutable configuration for PathFlattener.

    Attributes:
        unknown_kinds: Policy for unknown node kinds. Plain strings such as
            ``"leaf"`` are accepted and coerced. Default ``ERROR``.
    """

    unknown_kinds: UnknownKindPolicy = UnknownKindPolicy.ERROR

    def __post_init__(self) -> None:
        try:
            policy = UnknownKindPolicy(self.unknown_kinds)
        except ValueError:
            choices = ", ".join(repr(p.value) for p in UnknownKindPolicy)
            msg = f"unknown_kinds must be one of {choices}, got {self.unknown_kinds!r}"
            raise ValueError(msg) from None
        object.__setattr__(self, "unknown_kinds", policy)
