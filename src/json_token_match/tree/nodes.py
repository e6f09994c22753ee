"""JsonNode dataclass and JsonKind StrEnum for the parsed document tree.

Provides the tagged value type that TreeBuilder produces and TreeMatcher
walks.  Every JSON value maps to exactly one JsonNode whose ``kind`` selects
which of the remaining fields are meaningful.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

__all__ = ["JsonKind", "JsonNode"]


class JsonKind(StrEnum):
    """Enumeration of the six JSON value kinds.

    StrEnum values are the lowercased member names (Python 3.11+):
    - OBJECT  -> "object"  : JSON object {}
    - ARRAY   -> "array"   : JSON array []
    - STRING  -> "string"  : JSON string
    - NUMBER  -> "number"  : JSON number (source text retained)
    - BOOLEAN -> "boolean" : true / false
    - NULL    -> "null"    : null
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()

    @property
    def label(self) -> str:
        """Capitalised kind name used in mismatch messages (e.g. "Object")."""
        return self.value.capitalize()


@dataclass(frozen=True, slots=True)
class JsonNode:
    """A node in the parsed JSON tree.

    Attributes:
        kind:    Which kind of value this is (see JsonKind).
        value:   String content for STRING nodes; exact source text for NUMBER
                 nodes (``"1.0"`` and ``"1"`` stay distinct); bool for BOOLEAN
                 nodes; None for NULL, OBJECT and ARRAY nodes.
        members: Ordered member mapping for OBJECT nodes; empty otherwise.
        items:   Element tuple for ARRAY nodes; empty otherwise.
    """

    kind: JsonKind
    value: Any = None
    members: dict[str, JsonNode] = field(default_factory=dict)
    items: tuple[JsonNode, ...] = ()

    def to_python(self) -> Any:
        """Return the plain Python equivalent of this subtree.

        Integer literals become ``int``; every other number (fractions and
        exponents) becomes ``float``.
        """
        match self.kind:
            case JsonKind.OBJECT:
                return {name: node.to_python() for name, node in self.members.items()}
            case JsonKind.ARRAY:
                return [node.to_python() for node in self.items]
            case JsonKind.NUMBER:
                return json.loads(self.value)
            case _:
                return self.value

    def to_json(self) -> str:
        """Render this subtree as compact JSON text, numbers verbatim."""
        match self.kind:
            case JsonKind.OBJECT:
                body = ",".join(
                    f"{json.dumps(name)}:{node.to_json()}"
                    for name, node in self.members.items()
                )
                return "{" + body + "}"
            case JsonKind.ARRAY:
                return "[" + ",".join(node.to_json() for node in self.items) + "]"
            case JsonKind.STRING:
                return json.dumps(self.value)
            case JsonKind.NUMBER:
                return self.value
            case JsonKind.BOOLEAN:
                return "true" if self.value else "false"
            case _:
                return "null"

    def display(self) -> str:
        """Text form used in messages: bare content for strings, JSON otherwise."""
        if self.kind == JsonKind.STRING:
            return self.value
        return self.to_json()
