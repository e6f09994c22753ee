"""Tree subpackage for JSON parsing primitives.

Re-exports the public API for the tree module:
- JsonNode: frozen dataclass representing a parsed JSON value
- JsonKind: StrEnum of the six value kinds
- TokenNormalizer: quotes bare [[NAME]] tokens in template text
- TreeBuilder: converts JSON text or Python values into a JsonNode tree
"""

from json_token_match.tree.builder import TreeBuilder
from json_token_match.tree.nodes import JsonKind, JsonNode
from json_token_match.tree.normalizer import TokenNormalizer, is_token, token_name

__all__ = [
    "JsonKind",
    "JsonNode",
    "TokenNormalizer",
    "TreeBuilder",
    "is_token",
    "token_name",
]
