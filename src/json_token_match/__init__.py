"""json-token-match - token-aware structural JSON comparison and extraction."""

from __future__ import annotations

from json_token_match.algorithm.config import MatchConfig, MatchMode
from json_token_match.api import compare, exact_match, subset_match
from json_token_match.comparator import JsonComparator
from json_token_match.errors import JsonParseError, JsonTokenMatchError
from json_token_match.result import ComparisonResult, Mismatch
from json_token_match.tree.nodes import JsonKind, JsonNode

__version__: str = "0.1.0"
__all__: list[str] = [
    "ComparisonResult",
    "JsonComparator",
    "JsonKind",
    "JsonNode",
    "JsonParseError",
    "JsonTokenMatchError",
    "MatchConfig",
    "MatchMode",
    "Mismatch",
    "compare",
    "exact_match",
    "subset_match",
]
