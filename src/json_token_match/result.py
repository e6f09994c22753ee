"""ComparisonResult and Mismatch dataclasses for comparison output.

This module provides the result types returned by exact_match(),
subset_match() and compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from json_token_match.algorithm.config import MatchMode
    from json_token_match.tree.nodes import JsonNode

__all__ = ["ComparisonResult", "Mismatch"]


@dataclass(frozen=True, slots=True)
class Mismatch:
    """One discrepancy between the expected and actual documents.

    Attributes:
        path:    Location in the expected tree, rooted at ``$`` with ``.name``
                 and ``[index]`` segments, e.g. ``$.user.roles[2]``.
        message: Human-readable description, e.g.
                 ``String mismatch. Expected "admin", got "guest".``
    """

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Result of an exact_match() / subset_match() call.

    Attributes:
        matched: True iff ``mismatches`` is empty.
        extracted: Token name -> value found at the token's position in the
            actual document.  Populated even when ``matched`` is False.
        mismatches: Discrepancies in discovery order (depth-first, expected
            member order, then array index order).
        mode: The match mode the comparison ran under.
        computation_time_ms: Wall-clock duration of the comparison in
            milliseconds, parsing included.
    """

    matched: bool
    extracted: dict[str, JsonNode]
    mismatches: list[Mismatch]
    mode: MatchMode
    computation_time_ms: float

    def __bool__(self) -> bool:
        return self.matched

    @property
    def extracted_values(self) -> dict[str, Any]:
        """The extraction mapping with each node converted to a plain Python value."""
        return {name: node.to_python() for name, node in self.extracted.items()}

    @property
    def messages(self) -> list[str]:
        """Mismatches rendered as ``"<path>: <message>"`` strings."""
        return [str(m) for m in self.mismatches]
