"""Public API functions for json-token-match.

This module provides the user-facing functions: exact_match, subset_match and
compare.  Each call creates a fresh JsonComparator, so no state survives
between calls; persisting extracted values across scenario steps is the
caller's job.
"""

from __future__ import annotations

from json_token_match.algorithm.config import MatchConfig, MatchMode
from json_token_match.comparator import JsonComparator
from json_token_match.result import ComparisonResult

__all__ = ["compare", "exact_match", "subset_match"]


def compare(
    expected_text: str | bytes,
    actual_text: str | bytes,
    config: MatchConfig | None = None,
) -> ComparisonResult:
    """Compare an expected template with an actual document.

    Args:
        expected_text: Template JSON.  Whole-string ``[[NAME]]`` tokens (quoted
                       or bare) capture the actual value at their position.
        actual_text:   JSON under test, typically a captured response body.
        config:        Comparison settings.  Defaults to ``MatchConfig()``
                       (exact mode) when None.

    Returns:
        A ``ComparisonResult`` with matched, extracted, mismatches, mode and
        computation_time_ms populated.

    Raises:
        JsonParseError: If either text is not well-formed JSON.
    """
    comparator = JsonComparator(config=config)
    return comparator.compare(expected_text, actual_text)


def exact_match(
    expected_text: str | bytes, actual_text: str | bytes
) -> ComparisonResult:
    """Return the result of matching ``actual_text`` exactly against the template.

    Every expected member must exist, no extra members are allowed and array
    lengths must agree.  Token positions match any value.
    """
    return compare(expected_text, actual_text, MatchConfig(mode=MatchMode.EXACT))


def subset_match(
    expected_text: str | bytes, actual_text: str | bytes
) -> ComparisonResult:
    """Return the result of matching ``actual_text`` as a superset of the template.

    Extra actual members are ignored.  Expected arrays must be a positional
    prefix of the actual arrays: ``[1, 2]`` matches ``[1, 2, 3]`` but not
    ``[2, 1]``.
    """
    return compare(expected_text, actual_text, MatchConfig(mode=MatchMode.SUBSET))
