"""algorithm subpackage — public API for the matching walk.

Provides the recursive matcher and its configuration.  Import from this
module (not from sub-modules directly) to stay on the stable public
interface.

Example::

    from json_token_match.algorithm import MatchMode, TreeMatcher
    from json_token_match.tree import TreeBuilder

    builder = TreeBuilder()
    extracted, mismatches = {}, []
    TreeMatcher(MatchMode.SUBSET).match(
        builder.parse('{"a": [1]}'), builder.parse('{"a": [1, 2], "b": 3}'),
        "$", extracted, mismatches,
    )
    # mismatches == []
"""

from __future__ import annotations

from json_token_match.algorithm.config import MatchConfig, MatchMode
from json_token_match.algorithm.matcher import TreeMatcher

__all__ = ["MatchConfig", "MatchMode", "TreeMatcher"]
