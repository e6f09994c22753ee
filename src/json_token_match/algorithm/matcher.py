"""TreeMatcher: recursive match-or-extract walk over two JsonNode trees.

Walks the expected and actual trees in lock-step.  At every node the
precedence is:

1. Token short-circuit: an expected string that is exactly ``[[NAME]]``
   captures the actual node under NAME and ends the walk for that subtree.
   Tokens carry no type constraint, so they never produce a mismatch.
2. Kind check: differing kinds produce a type mismatch and the subtree is
   not descended.  ``true``/``false`` share the BOOLEAN kind.
3. Per-kind comparison (objects by member name, arrays by index, scalars by
   content; numbers by their exact source text).

Mismatches are accumulated, never raised, so one walk reports every
discrepancy.  Both accumulators are call-local and owned by the caller.
"""

from __future__ import annotations

from json_token_match.algorithm.config import MatchMode
from json_token_match.result import Mismatch
from json_token_match.tree.nodes import JsonKind, JsonNode
from json_token_match.tree.normalizer import token_name

__all__ = ["TreeMatcher"]


class TreeMatcher:
    """Recursive comparator for one match mode.

    Example::

        from json_token_match.algorithm.config import MatchMode
        from json_token_match.algorithm.matcher import TreeMatcher
        from json_token_match.tree.builder import TreeBuilder

        builder = TreeBuilder()
        extracted, mismatches = {}, []
        TreeMatcher(MatchMode.EXACT).match(
            builder.parse('{"id": "[[ID]]"}'),
            builder.parse('{"id": 7}'),
            "$",
            extracted,
            mismatches,
        )
        # extracted["ID"].value == "7", mismatches == []
    """

    def __init__(self, mode: MatchMode = MatchMode.EXACT) -> None:
        self._mode = mode

    @property
    def mode(self) -> MatchMode:
        return self._mode

    def match(
        self,
        expected: JsonNode,
        actual: JsonNode,
        path: str,
        extracted: dict[str, JsonNode],
        mismatches: list[Mismatch],
    ) -> None:
        """Compare ``expected`` against ``actual`` at ``path``.

        Args:
            expected:   Node from the template tree.
            actual:     Node at the same position in the actual tree.
            path:       Location of this node, rooted at ``$``.
            extracted:  Token accumulator (mutated in place).
            mismatches: Mismatch accumulator (mutated in place).
        """
        if expected.kind == JsonKind.STRING:
            name = token_name(expected.value)
            if name is not None:
                extracted[name] = actual
                return

        if expected.kind != actual.kind:
            mismatches.append(
                Mismatch(
                    path,
                    f"Type mismatch. Expected {expected.kind.label}, "
                    f"got {actual.kind.label}.",
                )
            )
            return

        match expected.kind:
            case JsonKind.OBJECT:
                self._match_object(expected, actual, path, extracted, mismatches)
            case JsonKind.ARRAY:
                self._match_array(expected, actual, path, extracted, mismatches)
            case JsonKind.STRING:
                if expected.value != actual.value:
                    mismatches.append(
                        Mismatch(
                            path,
                            f'String mismatch. Expected "{expected.value}", '
                            f'got "{actual.value}".',
                        )
                    )
            case JsonKind.NUMBER:
                if expected.value != actual.value:
                    mismatches.append(
                        Mismatch(
                            path,
                            f"Number mismatch. Expected {expected.value}, "
                            f"got {actual.value}.",
                        )
                    )
            case JsonKind.BOOLEAN:
                if expected.value != actual.value:
                    mismatches.append(
                        Mismatch(
                            path,
                            f"Boolean mismatch. Expected {expected.to_json()}, "
                            f"got {actual.to_json()}.",
                        )
                    )
            case JsonKind.NULL:
                pass
            case _:
                mismatches.append(
                    Mismatch(path, f"Unsupported JSON value kind: {expected.kind!r}.")
                )

    def _match_object(
        self,
        expected: JsonNode,
        actual: JsonNode,
        path: str,
        extracted: dict[str, JsonNode],
        mismatches: list[Mismatch],
    ) -> None:
        for name, expected_member in expected.members.items():
            member_path = f"{path}.{name}"
            actual_member = actual.members.get(name)
            if actual_member is None:
                mismatches.append(Mismatch(member_path, f"Missing property '{name}'."))
            else:
                self.match(
                    expected_member, actual_member, member_path, extracted, mismatches
                )

        if self._mode == MatchMode.EXACT:
            for name in actual.members:
                if name not in expected.members:
                    mismatches.append(
                        Mismatch(
                            f"{path}.{name}",
                            f"Extra property '{name}' found in actual JSON.",
                        )
                    )

    def _match_array(
        self,
        expected: JsonNode,
        actual: JsonNode,
        path: str,
        extracted: dict[str, JsonNode],
        mismatches: list[Mismatch],
    ) -> None:
        n_expected = len(expected.items)
        n_actual = len(actual.items)

        if self._mode == MatchMode.EXACT and n_expected != n_actual:
            mismatches.append(
                Mismatch(
                    path,
                    f"Array length mismatch. Expected {n_expected}, got {n_actual}.",
                )
            )
            return
        if self._mode == MatchMode.SUBSET and n_expected > n_actual:
            mismatches.append(
                Mismatch(
                    path,
                    "Array length mismatch in subset mode. Expected array with at "
                    f"most {n_actual} elements, but expected has {n_expected} "
                    "elements.",
                )
            )
            return

        # Positional prefix: subset arrays are order-sensitive
        for idx, (expected_item, actual_item) in enumerate(
            zip(expected.items, actual.items)
        ):
            self.match(
                expected_item, actual_item, f"{path}[{idx}]", extracted, mismatches
            )
