"""TreeBuilder: converts JSON text or Python values into a typed JsonNode tree.

Parsing goes through the standard ``json`` decoder with hooks that keep the
exact source text of every number, so ``1`` and ``1.0`` produce different
NUMBER nodes.  Object member order is preserved; a repeated member name keeps
its first position and takes its last value.

``build()`` accepts already-decoded Python values for callers that hold a
dict rather than text.
"""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from typing import Any

from json_token_match.errors import JsonParseError
from json_token_match.tree.nodes import JsonKind, JsonNode

__all__ = ["MAX_DEPTH", "JsonValue", "TreeBuilder", "decode_document"]

# Deepest container nesting accepted by parse(); the root container is depth 1
MAX_DEPTH = 64

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class _RawNumber(str):
    """Marker for number source text coming out of the decoder hooks."""

    __slots__ = ()


def decode_document(text: str | bytes, document: str) -> str:
    """Return ``text`` as str, decoding bytes as UTF-8.

    Raises:
        JsonParseError: If the bytes are not valid UTF-8.
    """
    if isinstance(text, str):
        return text
    try:
        return text.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise JsonParseError(document, str(exc), 1, exc.start + 1) from exc


_STRING = r'"(?:[^"\\]|\\.)*"'

# String literals are consumed whole so brackets and words inside them are skipped
_CONSTANT = re.compile(_STRING + r"|(-?Infinity|NaN)")
_BRACKET = re.compile(_STRING + r"|([\[{])|([\]}])")


class _ConstantError(ValueError):
    """Raised by the decoder hook on NaN / Infinity / -Infinity."""


class _DepthError(Exception):
    """Raised during conversion when nesting exceeds the builder's limit."""


def _reject_constant(name: str) -> Any:
    raise _ConstantError(f"Non-standard JSON constant {name!r}")


def _line_col(text: str, offset: int) -> tuple[int, int]:
    lineno = text.count("\n", 0, offset) + 1
    colno = offset - text.rfind("\n", 0, offset)
    return lineno, colno


def _locate_constant(text: str) -> tuple[int, int]:
    """Position of the first non-standard constant outside string literals."""
    for match in _CONSTANT.finditer(text):
        if match.group(1) is not None:
            return _line_col(text, match.start())
    return 1, 1


def _locate_depth(text: str, max_depth: int) -> tuple[int, int]:
    """Position of the first opening bracket nested deeper than ``max_depth``."""
    depth = 0
    for match in _BRACKET.finditer(text):
        if match.group(1) is not None:
            depth += 1
            if depth > max_depth:
                return _line_col(text, match.start())
        elif match.group(2) is not None:
            depth -= 1
    return 1, 1


def _member_pairs(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    # dict() keeps the first position and the last value for repeated names
    return dict(pairs)


@dataclass
class TreeBuilder:
    """Converts JSON documents into JsonNode trees.

    The dispatch order in ``build`` matters: bool MUST be checked before int
    because bool is a subclass of int in Python (isinstance(True, int) is True).

    Nesting deeper than ``max_depth`` containers is rejected, which keeps the
    recursive conversion and the matcher walk well inside the interpreter's
    recursion limit.

    Example::
        builder = TreeBuilder()
        tree = builder.parse('{"n": 1.0}')
        # tree: OBJECT -> members {"n": NUMBER("1.0")}
    """

    max_depth: int = MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)

    def parse(self, text: str | bytes, document: str = "actual") -> JsonNode:
        """Parse JSON text into a JsonNode tree.

        Args:
            text:     The JSON document.  ``bytes`` are decoded as UTF-8.
            document: Name of the side being parsed, used in error messages.

        Returns:
            The root JsonNode.

        Raises:
            JsonParseError: If the text is not a single well-formed JSON value,
                or nests containers deeper than ``max_depth``.
        """
        text = decode_document(text, document)
        try:
            raw = json.loads(
                text,
                parse_int=_RawNumber,
                parse_float=_RawNumber,
                parse_constant=_reject_constant,
                object_pairs_hook=_member_pairs,
            )
            return self._from_decoded(raw, 1)
        except json.JSONDecodeError as exc:
            raise JsonParseError(document, exc.msg, exc.lineno, exc.colno) from exc
        except _ConstantError as exc:
            lineno, colno = _locate_constant(text)
            raise JsonParseError(document, str(exc), lineno, colno) from exc
        except (_DepthError, RecursionError) as exc:
            lineno, colno = _locate_depth(text, self.max_depth)
            msg = f"Maximum nesting depth of {self.max_depth} exceeded"
            raise JsonParseError(document, msg, lineno, colno) from exc

    def build(self, value: JsonValue) -> JsonNode:
        """Convert an already-decoded Python value into a JsonNode tree.

        Numbers take the text ``json.dumps`` would produce for them.

        Raises:
            TypeError: If value (or anything nested in it) is not a JSON type.
            ValueError: If a float is NaN or infinite, or containers nest
                deeper than ``max_depth``.
        """
        try:
            return self._build(value, 1)
        except _DepthError:
            msg = f"Maximum nesting depth of {self.max_depth} exceeded"
            raise ValueError(msg) from None

    def _enter(self, depth: int) -> None:
        if depth > self.max_depth:
            raise _DepthError

    def _build(self, value: Any, depth: int) -> JsonNode:
        # CRITICAL: bool MUST be checked before int
        if isinstance(value, bool):
            return JsonNode(JsonKind.BOOLEAN, value)

        if isinstance(value, dict):
            self._enter(depth)
            members: dict[str, JsonNode] = {}
            for key, item in value.items():
                if not isinstance(key, str):
                    raise TypeError(f"JSON object keys must be str, got {type(key)!r}")
                members[key] = self._build(item, depth + 1)
            return JsonNode(JsonKind.OBJECT, members=members)

        if isinstance(value, (list, tuple)):
            self._enter(depth)
            items = [self._build(item, depth + 1) for item in value]
            return JsonNode(JsonKind.ARRAY, items=tuple(items))

        if isinstance(value, str):
            return JsonNode(JsonKind.STRING, value)

        if isinstance(value, (int, float)):
            if isinstance(value, float) and not math.isfinite(value):
                raise ValueError(f"Out of range float value {value!r}")
            return JsonNode(JsonKind.NUMBER, json.dumps(value))

        if value is None:
            return JsonNode(JsonKind.NULL)

        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")

    def _from_decoded(self, raw: Any, depth: int) -> JsonNode:
        """Convert decoder output (numbers as _RawNumber) into nodes."""
        if isinstance(raw, _RawNumber):
            return JsonNode(JsonKind.NUMBER, str(raw))
        if isinstance(raw, dict):
            self._enter(depth)
            members = {k: self._from_decoded(v, depth + 1) for k, v in raw.items()}
            return JsonNode(JsonKind.OBJECT, members=members)
        if isinstance(raw, list):
            self._enter(depth)
            items = [self._from_decoded(v, depth + 1) for v in raw]
            return JsonNode(JsonKind.ARRAY, items=tuple(items))
        return self._build(raw, depth)
