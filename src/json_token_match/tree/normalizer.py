"""TokenNormalizer: quotes bare ``[[NAME]]`` placeholders in template text.

Template authors may write a token where the value's JSON type is not known
up front::

    {"id": [[JOB_ID]], "count": [[COUNT]]}

That text is not valid JSON.  The normalizer rewrites every token that sits
outside a string literal into a quoted string (``"[[JOB_ID]]"``) so the
parser accepts it; the matcher then recognises the token string before any
type check is applied.

Handles:
- Bare tokens in value position (e.g. ``[[ID]]`` -> ``"[[ID]]"``)
- Bare tokens as array elements (e.g. ``[[[A]], 2]`` -> ``["[[A]]", 2]``)
- Already-quoted tokens (left untouched)
- Tokens embedded in longer strings (left untouched, they stay literal text)
- Escaped quotes inside string literals
- Single-word nested arrays (``[[1]]``, ``[[true]]``) read as tokens named
  ``1`` / ``true``; write ``[ [1] ]`` to keep a literal nested array
"""

from __future__ import annotations

import logging
import re

__all__ = ["TokenNormalizer", "is_token", "token_name"]

logger = logging.getLogger(__name__)

# Whole-string token, e.g. "[[JOB_ID]]"
_TOKEN = re.compile(r"\[\[(\w+)\]\]")

# Either a complete JSON string literal (group 1) or a bare token (group 2).
# String literals are consumed first so that tokens inside them are skipped.
_LITERAL_OR_TOKEN = re.compile(r'("(?:[^"\\]|\\.)*")|\[\[(\w+)\]\]', re.DOTALL)


def token_name(text: str) -> str | None:
    """Return the token name when ``text`` is exactly ``[[NAME]]``, else None."""
    match = _TOKEN.fullmatch(text)
    return match.group(1) if match else None


def is_token(text: str) -> bool:
    """Return True when ``text`` is a whole-string ``[[NAME]]`` token."""
    return token_name(text) is not None


class TokenNormalizer:
    """Rewrites bare ``[[NAME]]`` tokens into JSON string literals.

    Stateless; a single instance can be shared across threads.

    Example usage:
        normalizer = TokenNormalizer()
        normalizer.normalize('{"id": [[ID]]}')      # '{"id": "[[ID]]"}'
        normalizer.normalize('{"id": "[[ID]]"}')    # unchanged
    """

    def normalize(self, text: str) -> str:
        """Quote every token found outside a string literal.

        The rewrite is idempotent: running it on its own output returns the
        same text, because every token it produces is inside a literal.

        Args:
            text: Raw expected-document text.

        Returns:
            The text with bare tokens quoted; all other characters unchanged.
        """
        quoted = 0

        def _replace(match: re.Match[str]) -> str:
            nonlocal quoted
            if match.group(1) is not None:
                return match.group(1)
            quoted += 1
            return f'"[[{match.group(2)}]]"'

        result = _LITERAL_OR_TOKEN.sub(_replace, text)
        if quoted:
            logger.debug("quoted %d bare token(s) in expected document", quoted)
        return result
