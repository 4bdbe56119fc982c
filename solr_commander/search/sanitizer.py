"""Escaping of Solr query syntax characters."""

from __future__ import annotations

import re

# Reserved tokens of the standard query parser. Multi-character tokens are
# prefixed with a single backslash as a whole.
SOLR_SPECIAL_CHARACTERS: re.Pattern[str] = re.compile(
    r'(\+|\-|&&|\|\||!|\(|\)|\{|\}|\[|\]|\^|"|\~|\*|\?|:|/|AND|OR)'
)


def sanitize(text: str) -> str:
    """Escape every reserved token in ``text`` with a backslash."""
    return SOLR_SPECIAL_CHARACTERS.sub(r"\\\g<1>", text)
