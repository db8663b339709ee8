"""Default name-matching capability used to filter listing entries.

Queries are split into whitespace-separated tokens. A name matches when every
token matches it, either as a case-insensitive substring or, failing that, as
an in-order subsequence. Tokens prefixed with ``-`` are negated.
"""

from __future__ import annotations

from collections.abc import Sequence


def tokenize(query: str) -> list[str]:
    """Split a raw query into match tokens."""
    return query.split()


def substring_index(query: str, candidate: str) -> int | None:
    if not query:
        return 0
    idx = candidate.casefold().find(query.casefold())
    if idx < 0:
        return None
    return idx


def is_subsequence(query: str, candidate: str) -> bool:
    """Return whether the characters of ``query`` appear in order in ``candidate``, ignoring case."""
    candidate_folded = candidate.casefold()
    pos = 0
    for needle in query.casefold():
        idx = candidate_folded.find(needle, pos)
        if idx < 0:
            return False
        pos = idx + 1
    return True


def token_matches(token: str, name: str) -> bool:
    """Match one token against ``name``, honoring ``-`` negation."""
    if token.startswith("-") and len(token) > 1:
        return substring_index(token[1:], name) is None
    if substring_index(token, name) is not None:
        return True
    return is_subsequence(token, name)


def token_match(tokens: Sequence[str], name: str) -> bool:
    """Return ``True`` when every token matches ``name``."""
    return all(token_matches(token, name) for token in tokens)


__all__ = [
    "tokenize",
    "substring_index",
    "is_subsequence",
    "token_matches",
    "token_match",
]
