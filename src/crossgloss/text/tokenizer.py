"""Word/separator tokenizer used to scan definitions.

A definition is split into maximal runs of *separator* characters and maximal
runs of *word* (non-separator) characters. The runs partition the string, so
joining every token in order reproduces the input exactly.

Examples
--------
>>> next_token("...Hello...World", 3)
'Hello'
>>> next_token("...Hello...World", 0)
'...'
>>> list(iter_tokens("a cat, too"))
['a', ' ', 'cat', ', ', 'too']
"""

from __future__ import annotations

from collections.abc import Iterator, Set

SEPARATORS: frozenset[str] = frozenset(' .,/":;-!><(){}[]')


def next_token(text: str, position: int, separators: Set[str] = SEPARATORS) -> str:
    """Return the word or separator run in `text` starting at `position`.

    Parameters
    ----------
    text : str
        String to scan.
    position : int
        Start index; must satisfy ``0 <= position < len(text)``.
    separators : Set[str]
        Single characters treated as word boundaries.

    Returns
    -------
    str
        The maximal run of characters sharing the class (separator or not) of
        ``text[position]``. Never empty.

    Raises
    ------
    IndexError
        If `position` is outside the string.
    """
    if not 0 <= position < len(text):
        raise IndexError(f"position {position} out of range for text of length {len(text)}")

    in_run = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == in_run:
        end += 1
    return text[position:end]


def iter_tokens(text: str, separators: Set[str] = SEPARATORS) -> Iterator[str]:
    """Yield consecutive tokens of `text` from left to right."""
    position = 0
    while position < len(text):
        token = next_token(text, position, separators)
        yield token
        position += len(token)


def is_separator_token(token: str, separators: Set[str] = SEPARATORS) -> bool:
    """Return True if `token` is a separator run rather than a word."""
    return bool(token) and token[0] in separators


__all__ = ["SEPARATORS", "next_token", "iter_tokens", "is_separator_token"]
