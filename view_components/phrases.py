"""Turn identifier-style labels into readable phrases."""

from __future__ import annotations


def split_pascal_case(text: str) -> str:
    """Insert spaces at the word boundaries of a Pascal-case ``text``.

    A run of capitals is kept together as one word, so ``"HasABCDAcronym"``
    becomes ``"Has ABCD Acronym"``. A capital in the final position is always
    split off, even when it ends an acronym (``"AB"`` becomes ``"A B"``).
    Characters are never changed, only separated.
    """

    if len(text) < 2:
        return text

    last = len(text) - 1
    parts = [text[0]]
    for i in range(1, len(text)):
        char = text[i]
        prev_char = text[i - 1]
        next_is_lower = i < last and text[i + 1].islower()
        if (
            char.isupper()
            and prev_char != " "
            and (prev_char.islower() or next_is_lower or i == last)
        ):
            parts.append(" ")
        parts.append(char)
    return "".join(parts)


__all__ = ["split_pascal_case"]
