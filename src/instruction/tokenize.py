"""Whitespace tokenization of instruction sentences."""

from __future__ import annotations


def tokenize(text: str | None) -> list[str]:
    """Split an instruction into tokens.

    The text is trimmed and split on any run of whitespace; empty fragments are dropped. Token
    case is preserved (keyword comparison is case-insensitive, account ids are not).
    """

    return (text or "").strip().split()
