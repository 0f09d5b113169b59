"""
Text normalization for catalog matching.

Folds strings so that "José", " JOSE " and "jose" compare equal.
"""

import unicodedata


def normalize_text(value: str = "") -> str:
    """
    Fold a string to a comparison-safe form.

    Lowercases, strips diacritics (NFD decomposition with combining marks
    removed) and trims surrounding whitespace. Total: non-string input
    normalizes to "".

    Examples:
        >>> normalize_text("  José ")
        'jose'
        >>> normalize_text("CORTE DE PELO")
        'corte de pelo'
    """
    if not isinstance(value, str):
        return ""

    decomposed = unicodedata.normalize("NFD", value.lower())
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return stripped.strip()
