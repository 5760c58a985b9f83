"""Text folding for locale-insensitive catalog search.

Turkish letter variants are folded onto plain Latin letters so that
``"İstanbul"``, ``"istanbul"`` and ``"ISTANBUL"`` all compare equal.
"""
from __future__ import annotations

_FOLD_TABLE = str.maketrans(
    {
        "ı": "i",
        "İ": "i",
        "ğ": "g",
        "Ğ": "g",
        "ü": "u",
        "Ü": "u",
        "ş": "s",
        "Ş": "s",
        "ö": "o",
        "Ö": "o",
        "ç": "c",
        "Ç": "c",
    }
)


def normalize(text: str | None) -> str:
    """Fold locale letter variants, lower-case and trim. Never raises."""
    if not text:
        return ""
    # fold before lower(): "İ".lower() yields "i" + combining dot
    return text.translate(_FOLD_TABLE).lower().strip()


def fold_aligned(text: str) -> str:
    """Fold like :func:`normalize` but keep one output character per input character.

    Offsets in the result index the same characters in *text*. Nothing is
    trimmed.
    """
    return "".join(c.translate(_FOLD_TABLE).lower()[:1] or c for c in text)


def matches(field: str | None, token: str) -> bool:
    """Dual raw/normalized substring test of *token* against *field*.

    True when the raw token or its normalized form occurs in the raw field
    or in its normalized form. The raw comparison ignores case.
    """
    if not field or not token:
        return False
    raw_field = field.lower()
    norm_field = normalize(field)
    raw_token = token.lower()
    norm_token = normalize(token)
    for needle in (raw_token, norm_token):
        if needle and (needle in raw_field or needle in norm_field):
            return True
    return False


__all__ = ["fold_aligned", "matches", "normalize"]
