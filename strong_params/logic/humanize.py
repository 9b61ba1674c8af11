"""Display labels for field identifiers used in error messages."""

from __future__ import annotations

import re


_SEPARATORS = re.compile(r"[_\-\s]+")


def humanize(name: object) -> str:
    """Turn a field identifier into a sentence-case label.

    ``"first_name"`` -> ``"First name"``, ``"user_id"`` -> ``"User"``,
    ``"id"`` -> ``"Id"``.
    """
    text = str(name).lstrip("_")
    if text.endswith("_id") and len(text) > 3:
        text = text[:-3]
    text = _SEPARATORS.sub(" ", text).strip().lower()
    if not text:
        return ""
    return text[0].upper() + text[1:]


__all__ = ["humanize"]
