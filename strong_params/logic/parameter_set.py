"""Per-request parameter container with an attachable fallback policy.

Keys are compared in one canonical form (``str``) regardless of whether they
arrived from the transport as text or were declared in code as bytes or enum
members. The fallback policy (``default_proc``) is an explicit attribute so a
filtered copy can carry the parent's lookup behaviour for absent keys.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Hashable, Iterable, Mapping, Optional
import logging


logger = logging.getLogger(__name__)

DefaultProc = Callable[["ParameterSet", Hashable], Any]


def normalize_key(key: Any) -> Any:
    """Return the canonical (``str``) form of a field identifier.

    Best-effort: when a key cannot be normalized it is returned unchanged.
    """
    if isinstance(key, str) and not isinstance(key, Enum):
        return key
    try:
        if isinstance(key, Enum):
            value = key.value
            return value if isinstance(value, str) else key.name
        if isinstance(key, (bytes, bytearray)):
            return bytes(key).decode("utf-8")
        return str(key)
    except Exception:
        logger.debug("strong_params.normalize_key.skipped", extra={"key_type": type(key).__name__})
        return key


def normalize_keys(keys: Iterable[Any]) -> list:
    """Normalize keys preserving first-seen order; duplicates collapse."""
    seen: list = []
    for key in keys or ():
        canonical = normalize_key(key)
        if canonical not in seen:
            seen.append(canonical)
    return seen


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes, bytearray)):
        return not value.strip()
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def indifferent_default(params: "ParameterSet", key: Hashable) -> Any:
    """Fallback policy: retry a non-canonical key in canonical form, else None."""
    canonical = normalize_key(key)
    if canonical != key and dict.__contains__(params, canonical):
        return dict.__getitem__(params, canonical)
    return None


class ParameterSet(dict):
    """Mapping of field name to value with an optional ``default_proc``."""

    def __init__(self, *args: Any, default_proc: Optional[DefaultProc] = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.default_proc = default_proc

    @classmethod
    def from_mapping(cls, data: Optional[Mapping], default_proc: Optional[DefaultProc] = indifferent_default) -> "ParameterSet":
        params = cls(default_proc=default_proc)
        for key, value in (data or {}).items():
            params[normalize_key(key)] = value
        return params

    def __missing__(self, key: Hashable) -> Any:
        if self.default_proc is None:
            raise KeyError(key)
        return self.default_proc(self, key)

    def get(self, key: Hashable, default: Any = None) -> Any:
        if dict.__contains__(self, key):
            return dict.__getitem__(self, key)
        canonical = normalize_key(key)
        if canonical != key and dict.__contains__(self, canonical):
            return dict.__getitem__(self, canonical)
        return default

    def copy(self) -> "ParameterSet":
        return ParameterSet(self, default_proc=self.default_proc)

    def select(self, keys: Iterable[Any]) -> "ParameterSet":
        """Return a new set holding only entries whose normalized key is in ``keys``.

        Kept entries are stored under their normalized key (last write wins).
        The returned set has no fallback policy; see ``copy_default_from``.
        """
        permitted = set(normalize_keys(keys))
        out = ParameterSet()
        for key, value in self.items():
            canonical = normalize_key(key)
            if canonical in permitted:
                out[canonical] = value
        return out

    def copy_default_from(self, donor: Any) -> "ParameterSet":
        """Adopt ``donor``'s fallback policy; a donor without one is ignored."""
        try:
            proc = getattr(donor, "default_proc", None)
        except Exception:
            proc = None
        if proc is not None:
            self.default_proc = proc
        return self

    def symbolized(self) -> "ParameterSet":
        """Disposable copy with every key normalized (last write wins)."""
        out = ParameterSet(default_proc=self.default_proc)
        for key, value in self.items():
            out[normalize_key(key)] = value
        return out


__all__ = [
    "ParameterSet",
    "DefaultProc",
    "normalize_key",
    "normalize_keys",
    "is_blank",
    "indifferent_default",
]
