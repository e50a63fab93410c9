"""Column key sanitization."""

from __future__ import annotations

import re
import unicodedata

PLACEHOLDER_KEY = "col"

# BOM, zero-width space/joiners, word joiner, NBSP, soft hyphen
_INVISIBLE = re.compile("[\ufeff\u200b-\u200d\u2060\u00a0\u00ad]")
# C0 and C1 control characters
_CONTROL = re.compile("[\u0000-\u001f\u007f-\u009f]")
_WHITESPACE = re.compile(r"\s+")


def sanitize_key(name: object) -> str:
    """Normalize one column name.

    NFC-normalizes, strips invisible and control characters, collapses
    whitespace and trims. An empty result becomes the placeholder "col".
    """
    text = unicodedata.normalize("NFC", str(name))
    text = _INVISIBLE.sub("", text)
    text = _CONTROL.sub("", text)
    text = _WHITESPACE.sub(" ", text).strip()
    return text or PLACEHOLDER_KEY


class KeySanitizer:
    """Sanitizes column names for one inference run.

    Each raw key is sanitized once. When two different raw keys sanitize to
    the same name, later ones get "_2", "_3", ... suffixes in encounter order.
    """

    def __init__(self) -> None:
        self._used: set[str] = set()
        self._by_raw: dict[str, str] = {}

    def __call__(self, raw_key: str) -> str:
        sanitized = self._by_raw.get(raw_key)
        if sanitized is None:
            sanitized = self._unique(sanitize_key(raw_key))
            self._by_raw[raw_key] = sanitized
        return sanitized

    def _unique(self, base: str) -> str:
        candidate = base
        n = 2
        while candidate in self._used:
            candidate = f"{base}_{n}"
            n += 1
        self._used.add(candidate)
        return candidate
