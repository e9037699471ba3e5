"""
Options namespace: the key prefix under which a feature keeps its options in
the host's flat options mapping.

The prefix is forced to end with a single separator and every run of
separators is collapsed to one, so ``"tribe_ext_daystrip"``,
``"tribe_ext_daystrip_"`` and ``"tribe__ext_daystrip__"`` all give
``"tribe_ext_daystrip_"``.
"""

from __future__ import annotations

import re

SEPARATOR = "_"

_SEPARATOR_RUN = re.compile(re.escape(SEPARATOR) + "{2,}")


def normalize_prefix(raw_prefix: str) -> str:
    return _SEPARATOR_RUN.sub(SEPARATOR, raw_prefix + SEPARATOR)


class OptionsNamespace:
    """Immutable prefix with key qualification helpers."""

    __slots__ = ("_prefix",)

    def __init__(self, raw_prefix: str = "") -> None:
        object.__setattr__(self, "_prefix", normalize_prefix(raw_prefix))

    def __setattr__(self, name, value):
        raise AttributeError("OptionsNamespace is immutable")

    @property
    def prefix(self) -> str:
        return self._prefix

    def owns(self, key: str) -> bool:
        return key.startswith(self._prefix)

    def qualify(self, key: str = "") -> str:
        """Prefix ``key`` unless it already carries this namespace."""
        if self.owns(key):
            return key
        return self._prefix + key

    def strip(self, key: str) -> str:
        """Remove the prefix from the start of ``key`` (only there)."""
        if self.owns(key):
            return key[len(self._prefix):]
        return key

    def __str__(self) -> str:
        return self._prefix

    def __repr__(self) -> str:
        return f"OptionsNamespace({self._prefix!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionsNamespace):
            return NotImplemented
        return self._prefix == other._prefix

    def __hash__(self) -> int:
        return hash(self._prefix)
