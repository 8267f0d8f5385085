"""Case-aware alphabetical ordering of rotations.

The first position where two strings differ decides.  Characters are
compared case-insensitively first; when they differ only in case, the
lowercase one sorts first.  When one string is a prefix of the other,
the shorter sorts first:

    apple < apples < Apple < Banana
"""

from __future__ import annotations

from typing import Iterable


def _case_rank(ch: str) -> int:
    return 1 if ch.isupper() else 0


def compare_rotations(a: str, b: str) -> int:
    """Three-way comparison.  Returns -1, 0 or 1."""
    for ca, cb in zip(a, b):
        if ca == cb:
            continue
        la, lb = ca.lower(), cb.lower()
        if la != lb:
            return -1 if la < lb else 1
        ra, rb = _case_rank(ca), _case_rank(cb)
        if ra != rb:
            return -1 if ra < rb else 1
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    return 0


def collation_key(rotation: str) -> tuple[tuple[str, int], ...]:
    """Sort key equivalent to compare_rotations.

    Tuples compare element-wise and a shorter tuple that is a prefix of a
    longer one sorts first, which is exactly the comparator's rule.
    """
    return tuple((ch.lower(), _case_rank(ch)) for ch in rotation)


def order_rotations(rotations: Iterable[str]) -> list[str]:
    """Return a new, stably sorted list.  The input is left untouched."""
    return sorted(rotations, key=collation_key)
