"""Circular shifts: every rotation of a line that starts with a significant word."""

from __future__ import annotations

from typing import Iterable, Sequence

from kwic_core.logging import get_logger
from kwic_core.text import NoiseWordSet

log = get_logger("kwic.shifter")

SEPARATOR = " "


def rotations_for_line(line: Sequence[str], noise: NoiseWordSet) -> list[str]:
    """Rotations of one line, in increasing offset order.

    Offset i puts line[i] in front; the rotation is kept only when that
    word is not a noise word.  n words with m noise positions give n - m
    rotations, and an empty line gives none.
    """
    words = list(line)
    shifts: list[str] = []
    for i, word in enumerate(words):
        if noise.contains(word):
            continue
        shifts.append(SEPARATOR.join(words[i:] + words[:i]))
    return shifts


def generate_rotations(lines: Iterable[Sequence[str]], noise: NoiseWordSet) -> list[str]:
    """All rotations, lines in document order."""
    shifts: list[str] = []
    line_count = 0
    for line in lines:
        shifts.extend(rotations_for_line(line, noise))
        line_count += 1
    log.debug("rotations_generated", lines=line_count, rotations=len(shifts))
    return shifts
