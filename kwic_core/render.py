"""Report rendering: the reference plain-text layout and JSON."""

from __future__ import annotations

import json

from kwic_core.pipeline import KwicIndex


def render_text(index: KwicIndex, timing: bool = True) -> str:
    """Each rotation is preceded by a blank separator line."""
    out = "".join(f"\n{rotation}\n" for rotation in index.rotations)
    if timing:
        out += f"\n\n{index.elapsed_us} microseconds to complete.\n"
    return out


def render_json(index: KwicIndex) -> str:
    return json.dumps(index.to_dict(), indent=2, ensure_ascii=False) + "\n"
