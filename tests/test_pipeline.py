"""
Tests for the pipeline and report rendering.
"""

import json
import time

import pytest

from kwic_core.pipeline import KwicIndex, build_index, run
from kwic_core.render import render_json, render_text
from kwic_core.text import DocumentStore, NoiseWordSet, SourceError


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_end_to_end_quick_fox():
    """The noise-led rotation is dropped and the rest are alphabetized."""
    index = build_index(
        DocumentStore.from_text("the quick fox"),
        NoiseWordSet.build(["the"]),
    )
    assert index.rotations == ["fox the quick", "quick fox the"]
    assert index.line_count == 1
    assert index.noise_word_count == 1


def test_rotations_from_all_lines_are_merged():
    """Ordering is global across lines."""
    doc = DocumentStore.from_text("Zoo keeper\n\napple Pie\n")
    index = build_index(doc, NoiseWordSet.build([]))
    assert index.rotations == [
        "apple Pie",
        "keeper Zoo",
        "Pie apple",
        "Zoo keeper",
    ]
    assert index.line_count == 3


def test_all_noise_is_not_an_error():
    """A fully filtered document gives an empty index."""
    index = build_index(
        DocumentStore.from_text("the a\nof\n"),
        NoiseWordSet.build(["THE", "a", "Of"]),
    )
    assert index.rotations == []
    assert len(index) == 0


def test_run_reads_both_files(tmp_path):
    doc = _write(tmp_path, "input.txt", "The cat sat\n")
    noise = _write(tmp_path, "noise.txt", "the\n")
    index = run(doc, noise)
    assert index.rotations == ["cat sat The", "sat The cat"]
    assert index.elapsed_us >= 0


def test_run_reports_noise_file_first(tmp_path):
    """With both files missing, the noise-word file is reported."""
    with pytest.raises(SourceError) as exc:
        run(tmp_path / "missing-input.txt", tmp_path / "missing-noise.txt")
    assert exc.value.kind == "noise words"


def test_run_missing_input(tmp_path):
    noise = _write(tmp_path, "noise.txt", "the\n")
    with pytest.raises(SourceError) as exc:
        run(tmp_path / "missing-input.txt", noise)
    assert exc.value.kind == "input"


def test_render_text_reference_layout():
    """Each rotation is preceded by a blank line; timing goes last."""
    index = KwicIndex(rotations=["a b", "b a"], elapsed_us=42)
    assert render_text(index) == "\na b\n\nb a\n\n\n42 microseconds to complete.\n"
    assert render_text(index, timing=False) == "\na b\n\nb a\n"


def test_render_text_empty():
    assert render_text(KwicIndex(), timing=False) == ""


def test_render_json():
    index = KwicIndex(rotations=["fox the quick"], line_count=1, noise_word_count=1, elapsed_us=7)
    data = json.loads(render_json(index))
    assert data == {
        "rotations": ["fox the quick"],
        "lines": 1,
        "noise_words": 1,
        "elapsed_us": 7,
    }


def test_run_keeps_lone_carriage_return_in_line(tmp_path):
    """A lone \\r does not start a new line, so every rotation has four words."""
    doc = tmp_path / "input.txt"
    doc.write_bytes(b"a b\rc d\n")
    noise = _write(tmp_path, "noise.txt", "")
    index = run(doc, noise)
    assert index.line_count == 1
    assert index.rotations == ["a b c d", "b c d a", "c d a b", "d a b c"]


def test_build_index_times_from_given_start():
    """Elapsed time is measured once, from the supplied start."""
    start = time.perf_counter_ns() - 5_000_000
    index = build_index(
        DocumentStore.from_text("x y"),
        NoiseWordSet.build([]),
        started_ns=start,
    )
    assert index.elapsed_us >= 5_000
