"""Noise words and document tokenization.

Words are stored verbatim; only noise-word membership is case-insensitive.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from kwic_core.logging import get_logger

log = get_logger("kwic.text")

ENCODING = "utf-8"

Line = tuple[str, ...]


# ── Errors ──────────────────────────────────────────────────────────


class SourceError(RuntimeError):
    """An input source (document or noise-word list) could not be read."""

    def __init__(self, path: str | Path, kind: str, reason: str):
        self.path = str(path)
        self.kind = kind
        self.reason = reason
        super().__init__(f"Error opening {kind} file '{self.path}': {reason}")


def _read_source(path: str | Path, kind: str) -> str:
    try:
        # newline="" keeps a lone \r inside its line; only \n ends a line.
        with open(path, encoding=ENCODING, newline="") as f:
            return f.read()
    except FileNotFoundError:
        raise SourceError(path, kind, "file not found") from None
    except IsADirectoryError:
        raise SourceError(path, kind, "is a directory") from None
    except PermissionError:
        raise SourceError(path, kind, "permission denied") from None
    except UnicodeDecodeError as e:
        raise SourceError(path, kind, f"not valid {ENCODING} text ({e.reason})") from None
    except OSError as e:
        raise SourceError(path, kind, e.strerror or str(e)) from None


# ── Noise words ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class NoiseWordSet:
    words: frozenset[str] = frozenset()

    @classmethod
    def build(cls, words: Iterable[str]) -> NoiseWordSet:
        return cls(frozenset(w.lower() for w in words))

    @classmethod
    def from_text(cls, text: str) -> NoiseWordSet:
        """Whitespace-separated tokens; a list may span any number of lines."""
        return cls.build(text.split())

    def contains(self, word: str) -> bool:
        return word.lower() in self.words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self.words)


def load_noise_words(path: str | Path) -> NoiseWordSet:
    noise = NoiseWordSet.from_text(_read_source(path, "noise words"))
    log.debug("noise_words_loaded", path=str(path), count=len(noise))
    return noise


# ── Document ────────────────────────────────────────────────────────


def tokenize_line(line: str) -> Line:
    """Split on runs of whitespace.  No punctuation stripping, no case folding."""
    return tuple(line.split())


@dataclass(frozen=True)
class DocumentStore:
    tokens: tuple[Line, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> DocumentStore:
        parts = text.split("\n")
        # A trailing newline terminates the last line, it does not start one.
        if parts[-1] == "":
            parts.pop()
        return cls(tuple(tokenize_line(line.rstrip("\r")) for line in parts))

    def lines(self) -> tuple[Line, ...]:
        return self.tokens

    def __len__(self) -> int:
        return len(self.tokens)


def load_document(path: str | Path) -> DocumentStore:
    doc = DocumentStore.from_text(_read_source(path, "input"))
    log.debug("document_loaded", path=str(path), lines=len(doc))
    return doc
