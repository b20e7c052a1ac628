# cart_parsers/lines.py
# Line-level helpers shared by the pasted-text parsers:
#  • normalize_lines: split pasted text into trimmed, single-spaced, non-empty lines
#  • is_header_line / find_index / looks_like_number: pure line classifiers
#  • to_number: bare-number token → float (None when not finite)
from __future__ import annotations

import re
from typing import List, Optional

import numpy as np

# Product index as printed on IKEA carts / receipts, e.g. 123.456.78
INDEX_RE = re.compile(r"\b\d{3}\.\d{3}\.\d{2}\b", re.ASCII)

# Column headers / labels found in copied cart tables (Polish UI)
HEADER_BLACKLIST = [
    "numer",
    "cdu",
    "indeks",
    "opis",
    "cena",
    "ilość",
    "ilosc",
    "wartość",
    "wartosc",
    "razem",
    "suma",
    "produkt",
    "nr",
    "pozycja",
    "kod",
]

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
# BOM counts as whitespace, as in browser-side trim()
_WS_RE = re.compile(r"[\s\ufeff]+")
_BARE_NUMBER_RE = re.compile(r"-?\d+(?:[.,]\d+)?", re.ASCII)


def normalize_line(line: str) -> str:
    return _WS_RE.sub(" ", line).strip()


def normalize_lines(text: Optional[str]) -> List[str]:
    """
    Split raw pasted text into lines, collapse whitespace runs and drop
    lines that end up empty. Source order is kept.
    """
    if not text:
        return []
    lines = (normalize_line(ln) for ln in _LINE_BREAK_RE.split(text))
    return [ln for ln in lines if ln]


def is_header_line(line: str) -> bool:
    lower = line.lower()
    return any(word in lower for word in HEADER_BLACKLIST)


def find_index(line: str) -> Optional[str]:
    m = INDEX_RE.search(line)
    return m.group(0) if m else None


def has_index(line: str) -> bool:
    return INDEX_RE.search(line) is not None


def looks_like_number(line: str) -> bool:
    """True when the whole line is a number: optional '-', digits, optional .xx / ,xx"""
    return _BARE_NUMBER_RE.fullmatch(line) is not None


def to_number(token: str) -> Optional[float]:
    # Comma is the decimal separator in pasted Polish carts
    try:
        value = float(token.replace(",", ".", 1))
    except ValueError:
        return None
    if not np.isfinite(value):
        return None
    return value
