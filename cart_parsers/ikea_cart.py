# cart_parsers/ikea_cart.py
# IKEA cart / receipt text paste → one record per product index (###.###.##)
#
# Pasted carts are noisy: headers, prices and labels are mixed with the data and
# every field sits on its own line. For each line carrying an index we look ahead
# until the next index and harvest:
#  • Description = first line that is neither a header nor a bare number
#  • Quantity    = first bare number
#  • Packs       = second bare number, only if it is a whole number
# Repeated indexes are merged: count goes up, empty fields get filled, set fields stay.
from __future__ import annotations

import logging
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from .lines import (
    find_index,
    has_index,
    is_header_line,
    looks_like_number,
    normalize_lines,
    to_number,
)

logger = logging.getLogger(__name__)

RECORD_COLS = ["Index", "Description", "Quantity", "Packs", "Duplicates"]

_INT64_MIN = int(np.iinfo(np.int64).min)
_INT64_MAX = int(np.iinfo(np.int64).max)


@dataclass
class CartRecord:
    index: str
    description: str = ""
    qty_products: Optional[float] = None
    qty_packs: Optional[int] = None
    count: int = 1

    def merge(self, description: str, qty_products: Optional[float], qty_packs: Optional[int]) -> None:
        """Register another occurrence of the same index; only empty fields are filled."""
        self.count += 1
        if not self.description and description:
            self.description = description
        if self.qty_products is None and qty_products is not None:
            self.qty_products = qty_products
        if self.qty_packs is None and qty_packs is not None:
            self.qty_packs = qty_packs

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ParseResult:
    records: Dict[str, CartRecord] = field(default_factory=dict)
    found: List[str] = field(default_factory=list)

    @property
    def total_found(self) -> int:
        return len(self.found)

    @property
    def unique(self) -> int:
        return len(self.records)

    def to_frame(self) -> pd.DataFrame:
        return records_to_frame(self.records.values())


def records_to_frame(records) -> pd.DataFrame:
    rows = [
        {
            "Index": r.index,
            "Description": r.description,
            "Quantity": r.qty_products,
            "Packs": r.qty_packs,
            "Duplicates": r.count,
        }
        for r in records
    ]
    if not rows:
        return pd.DataFrame(columns=RECORD_COLS)
    df = pd.DataFrame(rows, columns=RECORD_COLS)
    df["Quantity"] = pd.to_numeric(df["Quantity"], errors="coerce")
    df["Packs"] = _packs_column([row["Packs"] for row in rows], df.index)
    return df


def _packs_column(packs: List[Optional[int]], index) -> pd.Series:
    # Nullable int64 when every value fits, otherwise keep the Python ints as-is
    if all(p is None or _INT64_MIN <= p <= _INT64_MAX for p in packs):
        return pd.Series(pd.array(packs, dtype="Int64"), index=index)
    return pd.Series(packs, index=index, dtype=object)


class IkeaCartParser:
    name = "IKEA (Text Paste)"

    def _scan_fields(self, lines: List[str], start: int) -> Tuple[str, Optional[float], Optional[int]]:
        desc = ""
        qty_products: Optional[float] = None
        qty_packs: Optional[int] = None

        for j in range(start, len(lines)):
            nxt = lines[j]
            # Next index starts the next record
            if has_index(nxt):
                break
            if not desc and not is_header_line(nxt) and not looks_like_number(nxt):
                desc = nxt
                continue
            if looks_like_number(nxt):
                value = to_number(nxt)
                if value is not None:
                    if qty_products is None:
                        qty_products = value
                    elif qty_packs is None and value.is_integer():
                        qty_packs = int(value)
            if desc and qty_products is not None and qty_packs is not None:
                break

        return desc, qty_products, qty_packs

    def parse(self, text_input: Optional[str]) -> ParseResult:
        """
        Parses pasted IKEA cart text.
        Returns records keyed by index (first-discovery order) plus every raw
        index match found, duplicates included.
        """
        result = ParseResult()
        lines = normalize_lines(text_input)

        for i, line in enumerate(lines):
            if is_header_line(line):
                continue

            index = find_index(line)
            if index is None:
                continue

            desc, qty_products, qty_packs = self._scan_fields(lines, i + 1)

            existing = result.records.get(index)
            if existing is None:
                result.records[index] = CartRecord(
                    index=index,
                    description=desc,
                    qty_products=qty_products,
                    qty_packs=qty_packs,
                )
            else:
                existing.merge(desc, qty_products, qty_packs)

            result.found.append(index)

        logger.debug(
            "Parsed %d lines: %d index matches, %d unique",
            len(lines), result.total_found, result.unique,
        )
        return result
