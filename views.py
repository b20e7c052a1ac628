# views.py
# Card view helpers used by app.py: ordering, removal, labels, stats and exports.
# Everything here works on plain record dicts (index -> CartRecord) so the UI state
# can be rebuilt from the raw text at any time.
from __future__ import annotations

from io import BytesIO
from typing import Dict, List

import pandas as pd

import config
from cart_parsers import CartRecord, records_to_frame


def sorted_records(records: Dict[str, CartRecord], sort: bool) -> List[CartRecord]:
    """Alphabetical by index when `sort` is on, otherwise first-discovery order."""
    items = list(records.values())
    if sort:
        items.sort(key=lambda r: r.index)
    return items


def remove_record(records: Dict[str, CartRecord], index: str) -> Dict[str, CartRecord]:
    return {k: v for k, v in records.items() if k != index}


def stats_line(total_found: int, unique: int) -> str:
    return f"Znalezione: {total_found} | Unikalne: {unique}"


def format_qty(value) -> str:
    if value is None:
        return config.UNKNOWN_QTY
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def card_labels(record: CartRecord) -> dict:
    return {
        "index": record.index,
        "description": record.description or config.NO_DESCRIPTION,
        "qty": f"Ilość: {format_qty(record.qty_products)}",
        "packs": f"Paczki: {format_qty(record.qty_packs)}",
        "duplicates": f"Duplikaty: {record.count}",
    }


def cards_frame(records: Dict[str, CartRecord], sort: bool) -> pd.DataFrame:
    return records_to_frame(sorted_records(records, sort))


def df_to_csv_bytes(df: pd.DataFrame) -> bytes:
    return df.to_csv(index=False).encode("utf-8")


def df_to_xlsx_bytes(df: pd.DataFrame, sheet_name: str = "Karty") -> bytes:
    excel_buffer = BytesIO()
    with pd.ExcelWriter(excel_buffer, engine="xlsxwriter") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return excel_buffer.getvalue()
