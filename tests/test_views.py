"""
Unit tests for card view helpers
"""
from cart_parsers import parse
from views import (
    card_labels,
    cards_frame,
    df_to_csv_bytes,
    df_to_xlsx_bytes,
    format_qty,
    remove_record,
    sorted_records,
    stats_line,
)

TEXT = "444.555.66\nSofa\n1\n111.222.33\nLampa\n2,5\n3\n222.333.44"


class TestOrdering:
    """Sort toggle and removal"""

    def test_unsorted_keeps_discovery_order(self):
        records = parse(TEXT).records
        assert [r.index for r in sorted_records(records, sort=False)] == [
            "444.555.66", "111.222.33", "222.333.44",
        ]

    def test_sorted_by_index(self):
        records = parse(TEXT).records
        assert [r.index for r in sorted_records(records, sort=True)] == [
            "111.222.33", "222.333.44", "444.555.66",
        ]

    def test_sorting_does_not_change_records(self):
        records = parse(TEXT).records
        sorted_records(records, sort=True)
        assert list(records) == ["444.555.66", "111.222.33", "222.333.44"]

    def test_remove_keeps_others(self):
        records = parse(TEXT).records
        before = {k: v.to_dict() for k, v in records.items() if k != "111.222.33"}

        remaining = remove_record(records, "111.222.33")

        assert list(remaining) == ["444.555.66", "222.333.44"]
        assert {k: v.to_dict() for k, v in remaining.items()} == before
        assert "111.222.33" in records

    def test_remove_unknown_index(self):
        records = parse(TEXT).records
        assert list(remove_record(records, "999.999.99")) == list(records)


class TestLabels:
    """Texts shown on a card"""

    def test_format_qty(self):
        assert format_qty(None) == "?"
        assert format_qty(4.0) == "4"
        assert format_qty(2.5) == "2.5"
        assert format_qty(3) == "3"

    def test_full_card(self):
        rec = parse(TEXT).records["111.222.33"]
        assert card_labels(rec) == {
            "index": "111.222.33",
            "description": "Lampa",
            "qty": "Ilość: 2.5",
            "packs": "Paczki: 3",
            "duplicates": "Duplikaty: 1",
        }

    def test_empty_card(self):
        rec = parse(TEXT).records["222.333.44"]
        labels = card_labels(rec)
        assert labels["description"] == "(brak opisu)"
        assert labels["qty"] == "Ilość: ?"
        assert labels["packs"] == "Paczki: ?"

    def test_stats_line(self):
        result = parse(TEXT + "\n444.555.66")
        assert stats_line(result.total_found, result.unique) == "Znalezione: 4 | Unikalne: 3"


class TestExports:
    """CSV / XLSX downloads"""

    def test_csv(self):
        df = cards_frame(parse(TEXT).records, sort=True)
        lines = df_to_csv_bytes(df).decode("utf-8").splitlines()
        assert lines[0] == "Index,Description,Quantity,Packs,Duplicates"
        assert lines[1].startswith("111.222.33,Lampa,2.5,3,1")
        assert len(lines) == 4

    def test_exports_with_huge_packs(self):
        records = parse("111.222.33\nLampa\n1\n" + "9" * 25).records
        df = cards_frame(records, sort=False)
        lines = df_to_csv_bytes(df).decode("utf-8").splitlines()
        assert lines[1].startswith("111.222.33,Lampa,1.0,")
        assert df_to_xlsx_bytes(df)[:2] == b"PK"

    def test_xlsx(self):
        df = cards_frame(parse(TEXT).records, sort=False)
        data = df_to_xlsx_bytes(df)
        assert data[:2] == b"PK"
