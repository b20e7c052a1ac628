"""
Unit tests for Code-128 card barcodes
"""
import pytest

from barcodes import BarcodeRenderError, plain_index, render_barcode_svg, render_index_barcode


class TestBarcodes:
    """SVG rendering with the fixed card style"""

    def test_plain_index(self):
        assert plain_index("123.456.78") == "12345678"

    def test_index_barcode_is_inline_svg(self):
        svg = render_index_barcode("123.456.78")
        assert svg.startswith("<svg")
        assert "<?xml" not in svg
        assert "12345678" in svg

    def test_style_applied(self):
        svg = render_barcode_svg("12345678")
        assert "#111827" in svg
        assert "transparent" in svg

    def test_empty_value(self):
        with pytest.raises(BarcodeRenderError):
            render_barcode_svg("")

    def test_illegal_characters(self):
        with pytest.raises(BarcodeRenderError):
            render_barcode_svg("zażółć")
