"""
Code-128 barcode rendering for product cards.

The symbol encodes the product index without dots (123.456.78 -> 12345678),
which is what the store scanners expect; the digits are printed below the bars.
"""
import io
import logging

import barcode
from barcode.errors import BarcodeError
from barcode.writer import SVGWriter

import config

logger = logging.getLogger(__name__)


class BarcodeRenderError(Exception):
    """Raised when a value cannot be drawn as a barcode."""


def plain_index(index: str) -> str:
    return index.replace(".", "")


def render_barcode_svg(value: str, options=None) -> str:
    """
    Render `value` as an inline SVG document (no XML prolog) using the fixed
    card style from config.BARCODE_OPTIONS. `options` overrides single keys.
    """
    if not value:
        raise BarcodeRenderError("Nothing to encode")

    writer_options = dict(config.BARCODE_OPTIONS)
    if options:
        writer_options.update(options)

    symbology = barcode.get_barcode_class(config.BARCODE_SYMBOLOGY)
    try:
        code = symbology(value, writer=SVGWriter())
        buffer = io.BytesIO()
        code.write(buffer, writer_options)
    except BarcodeError as e:
        logger.warning(f"Cannot render barcode for {value!r}: {e}")
        raise BarcodeRenderError(str(e)) from e

    svg = buffer.getvalue().decode("utf-8")
    # Drop <?xml ...?> / doctype so the markup can be embedded in HTML
    start = svg.find("<svg")
    return svg[start:] if start >= 0 else svg


def render_index_barcode(index: str) -> str:
    return render_barcode_svg(plain_index(index))
