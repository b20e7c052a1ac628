from .ikea_cart import IkeaCartParser, CartRecord, ParseResult, records_to_frame
from .lines import normalize_lines


def parse(raw_text):
    """Parse pasted cart text into records keyed by product index."""
    return IkeaCartParser().parse(raw_text)


__all__ = [
    "IkeaCartParser",
    "CartRecord",
    "ParseResult",
    "records_to_frame",
    "normalize_lines",
    "parse",
]
