"""
Configuration for the IKEA barcode cards app.
Values can be overridden with environment variables where noted.
"""
import os
from pathlib import Path

# Page setup
PAGE_TITLE = "IKEA Barcode Generator"
PAGE_ICON = "🏷️"

# Logging level for the app process (IKEA_CARDS_LOG_LEVEL=DEBUG shows parse counts)
LOG_LEVEL = os.getenv("IKEA_CARDS_LOG_LEVEL", "INFO").strip().upper() or "INFO"

# Raw pasted text is persisted under this key so it survives a restart
STORAGE_KEY = "ikea_raw"
STORAGE_PATH = Path(
    os.getenv("IKEA_CARDS_STORAGE", "").strip()
    or Path.home() / ".ikea_cards" / "storage.json"
)

# Code-128 card style (python-barcode writer options)
# - module_height: bar height in mm
# - quiet_zone: blank margin left/right in mm
# - background "transparent" so cards keep their own background when printed
BARCODE_SYMBOLOGY = "code128"
BARCODE_OPTIONS = {
    "module_height": 20.0,
    "module_width": 0.3,
    "quiet_zone": 0.0,
    "font_size": 14,
    "text_distance": 5.0,
    "write_text": True,
    "background": "transparent",
    "foreground": "#111827",
}

# Card texts
NO_DESCRIPTION = "(brak opisu)"
UNKNOWN_QTY = "?"
