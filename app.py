import logging
from datetime import datetime

import streamlit as st
import streamlit.components.v1 as components

import config
from barcodes import BarcodeRenderError, plain_index, render_index_barcode
from cart_parsers import IkeaCartParser
from clipboard import ClipboardError, read_clipboard, write_clipboard
from storage import RawTextStore, StorageError
from views import (
    card_labels,
    cards_frame,
    df_to_csv_bytes,
    df_to_xlsx_bytes,
    remove_record,
    sorted_records,
    stats_line,
)

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

st.set_page_config(page_title=config.PAGE_TITLE, page_icon=config.PAGE_ICON, layout="wide")

parser = IkeaCartParser()
store = RawTextStore()

CARDS_PER_ROW = 3


# ---------------- state helpers ----------------
def _notify(level: str, message: str):
    st.session_state["notice"] = (level, message)


def _apply_parse(raw: str):
    result = parser.parse(raw)
    st.session_state["records"] = result.records
    st.session_state["total_found"] = result.total_found
    try:
        store.save(raw)
    except StorageError as e:
        logger.warning(str(e))
        _notify("warning", "Nie udało się zapisać tekstu na później.")


def _on_parse():
    _apply_parse(st.session_state.get("raw", "") or "")


def _on_paste():
    try:
        text = read_clipboard()
    except ClipboardError as e:
        _notify("error", str(e))
        return
    st.session_state["raw"] = text
    _apply_parse(text)


def _on_clear():
    st.session_state["raw"] = ""
    st.session_state["records"] = {}
    st.session_state["total_found"] = 0
    try:
        store.clear()
    except StorageError as e:
        logger.warning(str(e))
        _notify("warning", "Nie udało się usunąć zapisanego tekstu.")


def _on_copy(text: str):
    try:
        write_clipboard(text)
    except ClipboardError as e:
        _notify("error", str(e))
        return
    _notify("success", f"Skopiowano: {text}")


def _on_remove(index: str):
    st.session_state["records"] = remove_record(st.session_state["records"], index)


def _restore_from_storage():
    st.session_state["records"] = {}
    st.session_state["total_found"] = 0
    cached = store.load()
    if cached:
        st.session_state["raw"] = cached
        _apply_parse(cached)
        logger.info("Restored saved cart text")


if "records" not in st.session_state:
    _restore_from_storage()


# ---------------- UI ----------------
head_l, head_r = st.columns([3, 1])
with head_l:
    st.title(config.PAGE_TITLE)
    st.caption("Prosty parser koszyka + kody kreskowe")
with head_r:
    st.markdown(f"**{stats_line(st.session_state['total_found'], len(st.session_state['records']))}**")

st.text_area(
    "Wklej listę",
    key="raw",
    height=220,
    placeholder="Wklej surowy tekst z koszyka IKEA...",
)

c1, c2, c3, c4, c5 = st.columns(5)
with c1:
    st.button("Wklej ze schowka", on_click=_on_paste, use_container_width=True)
with c2:
    st.button("Przetwórz", type="primary", on_click=_on_parse, use_container_width=True)
with c3:
    st.button("Wyczyść", on_click=_on_clear, use_container_width=True)
with c4:
    sort_on = st.toggle("Sortuj alfabetycznie", key="sort")
with c5:
    print_clicked = st.button("Drukuj A4", use_container_width=True)

st.caption("Parser ignoruje nagłówki, wyciąga indeksy w formacie ###.###.##, szacuje opis i ilości.")

notice = st.session_state.pop("notice", None)
if notice:
    level, message = notice
    getattr(st, level)(message)

if print_clicked:
    components.html("<script>window.parent.print();</script>", height=0)

records = st.session_state["records"]
if records:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    try:
        export_df = cards_frame(records, sort_on)
        csv_bytes = df_to_csv_bytes(export_df)
        xlsx_bytes = df_to_xlsx_bytes(export_df)
    except Exception as e:
        logger.exception("Export failed")
        st.warning(f"Nie udało się przygotować eksportu: {e}")
        csv_bytes = xlsx_bytes = None

    if csv_bytes is not None:
        d1, d2, _ = st.columns([1, 1, 3])
        with d1:
            st.download_button(
                "⬇️ Karty (CSV)",
                data=csv_bytes,
                file_name=f"ikea_cards_{ts}.csv",
                mime="text/csv",
                key="dl_cards_csv",
            )
        with d2:
            st.download_button(
                "⬇️ Karty (XLSX)",
                data=xlsx_bytes,
                file_name=f"ikea_cards_{ts}.xlsx",
                mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
                key="dl_cards_xlsx",
            )
    st.divider()

    items = sorted_records(records, sort_on)
    for row_start in range(0, len(items), CARDS_PER_ROW):
        cols = st.columns(CARDS_PER_ROW)
        for col, item in zip(cols, items[row_start:row_start + CARDS_PER_ROW]):
            labels = card_labels(item)
            with col:
                with st.container(border=True):
                    st.subheader(labels["index"])
                    st.write(labels["description"])
                    st.caption(f"{labels['qty']}  ·  {labels['packs']}  ·  {labels['duplicates']}")
                    try:
                        st.markdown(render_index_barcode(item.index), unsafe_allow_html=True)
                    except BarcodeRenderError:
                        st.info("Nie udało się narysować kodu kreskowego.")
                    b1, b2, b3 = st.columns(3)
                    with b1:
                        st.button("Kopiuj indeks", key=f"copy_{item.index}",
                                  on_click=_on_copy, args=(item.index,))
                    with b2:
                        st.button("Kopiuj bez kropek", key=f"copy_plain_{item.index}",
                                  on_click=_on_copy, args=(plain_index(item.index),))
                    with b3:
                        st.button("Usuń", key=f"remove_{item.index}",
                                  on_click=_on_remove, args=(item.index,))
elif st.session_state.get("raw"):
    st.info("Nie znaleziono indeksów w formacie ###.###.##.")
