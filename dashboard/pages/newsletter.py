"""Newsletter: subscriber list with search and CSV/Excel download."""

import math
from datetime import date

import streamlit as st

st.set_page_config(page_title="Newsletter | CMS Admin", layout="wide")

from layout import require_login, show_error  # noqa: E402

require_login()

from data import export_subscribers, list_records  # noqa: E402

st.title("Newsletter Subscribers")

col_search, col_size, col_order = st.columns([4, 1, 1])
search = col_search.text_input("Search by email")
page_size = col_size.selectbox("Per page", [10, 25, 50, 100])
sort_order = col_order.selectbox("Order", ["desc", "asc"])
view = (search, page_size, sort_order)
if st.session_state.get("newsletter_view") != view:
    st.session_state["newsletter_view"] = view
    st.session_state["newsletter_page"] = 1
page = st.session_state["newsletter_page"]

try:
    result = list_records(
        "newsletter",
        page=page,
        page_size=page_size,
        search_field="email",
        search=search or None,
        sort_field="createdAt",
        sort_order=sort_order,
    )
except Exception as e:
    show_error("Failed to load subscribers", e)
    st.stop()

total = result["total"]
pages = max(1, math.ceil(total / page_size))
st.metric("Subscribers", total)

if result["data"]:
    st.dataframe(result["data"], use_container_width=True, hide_index=True)
else:
    st.info("No subscribers found.")

col_prev, col_next, _ = st.columns([1, 1, 6])
if col_prev.button("Previous", disabled=page <= 1):
    st.session_state["newsletter_page"] = page - 1
    st.rerun()
if col_next.button("Next", disabled=page >= pages):
    st.session_state["newsletter_page"] = page + 1
    st.rerun()

st.markdown("---")
EXPORT_FORMATS = {
    "csv": ("Download CSV", "text/csv"),
    "xlsx": ("Download Excel", "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"),
}

if st.button("Prepare export"):
    try:
        for file_format in EXPORT_FORMATS:
            st.session_state[f"newsletter_{file_format}"] = export_subscribers(search or None, file_format)
    except Exception as e:
        show_error("Failed to export subscribers", e)

columns = st.columns(len(EXPORT_FORMATS))
for col, (file_format, (label, mime)) in zip(columns, EXPORT_FORMATS.items()):
    key = f"newsletter_{file_format}"
    if key in st.session_state:
        col.download_button(
            label,
            data=st.session_state[key],
            file_name=f"newsletter-subscribers-{date.today().isoformat()}.{file_format}",
            mime=mime,
        )
