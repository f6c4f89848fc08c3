"""Content: browse, search and delete records of any resource."""

import math

import streamlit as st

st.set_page_config(page_title="Content | CMS Admin", layout="wide")

from layout import require_login, show_error, show_failure  # noqa: E402

require_login()

from data import delete_record, list_records, record_id  # noqa: E402

# resource -> field searched with a "contains" filter
SEARCH_FIELDS = {
    "blog": "title",
    "product": "name",
    "faq": "question",
    "testimonial": "name",
    "team": "name",
    "popup": "title",
    "term": "title",
    "gallery": "album",
    "contact": "name",
}

st.title("Content")

col_res, col_search, col_sort, col_order = st.columns([2, 3, 2, 1])
resource = col_res.selectbox("Resource", list(SEARCH_FIELDS))
search = col_search.text_input(f"Search by {SEARCH_FIELDS[resource]}")
sort_field = col_sort.text_input("Sort by", value="createdAt")
sort_order = col_order.selectbox("Order", ["desc", "asc"])

page_size = st.session_state.setdefault("page_size", 10)
page_key = "content_page"
# A new resource, search or sort starts again from page 1.
view = (resource, search, sort_field, sort_order)
if st.session_state.get("content_view") != view:
    st.session_state["content_view"] = view
    st.session_state[page_key] = 1
page = st.session_state[page_key]

try:
    result = list_records(
        resource,
        page=page,
        page_size=page_size,
        search_field=SEARCH_FIELDS[resource],
        search=search or None,
        sort_field=sort_field or None,
        sort_order=sort_order,
    )
except Exception as e:
    show_error(f"Failed to load {resource} records", e)
    st.stop()

records = result["data"] if isinstance(result["data"], list) else []
total = result["total"]
pages = max(1, math.ceil(total / page_size))

st.caption(f"{total} records | page {page} of {pages}")

if records:
    st.dataframe(records, use_container_width=True, hide_index=True)
else:
    st.info("No records found.")

col_prev, col_next, _ = st.columns([1, 1, 6])
if col_prev.button("Previous", disabled=page <= 1):
    st.session_state[page_key] = page - 1
    st.rerun()
if col_next.button("Next", disabled=page >= pages):
    st.session_state[page_key] = page + 1
    st.rerun()

# --- Delete ---
st.markdown("---")
st.subheader("Delete a record")
ids = [rid for rid in (record_id(resource, r) for r in records) if rid]
if ids:
    target = st.selectbox("Record id", ids)
    confirm = st.checkbox("I understand this cannot be undone")
    if st.button("Delete", type="primary", disabled=not confirm):
        outcome = delete_record(resource, target)
        if outcome.success:
            st.success(f"Deleted {resource} {target}.")
            st.rerun()
        else:
            show_failure(outcome)
