"""CMS Admin Dashboard main entry point.

Run with: streamlit run dashboard/app.py

Shows record counts per resource and links to the management pages.
"""

import streamlit as st

st.set_page_config(
    page_title="CMS Admin",
    page_icon=":memo:",
    layout="wide",
    initial_sidebar_state="expanded",
)

from cms_admin.config import settings  # noqa: E402
from cms_admin.errors import SessionEndedError  # noqa: E402
from layout import end_session, require_login  # noqa: E402

require_login()

# --- Main Content ---
st.title("CMS Admin")
st.markdown("Manage site content, subscribers and settings.")

try:
    from data import list_records

    resources = ["blog", "product", "faq", "testimonial", "contact", "newsletter"]
    totals = {name: list_records(name, page_size=1)["total"] for name in resources}

    cols = st.columns(len(resources))
    for col, name in zip(cols, resources):
        col.metric(name.capitalize(), totals[name])

    st.markdown("---")

    st.subheader("Latest Contact Messages")
    contacts = list_records("contact", page_size=5, sort_field="createdAt", sort_order="desc")["data"]
    if contacts:
        st.dataframe(contacts, use_container_width=True, hide_index=True)
    else:
        st.info("No contact messages yet.")

except SessionEndedError:
    end_session()
except Exception as e:
    st.warning(f"Could not reach the backend at {settings.backend_url}.\n\nError: {e}")
