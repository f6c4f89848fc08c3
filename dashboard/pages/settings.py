"""Settings: the singleton site-settings record."""

import streamlit as st

st.set_page_config(page_title="Settings | CMS Admin", layout="wide")

from layout import require_login, show_error, show_failure  # noqa: E402

require_login()

from cms_admin.config import settings as app_settings  # noqa: E402
from cms_admin.validation.forms import validate_form  # noqa: E402
from data import get_site_settings, save_record  # noqa: E402

st.title("Site Settings")

try:
    current = get_site_settings()
except Exception as e:
    show_error("Failed to load settings", e)
    st.stop()

with st.form("site_settings"):
    values = {
        "site_name": st.text_input("Site name", value=current.get("site_name") or ""),
        "site_description": st.text_area("Site description", value=current.get("site_description") or ""),
        "contact_email": st.text_input("Contact email", value=current.get("contact_email") or ""),
        "facebook_url": st.text_input("Facebook URL", value=current.get("facebook_url") or "") or None,
        "instagram_url": st.text_input("Instagram URL", value=current.get("instagram_url") or "") or None,
        "youtube_url": st.text_input("YouTube URL", value=current.get("youtube_url") or "") or None,
        "maintenace_mode": st.toggle("Maintenance mode", value=bool(current.get("maintenace_mode"))),
        "enable_analytics": st.toggle("Enable analytics", value=bool(current.get("enable_analytics", True))),
        "cookie_consent": st.toggle("Cookie consent banner", value=bool(current.get("cookie_consent", True))),
    }
    submitted = st.form_submit_button("Save settings", type="primary")

if submitted:
    result = validate_form("setting", values, editing=True)
    if not result.valid:
        for field_name, message in result.errors.items():
            st.error(f"{field_name}: {message}")
        st.stop()
    outcome = save_record("setting", result.value, app_settings.setting_id)
    if outcome.success:
        st.success("Settings saved.")
    else:
        show_failure(outcome)
