"""Users: active admins, credential emails for new users, password change."""

import streamlit as st

st.set_page_config(page_title="Users | CMS Admin", layout="wide")

from layout import require_login, show_error  # noqa: E402

require_login()

from cms_admin.validation.forms import validate_form  # noqa: E402
from cms_admin.validation.user import password_checks  # noqa: E402
from data import active_authors, change_password, send_credentials  # noqa: E402

st.title("Users")

try:
    users = active_authors()
    st.dataframe(users, use_container_width=True, hide_index=True)
except Exception as e:
    show_error("Failed to load users", e)

col_new, col_pw = st.columns(2)

with col_new:
    st.subheader("Send credentials to a new user")
    with st.form("new_user"):
        values = {
            "username": st.text_input("Username"),
            "email": st.text_input("Email"),
            "password": st.text_input("Temporary password", type="password"),
            "confirm_password": st.text_input("Confirm password", type="password"),
        }
        submitted = st.form_submit_button("Send credentials", type="primary")

    for rule, ok in password_checks(values["password"]).items():
        st.caption(f"{':white_check_mark:' if ok else ':x:'} {rule}")

    if submitted:
        result = validate_form("user", values)
        if not result.valid:
            for field_name, message in result.errors.items():
                st.error(f"{field_name}: {message}")
        else:
            sent = send_credentials(values["email"], values["username"], values["password"])
            if sent.success:
                st.success(f"Credentials sent to {values['email']}.")
            else:
                st.error(f"Failed to send email: {sent.error}")

with col_pw:
    st.subheader("Change your password")
    with st.form("change_password"):
        old_password = st.text_input("Current password", type="password")
        new_password = st.text_input("New password", type="password")
        changed = st.form_submit_button("Change password")

    if changed:
        if not all(password_checks(new_password).values()):
            st.error("Password does not meet all requirements")
        else:
            outcome = change_password(old_password, new_password)
            if outcome.success:
                st.success("Password changed successfully")
            else:
                st.error(outcome.error)
