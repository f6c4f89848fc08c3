"""Sidebar, login gate and expiry watchdog shared by every dashboard page."""

import streamlit as st

from cms_admin.auth.watchdog import EXPIRED_NOTICE
from cms_admin.config import settings
from cms_admin.errors import SessionEndedError
from data import check_expiry, current_identity, is_authenticated, login, logout

UNAUTHORIZED_NOTICE = "Your session is no longer valid. Please login again."


def render_sidebar() -> None:
    st.sidebar.title("CMS Admin")
    st.sidebar.markdown("---")
    st.sidebar.page_link("app.py", label="Home", icon=":material/home:")
    st.sidebar.page_link("pages/content.py", label="Content", icon=":material/article:")
    st.sidebar.page_link("pages/editor.py", label="Editor", icon=":material/edit:")
    st.sidebar.page_link("pages/newsletter.py", label="Newsletter", icon=":material/mail:")
    st.sidebar.page_link("pages/settings.py", label="Settings", icon=":material/settings:")
    st.sidebar.page_link("pages/users.py", label="Users", icon=":material/group:")
    st.sidebar.markdown("---")

    identity = current_identity()
    if identity:
        st.sidebar.caption(f"Signed in as {identity.name or identity.email or identity.id}")
    if st.sidebar.button("Logout"):
        logout()
        st.rerun()


@st.fragment(run_every=settings.watchdog_interval_seconds)
def expiry_watchdog() -> None:
    if check_expiry():
        st.session_state["auth_notice"] = EXPIRED_NOTICE
        st.rerun()


def login_form() -> None:
    st.title("Sign in")
    notice = st.session_state.pop("auth_notice", None)
    if notice:
        st.error(notice)

    with st.form("login"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        remember_me = st.checkbox("Remember me")
        submitted = st.form_submit_button("Login", type="primary")

    if submitted:
        result = login(email, password, remember_me)
        if result.success:
            st.rerun()
        st.error(result.error)


def require_login() -> None:
    """Render the login form and stop the page unless a session exists."""
    if not is_authenticated():
        login_form()
        st.stop()
    render_sidebar()
    expiry_watchdog()


def end_session(notice: str = UNAUTHORIZED_NOTICE) -> None:
    """Back to the login form; the session file is already cleared."""
    st.session_state["auth_notice"] = notice
    st.rerun()


def show_error(message: str, error: Exception) -> None:
    if isinstance(error, SessionEndedError):
        end_session()
    st.error(f"{message}: {error}")


def show_failure(outcome) -> None:
    """Report a failed create/update/delete."""
    if outcome.logout:
        end_session()
    st.error(outcome.error)
