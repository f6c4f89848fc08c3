"""Editor: create or edit a record; the form is validated before submit."""

import streamlit as st

st.set_page_config(page_title="Editor | CMS Admin", layout="wide")

from layout import require_login, show_error, show_failure  # noqa: E402

require_login()

from cms_admin.files import FileUpload  # noqa: E402
from cms_admin.providers.gallery import GALLERY_ALBUMS  # noqa: E402
from cms_admin.validation.blog import BLOG_STATUSES  # noqa: E402
from cms_admin.validation.faq import FAQ_CATEGORIES, FAQ_STATUSES  # noqa: E402
from cms_admin.validation.forms import validate_form  # noqa: E402
from cms_admin.validation.popup import POPUP_STATUSES, POPUP_TYPES  # noqa: E402
from cms_admin.validation.product import PRODUCT_STATUSES  # noqa: E402
from cms_admin.validation.team import TEAM_STATUSES  # noqa: E402
from cms_admin.validation.testimonial import TESTIMONIAL_ROLES, TESTIMONIAL_STATUSES  # noqa: E402
from cms_admin.validation.term import TERM_STATUSES  # noqa: E402
from data import active_authors, get_record, save_record  # noqa: E402

# resource -> [(field, widget, options)]
FORM_FIELDS = {
    "blog": [
        ("title", "text", None),
        ("description", "textarea", None),
        ("content", "textarea", None),
        ("status", "select", BLOG_STATUSES),
        ("tags", "tags", None),
        ("cover_image", "file", None),
    ],
    "faq": [
        ("question", "text", None),
        ("answer", "textarea", None),
        ("category", "select", FAQ_CATEGORIES),
        ("display_order", "number", None),
        ("status", "select", FAQ_STATUSES),
    ],
    "product": [
        ("name", "text", None),
        ("description", "textarea", None),
        ("category", "text", None),
        ("status", "select", PRODUCT_STATUSES),
        ("tags", "tags", None),
        ("image", "file", None),
    ],
    "team": [
        ("name", "text", None),
        ("role", "text", None),
        ("status", "select", TEAM_STATUSES),
        ("image", "file", None),
    ],
    "popup": [
        ("title", "text", None),
        ("type", "select", POPUP_TYPES),
        ("content", "textarea", None),
        ("buttonText", "text", None),
        ("buttonLink", "text", None),
        ("startDate", "date", None),
        ("endDate", "date", None),
        ("status", "select", POPUP_STATUSES),
        ("media", "file", None),
    ],
    "testimonial": [
        ("name", "text", None),
        ("email", "text", None),
        ("role", "select", TESTIMONIAL_ROLES),
        ("roleNote", "text", None),
        ("content", "textarea", None),
        ("rating", "rating", None),
        ("status", "select", TESTIMONIAL_STATUSES),
        ("featured", "checkbox", None),
        ("company_logo", "file", None),
    ],
    "term": [
        ("title", "text", None),
        ("content", "textarea", None),
        ("author", "author", None),
    ],
    "gallery": [
        ("album", "select", GALLERY_ALBUMS),
        ("image_description", "text", None),
        ("image", "file", None),
    ],
}


def _select_index(options, current) -> int:
    return list(options).index(current) if current in options else 0


def render_field(name: str, widget: str, options, current):
    label = name
    if widget == "text":
        return st.text_input(label, value=current or "")
    if widget == "textarea":
        return st.text_area(label, value=current or "", height=200 if name == "content" else 80)
    if widget == "select":
        return st.selectbox(label, options, index=_select_index(options, current))
    if widget == "number":
        return st.number_input(label, value=int(current or 0), step=1)
    if widget == "rating":
        return st.slider(label, min_value=0, max_value=5, value=int(current or 0))
    if widget == "checkbox":
        return st.checkbox(label, value=current in (True, "Featured", "true"))
    if widget == "date":
        return st.text_input(f"{label} (YYYY-MM-DD)", value=(current or "")[:10])
    if widget == "tags":
        text = st.text_input(f"{label} (comma separated)", value=", ".join(current if isinstance(current, list) else []))
        return [t.strip() for t in text.split(",")] if text.strip() else []
    if widget == "author":
        authors = active_authors()
        ids = [str(a.get("user_id") or a.get("id")) for a in authors]
        names = {str(a.get("user_id") or a.get("id")): a.get("username") or a.get("email") for a in authors}
        if not ids:
            return st.text_input(label, value=current or "")
        return st.selectbox(label, ids, index=_select_index(ids, str(current)), format_func=lambda i: names.get(i, i))
    if widget == "file":
        if current:
            st.caption(f"Current {label}: {current}")
        uploaded = st.file_uploader(label)
        if uploaded is None:
            return current or None
        return FileUpload(uploaded.name, uploaded.getvalue(), uploaded.type or "application/octet-stream")
    raise ValueError(f"Unknown widget {widget}")


st.title("Editor")

col_res, col_id = st.columns([2, 3])
resource = col_res.selectbox("Resource", list(FORM_FIELDS))
editing_id = col_id.text_input("Record id (leave empty to create)").strip() or None

record = {}
if editing_id:
    try:
        record = get_record(resource, editing_id) or {}
    except Exception as e:
        show_error(f"Failed to load {resource} {editing_id}", e)
        st.stop()

with st.form(f"editor_{resource}"):
    values = {
        name: render_field(name, widget, options, record.get(name))
        for name, widget, options in FORM_FIELDS[resource]
    }
    if resource == "term":
        # Terms have no status input; the button picks it.
        col_draft, col_publish = st.columns(2)
        as_draft = col_draft.form_submit_button("Save as draft")
        publish = col_publish.form_submit_button("Publish", type="primary")
        submitted = as_draft or publish
        values["status"] = TERM_STATUSES[1] if publish else TERM_STATUSES[0]
    else:
        submitted = st.form_submit_button("Save" if editing_id else "Create", type="primary")

if submitted:
    result = validate_form(resource, values, editing=editing_id is not None)
    if not result.valid:
        for field_name, message in result.errors.items():
            st.error(f"{field_name}: {message}")
        st.stop()

    outcome = save_record(resource, result.value, editing_id)
    if outcome.success:
        st.success("Saved." if editing_id else "Created.")
    else:
        show_failure(outcome)
