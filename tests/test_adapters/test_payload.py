"""Tests for the declarative payload builder."""

import json

from cms_admin.files import FileUpload
from cms_admin.providers.blog import BLOG_PAYLOAD
from cms_admin.providers.faq import FAQ_PAYLOAD
from cms_admin.providers.payload import FormPayload, build_form, build_json, build_payload
from cms_admin.providers.popup import POPUP_PAYLOAD
from cms_admin.providers.setting import SETTING_PAYLOAD
from cms_admin.providers.term import TERM_PAYLOAD
from cms_admin.providers.testimonial import TESTIMONIAL_PAYLOAD


class TestMultipartForm:
    def test_tags_sent_as_single_json_field(self):
        form = build_form(BLOG_PAYLOAD, {"title": "Post", "tags": ["a", "b"]})
        assert [name for name, _ in form.fields].count("tags") == 1
        assert json.loads(form.get("tags")) == ["a", "b"]
        assert form.files == []

    def test_stored_path_is_not_reuploaded(self):
        form = build_form(BLOG_PAYLOAD, {"title": "Post", "cover_image": "/uploads/cover.png"})
        assert "cover_image" not in form

    def test_fresh_upload_is_attached(self, png_upload):
        form = build_form(BLOG_PAYLOAD, {"title": "Post", "cover_image": png_upload})
        assert form.files == [("cover_image", png_upload)]

    def test_status_always_sent_with_default(self):
        form = build_form(BLOG_PAYLOAD, {"title": "Post"})
        assert form.get("status") == "Draft"

    def test_absent_fields_are_skipped(self):
        form = build_form(BLOG_PAYLOAD, {"title": "Post"})
        assert form.keys() == ["title", "status"]

    def test_present_none_uses_default(self):
        form = build_form(BLOG_PAYLOAD, {"title": "Post", "description": None})
        assert form.get("description") == ""

    def test_numbers_stringified(self):
        form = build_form(FAQ_PAYLOAD, {"question": "q", "answer": "a", "display_order": 3})
        assert form.get("display_order") == "3"
        assert form.get("category") == "General"

    def test_featured_translated(self):
        form = build_form(TESTIMONIAL_PAYLOAD, {"name": "Sam", "featured": True})
        assert form.get("featured") == "Featured"
        form = build_form(TESTIMONIAL_PAYLOAD, {"name": "Sam", "featured": False})
        assert form.get("featured") == "Normal"

    def test_popup_media_sent_as_image(self):
        clip = FileUpload("intro.mp4", b"\x00", "video/mp4")
        form = build_form(POPUP_PAYLOAD, {"title": "Sale", "media": clip, "startDate": ""})
        assert form.files == [("image", clip)]
        assert form.get("startDate") is None

    def test_httpx_parts_are_all_multipart(self, png_upload):
        form = FormPayload(fields=[("title", "Post")], files=[("cover_image", png_upload)])
        assert form.as_httpx_files() == [
            ("title", (None, "Post")),
            ("cover_image", ("cover.png", png_upload.content, "image/png")),
        ]

    def test_describe_hides_file_bytes(self, png_upload):
        form = build_form(BLOG_PAYLOAD, {"title": "Post", "cover_image": png_upload})
        assert "PNG fake" not in str(form.describe())


class TestJsonBody:
    def test_term_body_is_allow_listed(self):
        body = build_json(TERM_PAYLOAD, {"title": "Privacy", "content": "Text", "author": "7", "extra": "x"})
        assert body == {"title": "Privacy", "content": "Text", "author": "7", "status": "Draft"}

    def test_setting_fields_renamed(self):
        body = build_payload(
            SETTING_PAYLOAD,
            {"site_name": "Acme", "facebook_url": "https://fb.com/acme", "maintenace_mode": True},
        )
        assert body["facebook_link"] == "https://fb.com/acme"
        assert body["maintenance_mode"] is True
        assert "facebook_url" not in body
        assert body["enable_analytics"] is True
