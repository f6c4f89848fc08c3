"""Tests for the shared validation helpers: error collection, dates, files."""

from datetime import datetime

from cms_admin.files import MB, FileUpload
from cms_admin.validation.base import field_label, parse_date, validate
from cms_admin.validation.faq import FaqSchema
from cms_admin.validation.product import ProductSchema


class TestFieldLabel:
    def test_camel_case(self):
        assert field_label("buttonText") == "Button text"

    def test_snake_case(self):
        assert field_label("display_order") == "Display order"


class TestParseDate:
    def test_plain_date(self):
        assert parse_date("2025-01-10") == datetime(2025, 1, 10)

    def test_zulu_time_is_naive_utc(self):
        assert parse_date("2025-01-10T12:30:00Z") == datetime(2025, 1, 10, 12, 30)

    def test_offset_converted_to_utc(self):
        assert parse_date("2025-01-10T12:00:00+02:00") == datetime(2025, 1, 10, 10, 0)

    def test_garbage_is_none(self):
        assert parse_date("next tuesday") is None


class TestErrorCollection:
    def test_missing_fields_reported_once_each(self):
        result = validate(FaqSchema, {})
        assert not result.valid
        assert result.errors["question"] == "Question is required."
        assert result.errors["answer"] == "Answer is required."
        assert set(result.errors) == {"question", "answer", "category"}

    def test_none_for_required_string_is_required(self):
        result = validate(FaqSchema, {"question": None, "answer": "A long enough answer", "category": "General"})
        assert result.errors == {"question": "Question is required."}

    def test_all_independent_errors_surface(self):
        result = validate(
            FaqSchema,
            {"question": "short", "answer": "short", "category": "Other", "display_order": -1},
        )
        assert result.errors == {
            "question": "Question must be at least 10 characters.",
            "answer": "Answer must be at least 10 characters.",
            "category": "Please select a category.",
            "display_order": "Display order must be a non-negative number.",
        }

    def test_valid_value_has_defaults(self):
        result = validate(
            FaqSchema,
            {"question": "How long is shipping?", "answer": "Usually five days.", "category": "Shipping"},
        )
        assert result.valid
        assert result.value["status"] == "Draft"
        assert result.value["display_order"] == 0


class TestTagsAndFiles:
    base = {
        "name": "Handmade bowl",
        "description": "A bowl thrown on the wheel.",
        "category": "Ceramics",
        "status": "Draft",
    }

    def test_eleven_tags_rejected(self):
        result = validate(ProductSchema, {**self.base, "tags": [f"t{i}" for i in range(11)]})
        assert result.errors == {"tags": "You can add up to 10 tags."}

    def test_ten_tags_accepted(self):
        assert validate(ProductSchema, {**self.base, "tags": [f"t{i}" for i in range(10)]}).valid

    def test_empty_tag_rejected(self):
        result = validate(ProductSchema, {**self.base, "tags": ["clay", ""]})
        assert result.errors == {"tags": "Tags cannot be empty."}

    def test_duplicate_tags_rejected(self):
        result = validate(ProductSchema, {**self.base, "tags": ["clay", "clay"]})
        assert result.errors == {"tags": "Tags must be unique."}

    def test_svg_image_accepted(self):
        logo = FileUpload("logo.svg", b"<svg/>", "image/svg+xml")
        assert validate(ProductSchema, {**self.base, "image": logo}).valid

    def test_wrong_type_rejected(self):
        doc = FileUpload("notes.pdf", b"%PDF", "application/pdf")
        result = validate(ProductSchema, {**self.base, "image": doc})
        assert result.errors == {"image": "Only JPG, PNG, SVG or WEBP images are allowed."}

    def test_oversized_image_rejected(self):
        big = FileUpload("big.png", b"0" * (2 * MB + 1), "image/png")
        result = validate(ProductSchema, {**self.base, "image": big})
        assert result.errors == {"image": "Image must be under 2MB."}

    def test_stored_path_means_unchanged(self):
        assert validate(ProductSchema, {**self.base, "image": "/uploads/bowl.png"}).valid
