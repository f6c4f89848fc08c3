"""Shared pieces for the form validation schemas.

Each schema is a pydantic model whose fields carry small constraint
validators with the exact messages shown next to the form inputs.
``validate`` turns a pydantic ``ValidationError`` into one message per
failing field, so every independent error surfaces at once.

Validation never performs I/O.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, EmailStr, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

from cms_admin.files import FileUpload

MAX_TAGS = 10

IMAGE_TYPES = ("image/jpeg", "image/png", "image/webp")
IMAGE_TYPES_WITH_SVG = IMAGE_TYPES + ("image/svg+xml",)
VIDEO_TYPES = ("video/mp4", "video/webm", "video/ogg")

_url_adapter = TypeAdapter(AnyUrl)
_email_adapter = TypeAdapter(EmailStr)


class FormSchema(BaseModel):
    """Base for all form schemas."""

    model_config = ConfigDict(arbitrary_types_allowed=True, str_strip_whitespace=False)


@dataclass
class ValidationResult:
    """Outcome of validating one form submission."""

    valid: bool
    value: dict[str, Any] | None = None
    errors: dict[str, str] = field(default_factory=dict)


def validate(schema: type[BaseModel], data: dict[str, Any]) -> ValidationResult:
    """Validate ``data`` against ``schema``.

    Returns the normalized value on success, or exactly one message per
    failing field.
    """
    try:
        model = schema.model_validate(data)
    except ValidationError as e:
        return ValidationResult(valid=False, errors=collect_errors(e))
    # Field values as validated; model_dump() would turn FileUpload into a dict.
    return ValidationResult(valid=True, value=dict(model))


def collect_errors(error: ValidationError) -> dict[str, str]:
    """Keep the first message for each top-level field."""
    errors: dict[str, str] = {}
    for item in error.errors():
        loc = item.get("loc") or ("__root__",)
        name = str(loc[0])
        if name in errors:
            continue
        if item["type"] == "missing" or (item.get("input") is None and item["type"].endswith("_type")):
            errors[name] = f"{field_label(name)} is required."
        else:
            errors[name] = item["msg"]
    return errors


def field_label(name: str) -> str:
    """``buttonText`` -> ``Button text``, ``display_order`` -> ``Display order``."""
    spaced = re.sub(r"(?<!^)(?=[A-Z])", " ", name).replace("_", " ")
    return spaced.strip().capitalize()


# ---------------------------------------------------------------------------
# Constraint validators (used with typing.Annotated)
# ---------------------------------------------------------------------------


def min_length(n: int, message: str) -> AfterValidator:
    def check(value):
        if value is not None and len(value) < n:
            raise PydanticCustomError("min_length", message)
        return value

    return AfterValidator(check)


def max_length(n: int, message: str) -> AfterValidator:
    def check(value):
        if value is not None and len(value) > n:
            raise PydanticCustomError("max_length", message)
        return value

    return AfterValidator(check)


def one_of(choices: Iterable[str], message: str) -> AfterValidator:
    allowed = tuple(choices)

    def check(value):
        if value not in allowed:
            raise PydanticCustomError("one_of", message)
        return value

    return AfterValidator(check)


def non_negative(message: str) -> AfterValidator:
    def check(value):
        if value < 0:
            raise PydanticCustomError("non_negative", message)
        return value

    return AfterValidator(check)


def between(low: int, high: int, low_message: str, high_message: str) -> AfterValidator:
    def check(value):
        if value < low:
            raise PydanticCustomError("too_small", low_message)
        if value > high:
            raise PydanticCustomError("too_large", high_message)
        return value

    return AfterValidator(check)


def valid_url(message: str) -> AfterValidator:
    """Optional URL: ``None`` passes, anything else must parse as a URL."""

    def check(value):
        if value is None:
            return value
        try:
            _url_adapter.validate_python(value)
        except ValidationError:
            raise PydanticCustomError("url", message)
        return value

    return AfterValidator(check)


def valid_email(message: str) -> AfterValidator:
    def check(value):
        try:
            _email_adapter.validate_python(value)
        except ValidationError:
            raise PydanticCustomError("email", message)
        return value

    return AfterValidator(check)


def tag_list(max_tags: int = MAX_TAGS) -> AfterValidator:
    """At most ``max_tags`` non-empty, unique tags."""

    def check(value):
        if value is None:
            return value
        if len(value) > max_tags:
            raise PydanticCustomError("too_many_tags", f"You can add up to {max_tags} tags.")
        if any(not tag for tag in value):
            raise PydanticCustomError("empty_tag", "Tags cannot be empty.")
        if len(set(value)) != len(value):
            raise PydanticCustomError("duplicate_tag", "Tags must be unique.")
        return value

    return AfterValidator(check)


def media_file(
    content_types: Iterable[str],
    max_bytes: int,
    type_message: str,
    size_message: str,
    required_message: str | None = None,
) -> AfterValidator:
    """Check an uploaded file's MIME type and size.

    ``None`` and persisted path strings pass unless ``required_message`` is
    given, in which case only a fresh ``FileUpload`` is accepted.
    """
    allowed = tuple(content_types)

    def check(value):
        if not isinstance(value, FileUpload):
            if required_message:
                raise PydanticCustomError("file_required", required_message)
            if value is None or isinstance(value, str):
                return value
            raise PydanticCustomError("file_type", type_message)
        if value.content_type not in allowed:
            raise PydanticCustomError("file_type", type_message)
        if value.size > max_bytes:
            raise PydanticCustomError("file_size", size_message)
        return value

    return AfterValidator(check)


def parse_date(value: str) -> datetime | None:
    """Parse an ISO date or datetime string; ``None`` when unparsable."""
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    # Naive values are taken as UTC.
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def iso_date(message: str) -> AfterValidator:
    def check(value):
        if value and parse_date(value) is None:
            raise PydanticCustomError("date", message)
        return value

    return AfterValidator(check)
