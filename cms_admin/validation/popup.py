"""Popup form schema.

The end date must not precede the start date. The ordering rule is
checked on ``endDate`` once both dates are present and readable; if
either is missing or invalid it reports nothing of its own.
"""

from typing import Annotated, Any

from pydantic import ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from cms_admin.files import MB
from cms_admin.validation.base import (
    IMAGE_TYPES_WITH_SVG,
    VIDEO_TYPES,
    FormSchema,
    iso_date,
    media_file,
    min_length,
    one_of,
    parse_date,
    valid_url,
)

POPUP_TYPES = ("Promotion", "Announcement", "Newsletter", "Discount")
POPUP_STATUSES = ("Published", "Draft")
MEDIA_TYPES = IMAGE_TYPES_WITH_SVG + VIDEO_TYPES
MAX_MEDIA_SIZE = 10 * MB


class PopupSchema(FormSchema):
    title: Annotated[str, min_length(1, "Title is required")]
    type: Annotated[str, one_of(POPUP_TYPES, "Please select a popup type.")]
    content: Annotated[str, min_length(1, "Content is required")]
    buttonText: Annotated[str, min_length(1, "Button text is required")]
    buttonLink: Annotated[str, valid_url("Must be a valid URL")]
    media: Annotated[
        Any,
        media_file(
            MEDIA_TYPES,
            MAX_MEDIA_SIZE,
            "Only JPG, PNG, SVG, WEBP images or MP4, WEBM, OGG videos are allowed.",
            "File must be under 10MB.",
        ),
    ] = None
    startDate: Annotated[str, min_length(1, "Start date is required"), iso_date("Start date must be a valid date")]
    endDate: Annotated[str, min_length(1, "End date is required"), iso_date("End date must be a valid date")]
    status: Annotated[str, one_of(POPUP_STATUSES, "Status must be Published or Draft.")]

    @field_validator("endDate")
    @classmethod
    def end_not_before_start(cls, value: str, info: ValidationInfo) -> str:
        start = info.data.get("startDate")
        if not start or not value:
            return value
        start_at, end_at = parse_date(start), parse_date(value)
        if start_at is None or end_at is None:
            return value
        if end_at < start_at:
            raise PydanticCustomError("date_order", "End date must be after start date")
        return value
