"""Testimonial form schema."""

from typing import Annotated, Any

from cms_admin.files import MB
from cms_admin.validation.base import (
    IMAGE_TYPES_WITH_SVG,
    FormSchema,
    between,
    max_length,
    media_file,
    min_length,
    one_of,
    valid_email,
)

TESTIMONIAL_ROLES = ("Customer", "Partner", "Donor", "Volunteer")
TESTIMONIAL_STATUSES = ("Pending", "Approved")
MAX_LOGO_SIZE = 2 * MB


class TestimonialSchema(FormSchema):
    name: Annotated[str, min_length(2, "Name must be at least 2 characters.")]
    email: Annotated[str, valid_email("Please enter a valid email address.")]
    role: Annotated[str, one_of(TESTIMONIAL_ROLES, "Please select a role.")]
    roleNote: Annotated[str | None, max_length(120, "Keep it under 120 characters.")] = None
    content: Annotated[str, min_length(10, "Testimonial must be at least 10 characters.")]
    rating: Annotated[int, between(1, 5, "Please provide a rating.", "Rating cannot be more than 5.")]
    status: Annotated[str, one_of(TESTIMONIAL_STATUSES, "Please choose a status.")]
    featured: bool = False
    company_logo: Annotated[
        Any,
        media_file(
            IMAGE_TYPES_WITH_SVG,
            MAX_LOGO_SIZE,
            "Only JPG, PNG, SVG or WEBP images are allowed.",
            "Image must be under 2MB.",
        ),
    ] = None
