"""Blog post form schema."""

from typing import Annotated, Any

from cms_admin.files import MB
from cms_admin.validation.base import (
    IMAGE_TYPES,
    FormSchema,
    max_length,
    media_file,
    min_length,
    one_of,
    tag_list,
)

BLOG_STATUSES = ("Draft", "Published", "Scheduled")
MAX_COVER_SIZE = 2 * MB


class BlogSchema(FormSchema):
    title: Annotated[str, min_length(3, "Title must be at least 3 characters.")]
    description: Annotated[str | None, max_length(200, "Description must be 200 characters or less.")] = None
    content: Annotated[str, min_length(20, "Content must be at least 20 characters.")]
    status: Annotated[str, one_of(BLOG_STATUSES, "Status must be Draft, Published or Scheduled.")]
    tags: Annotated[list[str] | None, tag_list()] = None
    cover_image: Annotated[
        Any,
        media_file(
            IMAGE_TYPES,
            MAX_COVER_SIZE,
            "Only JPG, PNG, or WEBP images are allowed.",
            "Image must be under 2MB.",
        ),
    ] = None
