"""Product form schema."""

from typing import Annotated, Any

from cms_admin.files import MB
from cms_admin.validation.base import (
    IMAGE_TYPES_WITH_SVG,
    FormSchema,
    media_file,
    min_length,
    one_of,
    tag_list,
)

PRODUCT_STATUSES = ("Draft", "Published")
MAX_IMAGE_SIZE = 2 * MB


class ProductSchema(FormSchema):
    name: Annotated[str, min_length(5, "Name must be at least 5 characters.")]
    description: Annotated[str, min_length(10, "Description must be at least 10 characters.")]
    category: Annotated[str, min_length(1, "Category is required.")]
    status: Annotated[str, one_of(PRODUCT_STATUSES, "Status must be Draft or Published.")]
    tags: Annotated[list[str] | None, tag_list()] = None
    image: Annotated[
        Any,
        media_file(
            IMAGE_TYPES_WITH_SVG,
            MAX_IMAGE_SIZE,
            "Only JPG, PNG, SVG or WEBP images are allowed.",
            "Image must be under 2MB.",
        ),
    ] = None
