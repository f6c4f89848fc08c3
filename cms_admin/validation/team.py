"""Team member form schemas.

The photo is required when a member is created; on edit a missing file or
the stored path keeps the current photo.
"""

from typing import Annotated, Any

from pydantic import Field

from cms_admin.files import MB
from cms_admin.validation.base import IMAGE_TYPES_WITH_SVG, FormSchema, media_file, min_length, one_of

TEAM_STATUSES = ("Draft", "Published")
MAX_IMAGE_SIZE = 4 * MB

_TYPE_MESSAGE = "Only JPG, PNG, SVG or WEBP images are allowed."
_SIZE_MESSAGE = "Image must be under 4MB."


class TeamSchema(FormSchema):
    name: Annotated[str, min_length(4, "Name must be at least 4 characters.")]
    role: Annotated[str, min_length(1, "Role is required.")]
    status: Annotated[str, one_of(TEAM_STATUSES, "Status must be Draft or Published.")]
    image: Annotated[Any, media_file(IMAGE_TYPES_WITH_SVG, MAX_IMAGE_SIZE, _TYPE_MESSAGE, _SIZE_MESSAGE)] = None


class TeamCreateSchema(TeamSchema):
    image: Annotated[
        Any,
        media_file(
            IMAGE_TYPES_WITH_SVG,
            MAX_IMAGE_SIZE,
            _TYPE_MESSAGE,
            _SIZE_MESSAGE,
            required_message="Please upload an image file.",
        ),
    ] = Field(default=None, validate_default=True)
