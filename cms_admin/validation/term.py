"""Terms page form schema.

The form itself has no status input; the Draft and Publish submit
buttons set ``status`` before validation.
"""

from typing import Annotated

from cms_admin.validation.base import FormSchema, min_length, one_of

TERM_STATUSES = ("Draft", "Published")


class TermSchema(FormSchema):
    title: Annotated[str, min_length(5, "Title must be at least 5 characters.")]
    content: Annotated[str, min_length(10, "Content must be at least 10 characters.")]
    author: Annotated[str, min_length(1, "Author is required.")]
    status: Annotated[str, one_of(TERM_STATUSES, "Status must be Draft or Published.")] = "Draft"
