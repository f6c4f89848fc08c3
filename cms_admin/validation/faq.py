"""FAQ form schema."""

from typing import Annotated

from cms_admin.validation.base import FormSchema, min_length, non_negative, one_of

FAQ_CATEGORIES = ("General", "Shipping", "Returns", "Ethics")
FAQ_STATUSES = ("Draft", "Published")


class FaqSchema(FormSchema):
    question: Annotated[str, min_length(10, "Question must be at least 10 characters.")]
    answer: Annotated[str, min_length(10, "Answer must be at least 10 characters.")]
    category: Annotated[str, one_of(FAQ_CATEGORIES, "Please select a category.")]
    display_order: Annotated[int, non_negative("Display order must be a non-negative number.")] = 0
    status: Annotated[str, one_of(FAQ_STATUSES, "Status must be Draft or Published.")] = "Draft"
