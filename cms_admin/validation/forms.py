"""Which schema validates which resource form."""

from typing import Any

from pydantic import BaseModel

from cms_admin.validation.base import ValidationResult, validate
from cms_admin.validation.blog import BlogSchema
from cms_admin.validation.faq import FaqSchema
from cms_admin.validation.popup import PopupSchema
from cms_admin.validation.product import ProductSchema
from cms_admin.validation.setting import SettingSchema
from cms_admin.validation.team import TeamCreateSchema, TeamSchema
from cms_admin.validation.term import TermSchema
from cms_admin.validation import testimonial
from cms_admin.validation.user import NewUserSchema

# resource -> (create schema, edit schema)
FORM_SCHEMAS: dict[str, tuple[type[BaseModel], type[BaseModel]]] = {
    "blog": (BlogSchema, BlogSchema),
    "faq": (FaqSchema, FaqSchema),
    "popup": (PopupSchema, PopupSchema),
    "product": (ProductSchema, ProductSchema),
    "setting": (SettingSchema, SettingSchema),
    "team": (TeamCreateSchema, TeamSchema),
    "term": (TermSchema, TermSchema),
    "testimonial": (testimonial.TestimonialSchema, testimonial.TestimonialSchema),
    "user": (NewUserSchema, NewUserSchema),
}


def schema_for(resource: str, editing: bool = False) -> type[BaseModel] | None:
    pair = FORM_SCHEMAS.get(resource)
    if pair is None:
        return None
    return pair[1] if editing else pair[0]


def validate_form(resource: str, data: dict[str, Any], editing: bool = False) -> ValidationResult:
    """Validate a form submission; resources without a schema pass through."""
    schema = schema_for(resource, editing)
    if schema is None:
        return ValidationResult(valid=True, value=dict(data))
    return validate(schema, data)
