"""Site settings form schema.

``maintenace_mode`` keeps the client-side spelling; the settings adapter
renames it for the backend.
"""

from typing import Annotated

from cms_admin.validation.base import FormSchema, min_length, valid_email, valid_url


class SettingSchema(FormSchema):
    site_name: Annotated[str, min_length(5, "Site name must be at least 5 characters.")]
    site_description: Annotated[str, min_length(10, "Description must be at least 10 characters.")]
    contact_email: Annotated[str, valid_email("Invalid email address.")]
    facebook_url: Annotated[str | None, valid_url("Invalid URL.")] = None
    instagram_url: Annotated[str | None, valid_url("Invalid URL.")] = None
    youtube_url: Annotated[str | None, valid_url("Invalid URL.")] = None
    maintenace_mode: bool
    enable_analytics: bool
    cookie_consent: bool
