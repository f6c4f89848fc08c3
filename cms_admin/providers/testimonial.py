"""Testimonials: multipart with an optional company logo.

The form's ``featured`` checkbox is sent as the backend enum
``Featured``/``Normal``.
"""

from cms_admin.providers.base import ResourceAdapter
from cms_admin.providers.payload import Encoding, FieldMap, Kind, PayloadSpec

FEATURED_CHOICES = {True: "Featured", False: "Normal"}

TESTIMONIAL_PAYLOAD = PayloadSpec(
    encoding=Encoding.MULTIPART,
    fields=(
        FieldMap("company_logo", kind=Kind.FILE),
        FieldMap("name", default=""),
        FieldMap("email", default=""),
        FieldMap("content", default=""),
        FieldMap("rating", default=5),
        FieldMap("featured", kind=Kind.CHOICE, default="Normal", choices=FEATURED_CHOICES),
        FieldMap("status", default="Draft"),
    ),
)


class TestimonialAdapter(ResourceAdapter):
    __test__ = False

    name = "testimonial"
    endpoint = "testimonial"
    id_field = "testimonial_id"
    plural_key = "testimonials"
    singular_key = "testimonial"
    payload_spec = TESTIMONIAL_PAYLOAD
