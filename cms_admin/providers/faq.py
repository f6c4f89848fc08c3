"""FAQs: multipart with backend defaults for status, category and order."""

from cms_admin.providers.base import ResourceAdapter
from cms_admin.providers.payload import Encoding, FieldMap, PayloadSpec, When

FAQ_PAYLOAD = PayloadSpec(
    encoding=Encoding.MULTIPART,
    fields=(
        FieldMap("question", default=""),
        FieldMap("answer", default=""),
        FieldMap("status", when=When.ALWAYS, default="Draft"),
        FieldMap("category", when=When.ALWAYS, default="General"),
        FieldMap("display_order", when=When.ALWAYS, default=0),
    ),
)


class FaqAdapter(ResourceAdapter):
    name = "faq"
    endpoint = "faq"
    id_field = "faq_id"
    plural_key = "faqs"
    singular_key = "faq"
    payload_spec = FAQ_PAYLOAD
