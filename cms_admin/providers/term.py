"""Terms pages: plain JSON with an explicit field allow-list."""

from cms_admin.providers.base import ResourceAdapter
from cms_admin.providers.payload import Encoding, FieldMap, Kind, PayloadSpec, When

TERM_PAYLOAD = PayloadSpec(
    encoding=Encoding.JSON,
    fields=(
        FieldMap("title", kind=Kind.RAW, when=When.ALWAYS, default=""),
        FieldMap("content", kind=Kind.RAW, when=When.ALWAYS, default=""),
        FieldMap("author", kind=Kind.RAW, when=When.ALWAYS, default=""),
        FieldMap("status", kind=Kind.RAW, when=When.ALWAYS, default="Draft"),
    ),
)


class TermAdapter(ResourceAdapter):
    name = "term"
    endpoint = "term"
    id_field = "term_id"
    plural_key = "terms"
    singular_key = "term"
    payload_spec = TERM_PAYLOAD
