"""Newsletter subscribers, newest first unless another sort is requested."""

from cms_admin.providers.base import ResourceAdapter, Sorter, SortOrder
from cms_admin.providers.payload import Encoding, FieldMap, Kind, PayloadSpec

NEWSLETTER_PAYLOAD = PayloadSpec(
    encoding=Encoding.JSON,
    fields=(FieldMap("email", kind=Kind.RAW),),
)


class NewsletterAdapter(ResourceAdapter):
    name = "newsletter"
    endpoint = "newsletter"
    id_field = "newsletter_id"
    plural_key = "newsletters"
    singular_key = "newsletter"
    payload_spec = NEWSLETTER_PAYLOAD
    supports = frozenset({"get_list", "get_one", "create", "delete_one"})
    default_sorters = (Sorter("createdAt", SortOrder.DESC),)
