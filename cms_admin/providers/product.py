"""Products: multipart, tags as a JSON string, optional image."""

from cms_admin.providers.base import ResourceAdapter
from cms_admin.providers.payload import Encoding, FieldMap, Kind, PayloadSpec

PRODUCT_PAYLOAD = PayloadSpec(
    encoding=Encoding.MULTIPART,
    fields=(
        FieldMap("name"),
        FieldMap("description"),
        FieldMap("category"),
        FieldMap("status"),
        FieldMap("tags", kind=Kind.JSON),
        FieldMap("image", kind=Kind.FILE),
    ),
)


class ProductAdapter(ResourceAdapter):
    name = "product"
    endpoint = "product"
    id_field = "product_id"
    plural_key = "products"
    singular_key = "product"
    payload_spec = PRODUCT_PAYLOAD
