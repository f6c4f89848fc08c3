"""Pop-ups: multipart; the ``media`` upload goes to the backend's ``image`` key."""

from cms_admin.providers.base import ResourceAdapter
from cms_admin.providers.payload import Encoding, FieldMap, Kind, PayloadSpec, When

POPUP_PAYLOAD = PayloadSpec(
    encoding=Encoding.MULTIPART,
    fields=(
        FieldMap("title"),
        FieldMap("type"),
        FieldMap("content"),
        FieldMap("buttonText"),
        FieldMap("buttonLink"),
        FieldMap("status"),
        FieldMap("startDate", when=When.TRUTHY),
        FieldMap("endDate", when=When.TRUTHY),
        FieldMap("media", "image", kind=Kind.FILE),
    ),
)


class PopupAdapter(ResourceAdapter):
    name = "popup"
    endpoint = "popup"
    id_field = "popup_id"
    plural_key = "popups"
    singular_key = "popup"
    payload_spec = POPUP_PAYLOAD
