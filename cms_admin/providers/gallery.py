"""Gallery images. The upload is sent under ``image_url``."""

from cms_admin.providers.base import ResourceAdapter
from cms_admin.providers.payload import Encoding, FieldMap, Kind, PayloadSpec

GALLERY_ALBUMS = ("Products", "Events", "Lifestyle")

GALLERY_PAYLOAD = PayloadSpec(
    encoding=Encoding.MULTIPART,
    fields=(
        FieldMap("image", "image_url", kind=Kind.FILE),
        FieldMap("album", default="Products"),
        FieldMap("image_description", default=""),
    ),
)


class GalleryAdapter(ResourceAdapter):
    name = "gallery"
    endpoint = "gallery"
    id_field = "image_id"
    plural_key = "images"
    singular_key = "image"
    payload_spec = GALLERY_PAYLOAD
