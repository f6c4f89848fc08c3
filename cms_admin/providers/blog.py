"""Blog posts: multipart, tags as a JSON string, optional cover image."""

from cms_admin.providers.base import ResourceAdapter
from cms_admin.providers.payload import Encoding, FieldMap, Kind, PayloadSpec, When

BLOG_PAYLOAD = PayloadSpec(
    encoding=Encoding.MULTIPART,
    fields=(
        FieldMap("title", default=""),
        FieldMap("description", default=""),
        FieldMap("content", default=""),
        FieldMap("status", when=When.ALWAYS, default="Draft"),
        FieldMap("tags", kind=Kind.JSON),
        FieldMap("cover_image", kind=Kind.FILE),
    ),
)


class BlogAdapter(ResourceAdapter):
    name = "blog"
    endpoint = "blog"
    id_field = "blog_id"
    plural_key = "blogs"
    singular_key = "blog"
    payload_spec = BLOG_PAYLOAD
