"""Team members: multipart with a photo upload."""

from cms_admin.providers.base import ResourceAdapter
from cms_admin.providers.payload import Encoding, FieldMap, Kind, PayloadSpec

TEAM_PAYLOAD = PayloadSpec(
    encoding=Encoding.MULTIPART,
    fields=(
        FieldMap("name"),
        FieldMap("role"),
        FieldMap("status"),
        FieldMap("image", kind=Kind.FILE),
    ),
)


class TeamAdapter(ResourceAdapter):
    name = "team"
    endpoint = "team"
    id_field = "team_id"
    plural_key = "teams"
    singular_key = "team"
    payload_spec = TEAM_PAYLOAD
