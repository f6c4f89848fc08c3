"""Site settings: one record, JSON bodies, renamed fields.

The settings record is a singleton whose id comes from configuration
(``SETTING_ID``); the id ``"current"`` reads ``/setting/current``.
Several client field names differ from the backend's and are renamed in
both directions:

    facebook_url    <-> facebook_link
    instagram_url   <-> instagram_link
    youtube_url     <-> youtube_link
    maintenace_mode <-> maintenance_mode
"""

import httpx

from cms_admin.config import settings
from cms_admin.providers.base import Filter, Pagination, ResourceAdapter, Sorter, unwrap
from cms_admin.providers.payload import Encoding, FieldMap, Kind, PayloadSpec, When

# client name -> backend name
RENAMED_FIELDS = {
    "facebook_url": "facebook_link",
    "instagram_url": "instagram_link",
    "youtube_url": "youtube_link",
    "maintenace_mode": "maintenance_mode",
}

SETTING_PAYLOAD = PayloadSpec(
    encoding=Encoding.JSON,
    fields=(
        FieldMap("site_name", kind=Kind.RAW, when=When.ALWAYS, default=""),
        FieldMap("site_description", kind=Kind.RAW, when=When.ALWAYS, default=""),
        FieldMap("contact_email", kind=Kind.RAW, when=When.ALWAYS, default=""),
        FieldMap("facebook_url", "facebook_link", kind=Kind.RAW, when=When.ALWAYS, default=None),
        FieldMap("instagram_url", "instagram_link", kind=Kind.RAW, when=When.ALWAYS, default=None),
        FieldMap("youtube_url", "youtube_link", kind=Kind.RAW, when=When.ALWAYS, default=None),
        FieldMap("maintenace_mode", "maintenance_mode", kind=Kind.RAW, when=When.ALWAYS, default=False),
        FieldMap("enable_analytics", kind=Kind.RAW, when=When.ALWAYS, default=True),
        FieldMap("cookie_consent", kind=Kind.RAW, when=When.ALWAYS, default=True),
    ),
)


def to_client_fields(record):
    """Add the client-side names next to the backend ones."""
    if not isinstance(record, dict):
        return record
    mapped = dict(record)
    for client, backend in RENAMED_FIELDS.items():
        if backend in record:
            mapped[client] = record[backend]
    return mapped


class SettingAdapter(ResourceAdapter):
    name = "setting"
    endpoint = "setting"
    id_field = "setting_id"
    singular_key = "setting"
    payload_spec = SETTING_PAYLOAD
    supports = frozenset({"get_list", "get_one", "create", "update"})

    def __init__(self, client: httpx.AsyncClient, api_prefix: str | None = None, setting_id: str | None = None):
        super().__init__(client, api_prefix)
        self.setting_id = setting_id or settings.setting_id

    def normalize(self, payload):
        return to_client_fields(unwrap(payload, self.singular_key, "data"))

    def record_path(self, record_id: str | None) -> str:
        return super().record_path(record_id or self.setting_id)

    async def get_list(
        self,
        pagination: Pagination | None = None,
        filters: list[Filter] | None = None,
        sorters: list[Sorter] | None = None,
    ):
        """The singleton as a one-record page."""
        result = await self.get_one(self.setting_id)
        return {"data": [result["data"]], "total": 1}

    async def get_one(self, record_id: str | None = None):
        return await super().get_one(record_id or self.setting_id)

    async def update(self, record_id: str | None, values):
        return await super().update(record_id or self.setting_id, values)
