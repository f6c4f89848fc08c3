"""Resource adapter base classes and list-query models.

Every backend resource (blog, faq, product, ...) is served by a
``ResourceAdapter``. Adding a resource = create a new module that
subclasses it and declares its endpoint, envelope keys and ``PayloadSpec``.

All operations are async, return ``{"data": ...}`` (lists also carry
``"total"``) and let HTTP errors propagate after logging which resource
and record were involved.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

from cms_admin.config import settings
from cms_admin.errors import UnsupportedOperationError
from cms_admin.providers.payload import FormPayload, PayloadSpec, build_payload

logger = logging.getLogger(__name__)


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Pagination:
    """1-based page number and page size."""

    current: int = 1
    page_size: int = 10

    def as_range(self) -> tuple[int, int]:
        """Convert to the backend's ``_start``/``_end`` offsets."""
        return (self.current - 1) * self.page_size, self.current * self.page_size


@dataclass(frozen=True)
class Sorter:
    field: str
    order: SortOrder | str = SortOrder.ASC


@dataclass(frozen=True)
class Filter:
    field: str
    operator: str = "eq"  # "eq" or "contains"
    value: Any = None


def list_params(
    pagination: Pagination | None = None,
    filters: list[Filter] | None = None,
    sorters: list[Sorter] | None = None,
) -> dict[str, Any]:
    """Build the query string for a list request.

    Only the first sorter is used. Filters become ``field=value`` pairs and
    are applied by the backend, never locally. Empty values are dropped.
    """
    start, end = (pagination or Pagination(page_size=settings.default_page_size)).as_range()
    params: dict[str, Any] = {"_start": start, "_end": end}

    if sorters:
        params["_sort"] = sorters[0].field
        params["_order"] = getattr(sorters[0].order, "value", sorters[0].order)

    for f in filters or []:
        if f.field and f.value is not None:
            params[f.field] = f.value

    return {k: v for k, v in params.items() if v is not None}


def unwrap(payload: Any, *keys: str) -> Any:
    """Envelope compatibility shim: ``payload[key]`` for the first key present.

    Falls back to the whole payload. An unexpected envelope therefore
    yields the payload itself rather than an error.
    """
    if isinstance(payload, dict):
        for key in keys:
            if payload.get(key) is not None:
                return payload[key]
    return payload


def count_total(payload: Any, records: Any) -> int:
    """Explicit ``total`` if the backend sent one, else the page length.

    The fallback under-counts when the backend paginates without a total.
    """
    if isinstance(payload, dict) and payload.get("total") is not None:
        return int(payload["total"])
    return len(records) if isinstance(records, list) else 0


class ResourceAdapter:
    """Adapter for one backend collection under ``/api/v1/<endpoint>``."""

    name: str = ""
    endpoint: str = ""
    id_field: str = "id"
    plural_key: str = ""
    singular_key: str = ""
    payload_spec: PayloadSpec | None = None
    supports: frozenset[str] = frozenset({"get_list", "get_one", "create", "update", "delete_one"})
    default_sorters: tuple[Sorter, ...] = ()

    def __init__(self, client: httpx.AsyncClient, api_prefix: str | None = None):
        self._client = client
        self._prefix = (api_prefix if api_prefix is not None else settings.api_prefix).rstrip("/")

    # -- paths and envelopes ------------------------------------------------

    @property
    def collection_path(self) -> str:
        return f"{self._prefix}/{self.endpoint}"

    def record_path(self, record_id: str) -> str:
        return f"{self.collection_path}/{record_id}"

    def normalize_list(self, payload: Any) -> dict[str, Any]:
        records = unwrap(payload, self.plural_key, "data")
        return {"data": records, "total": count_total(payload, records)}

    def normalize(self, payload: Any) -> Any:
        return unwrap(payload, self.singular_key, "data")

    def build_body(self, values: dict[str, Any]) -> dict[str, Any]:
        """Request kwargs for ``httpx`` (``files=`` or ``json=``)."""
        body = build_payload(self.payload_spec, values)
        if isinstance(body, FormPayload):
            logger.debug(f"{self.name} multipart payload: {body.describe()}")
            return {"files": body.as_httpx_files()}
        return {"json": body}

    def _require(self, operation: str) -> None:
        if operation not in self.supports:
            raise UnsupportedOperationError(self.name, operation)

    async def _send(self, method: str, path: str, context: str, **kwargs) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Error {context}: {e.response.status_code} {e.response.text[:200]}"
            )
            raise
        except httpx.HTTPError as e:
            logger.error(f"Error {context}: {e}")
            raise
        if not response.content:
            return {}
        return response.json()

    # -- operations ---------------------------------------------------------

    async def get_list(
        self,
        pagination: Pagination | None = None,
        filters: list[Filter] | None = None,
        sorters: list[Sorter] | None = None,
    ) -> dict[str, Any]:
        self._require("get_list")
        params = list_params(pagination, filters, sorters or list(self.default_sorters))
        payload = await self._send("GET", self.collection_path, f"fetching {self.name} list", params=params)
        return self.normalize_list(payload)

    async def get_one(self, record_id: str) -> dict[str, Any]:
        self._require("get_one")
        payload = await self._send("GET", self.record_path(record_id), f"fetching {self.name} {record_id}")
        return {"data": self.normalize(payload)}

    async def create(self, values: dict[str, Any]) -> dict[str, Any]:
        self._require("create")
        payload = await self._send(
            "POST", self.collection_path, f"creating {self.name}", **self.build_body(values)
        )
        return {"data": self.normalize(payload)}

    async def update(self, record_id: str, values: dict[str, Any]) -> dict[str, Any]:
        self._require("update")
        payload = await self._send(
            "PUT", self.record_path(record_id), f"updating {self.name} {record_id}", **self.build_body(values)
        )
        return {"data": self.normalize(payload)}

    async def delete_one(self, record_id: str) -> dict[str, Any]:
        self._require("delete_one")
        payload = await self._send("DELETE", self.record_path(record_id), f"deleting {self.name} {record_id}")
        return {"data": self.normalize(payload)}

    @classmethod
    def record_id(cls, record: dict[str, Any]) -> str | None:
        """The backend-assigned identifier of ``record``."""
        value = record.get(cls.id_field) or record.get("id") or record.get("_id")
        return str(value) if value is not None else None
