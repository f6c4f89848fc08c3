"""Generic REST convention for resources with no dedicated adapter.

Follows the simple-REST shape: list under ``/<resource>`` with
``_start``/``_end``/``_sort``/``_order`` and operator-suffixed filters,
total from the ``X-Total-Count`` header; single records under
``/<resource>/<id>``; JSON bodies for create and update.
"""

import logging
from typing import Any

import httpx

from cms_admin.providers.base import Filter, Pagination, ResourceAdapter, Sorter, list_params

logger = logging.getLogger(__name__)

# filter operator -> query-parameter suffix
OPERATOR_SUFFIXES = {
    "eq": "",
    "ne": "_ne",
    "contains": "_like",
    "gte": "_gte",
    "lte": "_lte",
}


def rest_filter_params(filters: list[Filter] | None) -> dict[str, Any]:
    params: dict[str, Any] = {}
    for f in filters or []:
        if f.value is None:
            continue
        suffix = OPERATOR_SUFFIXES.get(f.operator)
        if suffix is None:
            logger.warning(f"Unsupported filter operator '{f.operator}' on {f.field}, ignoring")
            continue
        params[f"{f.field}{suffix}"] = f.value
    return params


class RestAdapter(ResourceAdapter):
    """Adapter built at runtime for an arbitrary resource name."""

    def __init__(self, client: httpx.AsyncClient, resource: str, api_prefix: str | None = None):
        super().__init__(client, api_prefix)
        self.name = resource
        self.endpoint = resource

    def build_body(self, values: dict[str, Any]) -> dict[str, Any]:
        return {"json": values}

    def normalize(self, payload: Any) -> Any:
        return payload

    async def get_list(
        self,
        pagination: Pagination | None = None,
        filters: list[Filter] | None = None,
        sorters: list[Sorter] | None = None,
    ) -> dict[str, Any]:
        params = list_params(pagination, None, sorters)
        params.update(rest_filter_params(filters))
        try:
            response = await self._client.get(self.collection_path, params=params)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Error fetching {self.name} list: {e}")
            raise

        records = response.json()
        header_total = response.headers.get("x-total-count")
        if header_total is not None:
            total = int(header_total)
        else:
            total = len(records) if isinstance(records, list) else 0
        return {"data": records, "total": total}
