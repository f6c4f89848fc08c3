"""Single entry point for data access.

``DataProvider`` routes each call to the adapter registered for the
resource, or to the generic REST convention when none is registered.
The dispatch table is fixed when the provider is built.
"""

import logging
from types import MappingProxyType
from typing import Any, Callable, Mapping

import httpx

from cms_admin.errors import UnknownResourceError
from cms_admin.providers.base import Filter, Pagination, ResourceAdapter, Sorter
from cms_admin.providers.blog import BlogAdapter
from cms_admin.providers.contact import ContactAdapter
from cms_admin.providers.faq import FaqAdapter
from cms_admin.providers.gallery import GalleryAdapter
from cms_admin.providers.newsletter import NewsletterAdapter
from cms_admin.providers.popup import PopupAdapter
from cms_admin.providers.product import ProductAdapter
from cms_admin.providers.rest import RestAdapter
from cms_admin.providers.setting import SettingAdapter
from cms_admin.providers.team import TeamAdapter
from cms_admin.providers.term import TermAdapter
from cms_admin.providers.testimonial import TestimonialAdapter
from cms_admin.providers.user import UserAdapter

logger = logging.getLogger(__name__)

ADAPTER_CLASSES: tuple[type[ResourceAdapter], ...] = (
    BlogAdapter,
    ContactAdapter,
    FaqAdapter,
    GalleryAdapter,
    NewsletterAdapter,
    PopupAdapter,
    ProductAdapter,
    SettingAdapter,
    TeamAdapter,
    TermAdapter,
    TestimonialAdapter,
    UserAdapter,
)


class DataProvider:
    """Dispatches CRUD calls by resource name."""

    def __init__(
        self,
        adapters: Mapping[str, ResourceAdapter],
        fallback: Callable[[str], ResourceAdapter] | None = None,
    ):
        self._adapters = MappingProxyType(dict(adapters))
        self._fallback = fallback
        self._fallback_cache: dict[str, ResourceAdapter] = {}

    @property
    def adapters(self) -> Mapping[str, ResourceAdapter]:
        return self._adapters

    def adapter_for(self, resource: str) -> ResourceAdapter:
        adapter = self._adapters.get(resource)
        if adapter is not None:
            return adapter
        if self._fallback is None:
            raise UnknownResourceError(f"No adapter registered for '{resource}'")
        if resource not in self._fallback_cache:
            logger.debug(f"No adapter for '{resource}', using generic REST")
            self._fallback_cache[resource] = self._fallback(resource)
        return self._fallback_cache[resource]

    async def get_list(
        self,
        resource: str,
        pagination: Pagination | None = None,
        filters: list[Filter] | None = None,
        sorters: list[Sorter] | None = None,
    ) -> dict[str, Any]:
        return await self.adapter_for(resource).get_list(pagination, filters, sorters)

    async def get_one(self, resource: str, record_id: str) -> dict[str, Any]:
        return await self.adapter_for(resource).get_one(record_id)

    async def create(self, resource: str, values: dict[str, Any]) -> dict[str, Any]:
        return await self.adapter_for(resource).create(values)

    async def update(self, resource: str, record_id: str, values: dict[str, Any]) -> dict[str, Any]:
        return await self.adapter_for(resource).update(record_id, values)

    async def delete_one(self, resource: str, record_id: str) -> dict[str, Any]:
        return await self.adapter_for(resource).delete_one(record_id)


def build_data_provider(client: httpx.AsyncClient, api_prefix: str | None = None) -> DataProvider:
    """Provider with every built-in adapter and the REST fallback."""
    adapters = {cls.name: cls(client, api_prefix) for cls in ADAPTER_CLASSES}
    return DataProvider(adapters, fallback=lambda resource: RestAdapter(client, resource, api_prefix))


def record_id(resource: str, record: dict[str, Any]) -> str | None:
    """Identifier of ``record`` from its adapter's id field; no client needed."""
    adapter_cls = next((cls for cls in ADAPTER_CLASSES if cls.name == resource), RestAdapter)
    return adapter_cls.record_id(record)
