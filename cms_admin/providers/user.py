"""Admin users, read only (used for the author picker)."""

from cms_admin.providers.base import Filter, Pagination, ResourceAdapter


class UserAdapter(ResourceAdapter):
    name = "user"
    endpoint = "user"
    id_field = "user_id"
    plural_key = "users"
    singular_key = "user"
    supports = frozenset({"get_list", "get_one"})

    async def active_users(self, limit: int = 100) -> list[dict]:
        """Active users for author selection."""
        result = await self.get_list(
            pagination=Pagination(current=1, page_size=limit),
            filters=[Filter("isActive", "eq", True)],
        )
        return result["data"] if isinstance(result["data"], list) else []
