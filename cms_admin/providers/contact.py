"""Contact-form submissions: read and delete only."""

from cms_admin.providers.base import ResourceAdapter


class ContactAdapter(ResourceAdapter):
    name = "contact"
    endpoint = "contact"
    id_field = "contact_id"
    plural_key = "contacts"
    singular_key = "contact"
    supports = frozenset({"get_list", "get_one", "delete_one"})
