"""Tests for the resource adapters against a mocked backend."""

import json

import httpx
import pytest

from cms_admin.errors import UnsupportedOperationError
from cms_admin.providers.base import Filter, Pagination, Sorter, SortOrder, list_params
from cms_admin.providers.blog import BlogAdapter
from cms_admin.providers.contact import ContactAdapter
from cms_admin.providers.gallery import GalleryAdapter
from cms_admin.providers.newsletter import NewsletterAdapter
from cms_admin.providers.product import ProductAdapter
from cms_admin.providers.team import TeamAdapter
from cms_admin.providers.testimonial import TestimonialAdapter
from cms_admin.providers.term import TermAdapter
from cms_admin.providers.user import UserAdapter
from cms_admin.validation.forms import validate_form


class TestListParams:
    def test_pagination_to_offsets(self):
        params = list_params(Pagination(current=3, page_size=10))
        assert params["_start"] == 20
        assert params["_end"] == 30

    def test_first_sorter_only(self):
        params = list_params(Pagination(), sorters=[Sorter("title", SortOrder.DESC), Sorter("id")])
        assert params["_sort"] == "title"
        assert params["_order"] == "desc"

    def test_filters_become_field_value_pairs(self):
        params = list_params(Pagination(), filters=[Filter("email", "contains", "ann"), Filter("status", value=None)])
        assert params["email"] == "ann"
        assert "status" not in params


class TestBlogAdapter:
    @pytest.mark.asyncio
    async def test_create_sends_multipart_and_normalizes(self, mock_backend, multipart_fields):
        def respond(request):
            return httpx.Response(201, json={"blog": {"blog_id": "b1", "title": "My First Post"}})

        client, recorder = mock_backend(respond)
        adapter = BlogAdapter(client)
        result = await adapter.create(
            {
                "title": "My First Post",
                "content": "A sufficiently long body of text exceeding twenty characters",
                "status": "Draft",
                "tags": ["news", "launch"],
                "author": "7",
            }
        )

        request = recorder.last
        assert request.method == "POST"
        assert request.url.path == "/api/v1/blog"
        assert request.headers["content-type"].startswith("multipart/form-data")
        parts = multipart_fields(request)
        assert parts["title"] == "My First Post"
        assert parts["status"] == "Draft"
        assert json.loads(parts["tags"]) == ["news", "launch"]
        assert "author" not in parts
        assert "cover_image" not in parts
        assert result["data"]["blog_id"] == "b1"
        assert adapter.record_id(result["data"]) == "b1"

    @pytest.mark.asyncio
    async def test_update_with_stored_path_omits_file(self, mock_backend, multipart_fields):
        client, recorder = mock_backend(lambda r: httpx.Response(200, json={"blog": {"blog_id": "b1"}}))
        await BlogAdapter(client).update("b1", {"title": "Edited", "cover_image": "/uploads/c.png"})

        assert recorder.last.method == "PUT"
        assert recorder.last.url.path == "/api/v1/blog/b1"
        parts = multipart_fields(recorder.last)
        assert "cover_image" not in parts
        assert parts["title"] == "Edited"

    @pytest.mark.asyncio
    async def test_update_with_upload_attaches_file(self, mock_backend, multipart_fields, png_upload):
        client, recorder = mock_backend(lambda r: httpx.Response(200, json={"blog": {"blog_id": "b1"}}))
        await BlogAdapter(client).update("b1", {"title": "Edited", "cover_image": png_upload})

        parts = multipart_fields(recorder.last)
        assert parts["cover_image"] == ("cover.png", png_upload.content)

    @pytest.mark.asyncio
    async def test_list_unwraps_plural_envelope(self, mock_backend):
        def respond(request):
            return httpx.Response(200, json={"blogs": [{"blog_id": "1"}, {"blog_id": "2"}], "total": 12})

        client, recorder = mock_backend(respond)
        result = await BlogAdapter(client).get_list(
            Pagination(current=2, page_size=2), [Filter("title", "contains", "news")], [Sorter("title")]
        )

        assert result == {"data": [{"blog_id": "1"}, {"blog_id": "2"}], "total": 12}
        params = recorder.last.url.params
        assert params["_start"] == "2"
        assert params["_end"] == "4"
        assert params["_sort"] == "title"
        assert params["_order"] == "asc"
        assert params["title"] == "news"

    @pytest.mark.asyncio
    async def test_list_is_repeatable(self, mock_backend):
        client, _ = mock_backend(lambda r: httpx.Response(200, json={"data": [{"blog_id": "1"}]}))
        adapter = BlogAdapter(client)
        first = await adapter.get_list(Pagination())
        second = await adapter.get_list(Pagination())
        assert first == second == {"data": [{"blog_id": "1"}], "total": 1}

    @pytest.mark.asyncio
    async def test_bare_array_envelope(self, mock_backend):
        client, _ = mock_backend(lambda r: httpx.Response(200, json=[{"blog_id": "1"}]))
        assert await BlogAdapter(client).get_list() == {"data": [{"blog_id": "1"}], "total": 1}

    @pytest.mark.asyncio
    async def test_http_error_propagates(self, mock_backend):
        client, _ = mock_backend(lambda r: httpx.Response(500, json={"message": "boom"}))
        with pytest.raises(httpx.HTTPStatusError):
            await BlogAdapter(client).get_one("b1")

    @pytest.mark.asyncio
    async def test_delete_empty_body(self, mock_backend):
        client, recorder = mock_backend(lambda r: httpx.Response(204))
        result = await BlogAdapter(client).delete_one("b1")
        assert recorder.last.method == "DELETE"
        assert result == {"data": {}}


class TestOtherAdapters:
    @pytest.mark.asyncio
    async def test_testimonial_featured_flag(self, mock_backend, multipart_fields):
        client, recorder = mock_backend(lambda r: httpx.Response(201, json={"testimonial": {"testimonial_id": "t1"}}))
        await TestimonialAdapter(client).create({"name": "Sam", "featured": True, "rating": 5, "role": "Customer"})
        parts = multipart_fields(recorder.last)
        assert parts["featured"] == "Featured"
        assert parts["rating"] == "5"
        assert "role" not in parts

    @pytest.mark.asyncio
    async def test_product_is_multipart_without_file(self, mock_backend):
        client, recorder = mock_backend(lambda r: httpx.Response(201, json={"product": {"product_id": "p1"}}))
        await ProductAdapter(client).create({"name": "Bowl", "tags": []})
        assert recorder.last.headers["content-type"].startswith("multipart/form-data")

    @pytest.mark.asyncio
    async def test_term_uses_json(self, mock_backend):
        client, recorder = mock_backend(lambda r: httpx.Response(201, json={"term": {"term_id": "1"}}))
        await TermAdapter(client).create({"title": "Privacy", "content": "Body", "author": "7"})
        assert recorder.last.headers["content-type"] == "application/json"
        assert json.loads(recorder.last.content) == {
            "title": "Privacy",
            "content": "Body",
            "author": "7",
            "status": "Draft",
        }

    @pytest.mark.asyncio
    async def test_term_keeps_published_status(self, mock_backend):
        form = validate_form(
            "term",
            {"title": "Privacy policy", "content": "Long enough content", "author": "7", "status": "Published"},
            editing=True,
        )
        client, recorder = mock_backend(lambda r: httpx.Response(200, json={"term": {"term_id": "1"}}))
        await TermAdapter(client).update("1", form.value)

        assert recorder.last.method == "PUT"
        assert json.loads(recorder.last.content)["status"] == "Published"

    @pytest.mark.asyncio
    async def test_newsletter_sorted_newest_first(self, mock_backend):
        client, recorder = mock_backend(lambda r: httpx.Response(200, json={"newsletters": []}))
        await NewsletterAdapter(client).get_list()
        assert recorder.last.url.params["_sort"] == "createdAt"
        assert recorder.last.url.params["_order"] == "desc"

    @pytest.mark.asyncio
    async def test_contact_is_read_only(self, mock_backend):
        client, recorder = mock_backend(lambda r: httpx.Response(200, json={}))
        with pytest.raises(UnsupportedOperationError):
            await ContactAdapter(client).create({"name": "x"})
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_active_users_filter(self, mock_backend):
        client, recorder = mock_backend(lambda r: httpx.Response(200, json={"users": [{"user_id": 1}]}))
        users = await UserAdapter(client).active_users()
        assert users == [{"user_id": 1}]
        assert recorder.last.url.params["isActive"] == "true"
        assert recorder.last.url.params["_end"] == "100"


class TestMediaAdapters:
    @pytest.mark.asyncio
    async def test_gallery_image_sent_as_image_url(self, mock_backend, multipart_fields, png_upload):
        client, recorder = mock_backend(lambda r: httpx.Response(201, json={"image": {"image_id": "g1"}}))
        result = await GalleryAdapter(client).create(
            {"image": png_upload, "album": "Events", "image_description": "Opening night"}
        )

        assert recorder.last.url.path == "/api/v1/gallery"
        parts = multipart_fields(recorder.last)
        assert parts["image_url"] == ("cover.png", png_upload.content)
        assert "image" not in parts
        assert parts["album"] == "Events"
        assert parts["image_description"] == "Opening night"
        assert result["data"]["image_id"] == "g1"

    @pytest.mark.asyncio
    async def test_gallery_null_fields_get_defaults(self, mock_backend, multipart_fields):
        client, recorder = mock_backend(lambda r: httpx.Response(200, json={"image": {"image_id": "g1"}}))
        await GalleryAdapter(client).update("g1", {"image": "/uploads/old.png", "album": None, "image_description": None})

        parts = multipart_fields(recorder.last)
        assert parts["album"] == "Products"
        assert parts["image_description"] == ""
        assert "image_url" not in parts

    @pytest.mark.asyncio
    async def test_team_create_with_photo(self, mock_backend, multipart_fields, png_upload):
        client, recorder = mock_backend(lambda r: httpx.Response(201, json={"team": {"team_id": "t1"}}))
        adapter = TeamAdapter(client)
        result = await adapter.create({"name": "Jordan Lee", "role": "Designer", "status": "Published", "image": png_upload})

        request = recorder.last
        assert request.url.path == "/api/v1/team"
        parts = multipart_fields(request)
        assert parts["name"] == "Jordan Lee"
        assert parts["role"] == "Designer"
        assert parts["status"] == "Published"
        assert parts["image"] == ("cover.png", png_upload.content)
        assert adapter.record_id(result["data"]) == "t1"

    @pytest.mark.asyncio
    async def test_team_update_keeps_stored_photo(self, mock_backend, multipart_fields):
        client, recorder = mock_backend(lambda r: httpx.Response(200, json={"team": {"team_id": "t1"}}))
        await TeamAdapter(client).update("t1", {"name": "Jordan Lee", "image": "/uploads/jordan.png"})

        assert recorder.last.method == "PUT"
        assert recorder.last.url.path == "/api/v1/team/t1"
        parts = multipart_fields(recorder.last)
        assert "image" not in parts
        assert "role" not in parts
