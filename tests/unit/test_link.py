"""
Link object unit tests
"""

import pytest

from jsonapi_client.exceptions import ValidationError
from jsonapi_client.objects import Link


class TestLink:
    """Test link objects"""

    def test_href_and_meta(self, manager):
        """href and meta are stored"""
        link = manager.make("Link", {"href": "/a", "meta": {"count": 2}})
        assert link.get("href") == "/a"
        assert link.get_path("meta.count") == 2

    def test_href_required(self, manager):
        """href is required"""
        with pytest.raises(ValidationError) as exc_info:
            manager.make("Link", {"meta": {}})
        assert "href" in exc_info.value.message

    def test_href_must_be_string(self, manager):
        """href has to be a string"""
        with pytest.raises(ValidationError):
            manager.make("Link", {"href": 1})

    def test_nested_links(self, manager):
        """Extra members are links themselves"""
        link = manager.make("Link", {"href": "/a", "alt": {"href": "/b"}, "raw": "/c"})
        assert isinstance(link.get("alt"), Link)
        assert link.get("raw") == "/c"


class TestDocumentLink:
    """Test top-level links"""

    def test_pagination_with_data(self, manager):
        """Null pagination links are dropped when data is present"""
        document = manager.make(
            "Document",
            {"data": [], "links": {"self": "/a", "next": None, "prev": "/p1"}},
        )
        links = document.get("links")
        assert links.has("next") is False
        assert links.get("prev") == "/p1"

    def test_pagination_without_data(self, manager):
        """Without data a null next link is rejected"""
        with pytest.raises(ValidationError):
            manager.make("Document", {"meta": {}, "links": {"next": None}})

    def test_custom_link_object(self, manager):
        """Extension links may be link objects"""
        document = manager.make(
            "Document", {"meta": {}, "links": {"describedby": {"href": "/schema"}}}
        )
        assert document.get_path("links.describedby.href") == "/schema"


class TestResourceItemLink:
    """Test resource links"""

    def test_all_links(self, manager):
        """Every member is a link"""
        links = manager.make("ResourceItemLink", {"self": "/a", "other": {"href": "/b"}})
        assert links.get("self") == "/a"
        assert links.get_path("other.href") == "/b"

    def test_invalid_link(self, manager):
        """Null links are rejected"""
        with pytest.raises(ValidationError):
            manager.make("ResourceItemLink", {"self": None})


class TestErrorLink:
    """Test error links"""

    def test_about_required(self, manager):
        """about is required"""
        with pytest.raises(ValidationError) as exc_info:
            manager.make("ErrorLink", {"self": "/a"})
        assert "about" in exc_info.value.message

    def test_about(self, manager):
        """about may be a link object"""
        links = manager.make("ErrorLink", {"about": {"href": "/docs/errors/1"}})
        assert links.get_path("about.href") == "/docs/errors/1"
