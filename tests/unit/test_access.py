"""
Accessible capability unit tests

has()/get() read exactly the keys get_keys() lists; has_path()/get_path()
walk dotted paths through nested wrappers, collections and raw values.
"""

import pytest

from jsonapi_client.core.access import AccessKey
from jsonapi_client.exceptions import AccessError


@pytest.fixture
def item(manager):
    return manager.make(
        "ResourceItem",
        {
            "type": "articles",
            "id": "1",
            "attributes": {"title": "Rails is Omakase", "tags": ["a", "b"]},
            "relationships": {
                "comments": {
                    "data": [{"type": "comments", "id": "5"}],
                    "links": {"self": "/articles/1/relationships/comments"},
                },
            },
            "meta": {"page": {"total": 3}, "a.b": "dotted"},
        },
    )


class TestAccessKey:
    """Test key parsing"""

    def test_plain_key(self):
        """Test single segment key"""
        assert AccessKey.parse("self").segments == ["self"]

    def test_dotted_key(self):
        """Test dotted key splits into segments"""
        assert AccessKey.parse("a.b.c").segments == ["a", "b", "c"]

    def test_int_key(self):
        """Test collection index key"""
        key = AccessKey.parse(0)
        assert key.raw == 0
        assert key.segments == ["0"]

    @pytest.mark.parametrize("key", [None, 1.5, True, ["a"]])
    def test_invalid_key_type(self, key):
        """Test keys that are neither str nor int"""
        with pytest.raises(AccessError):
            AccessKey.parse(key)


class TestExactAccess:
    """Test has/get/get_keys"""

    def test_get_keys(self, item):
        """Keys come back in parse order"""
        assert item.get_keys() == ["type", "id", "meta", "attributes", "relationships"]

    def test_get_plain(self, item):
        """Stored fields are returned"""
        assert item.get("type") == "articles"

    def test_get_collection_index(self, item):
        """Collections are keyed by integer position"""
        collection = item.get("relationships").get("comments").get("data")
        assert collection.get_keys() == [0]
        assert collection.get(0).get("id") == "5"

    def test_missing_key_raises_access_error(self, item):
        """The error names the wrapper type and the key"""
        with pytest.raises(AccessError) as exc_info:
            item.get("links")
        assert "links" in str(exc_info.value)
        assert "ResourceItem" in str(exc_info.value)
        assert exc_info.value.details == {"type": "ResourceItem", "key": "links"}

    def test_access_error_is_key_error(self, item):
        """AccessError can be caught as KeyError"""
        with pytest.raises(KeyError):
            item.get("nope")

    @pytest.mark.parametrize(
        "key", ["nope", "attributes.title", "meta.page", "", 42, None, 1.5, ["type"]]
    )
    def test_get_outside_keys_always_fails(self, item, key):
        """get() raises for anything not listed by get_keys()"""
        assert key not in item.get_keys()
        with pytest.raises(AccessError):
            item.get(key)

    @pytest.mark.parametrize(
        "key", ["nope", "attributes.title", "type.length", "", 42, None, 1.5, ["type"]]
    )
    def test_has_never_raises(self, item, key):
        """has() answers False for missing or malformed keys"""
        assert item.has(key) is False

    def test_dotted_key_of_nested_link_is_not_a_key(self, manager, to_one):
        """A nested member is not a key of the outer wrapper"""
        links = manager.make("RelationshipLink", {"related": {"href": "/b"}}, to_one)
        assert "related.href" not in links.get_keys()
        assert links.has("related.href") is False
        with pytest.raises(AccessError):
            links.get("related.href")

    def test_string_index_is_not_a_collection_key(self, item):
        """Collections only answer to integer keys"""
        collection = item.get("relationships").get("comments").get("data")
        assert collection.has("0") is False
        with pytest.raises(AccessError):
            collection.get("0")


class TestPathAccess:
    """Test has_path/get_path"""

    def test_get_path_nested_wrappers(self, item):
        """Test walking nested wrappers"""
        assert item.get_path("attributes.title") == "Rails is Omakase"
        assert (
            item.get_path("relationships.comments.links.self")
            == "/articles/1/relationships/comments"
        )

    def test_get_path_collection_index(self, item):
        """Numeric segments index collections"""
        assert item.get_path("relationships.comments.data.0.id") == "5"

    def test_get_path_into_raw_values(self, item):
        """Paths continue into raw meta and attribute values"""
        assert item.get_path("meta.page.total") == 3
        assert item.get_path("attributes.tags.1") == "b"

    def test_get_path_exact_key_first(self, item):
        """A stored key containing a dot is still reachable"""
        meta = item.get("meta")
        assert meta.get("a.b") == "dotted"
        assert meta.get_path("a.b") == "dotted"

    def test_get_path_missing(self, item):
        """Missing segments raise AccessError"""
        with pytest.raises(AccessError):
            item.get_path("attributes.missing.deeper")
        with pytest.raises(AccessError):
            item.get_path("attributes.tags.7")

    @pytest.mark.parametrize("path", ["nope", "attributes.nope", "type.length", "", None])
    def test_has_path_never_raises(self, item, path):
        """has_path() answers False instead of raising"""
        assert item.has_path(path) is False

    def test_has_path_present(self, item):
        """Test present paths"""
        assert item.has_path("attributes") is True
        assert item.has_path("attributes.title") is True
        assert item.has_path("relationships.comments.data.0") is True


class TestAsDict:
    """Test conversion to plain data"""

    def test_shallow(self, item):
        """Nested wrappers are kept as-is"""
        result = item.as_dict()
        assert result["type"] == "articles"
        assert result["attributes"] is item.get("attributes")

    def test_full(self, item):
        """Nested wrappers are converted"""
        result = item.as_dict(full=True)
        assert result["attributes"] == {"title": "Rails is Omakase", "tags": ["a", "b"]}
        assert result["relationships"]["comments"]["data"] == [
            {"type": "comments", "id": "5"}
        ]


class TestReadOnly:
    """Wrappers cannot be changed after construction"""

    def test_setattr_rejected(self, item):
        """Attribute assignment raises"""
        with pytest.raises(AttributeError):
            item.foo = "bar"

    def test_meta_values_are_copies(self, manager):
        """Changing the input afterwards does not leak in"""
        raw = {"page": {"total": 3}}
        meta = manager.make("Meta", raw)
        raw["page"]["total"] = 4
        assert meta.get_path("page.total") == 3
