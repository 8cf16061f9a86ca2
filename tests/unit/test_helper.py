"""
Helper entry point unit tests
"""

import json

import pytest

from jsonapi_client import (
    create_manager,
    is_valid_request_body,
    is_valid_response_body,
    parse,
    parse_request_body,
    parse_response_body,
)
from jsonapi_client.exceptions import ValidationError
from jsonapi_client.objects import Document


class TestParse:
    """Test parsing decoded data and JSON text"""

    def test_parse_decoded(self):
        """Test parsing decoded data"""
        document = parse({"meta": {"ok": True}})
        assert isinstance(document, Document)
        assert document.get_path("meta.ok") is True

    def test_parse_with_manager(self):
        """A given manager is used"""
        manager = create_manager()
        assert parse({"data": None}, manager).has("data")

    def test_parse_rejects(self):
        """Invalid documents raise"""
        with pytest.raises(ValidationError):
            parse({"links": {"self": "/a"}})

    def test_response_body(self):
        """Test response body"""
        body = json.dumps({"data": {"type": "people", "id": "9"}})
        assert parse_response_body(body).get_path("data.id") == "9"

    def test_response_body_bad_json(self):
        """Broken JSON is a validation error"""
        with pytest.raises(ValidationError) as exc_info:
            parse_response_body("{not json")
        assert "Unable to parse JSON" in exc_info.value.message

    def test_response_body_requires_id(self):
        """Responses need resource ids"""
        body = json.dumps({"data": {"type": "people", "attributes": {"name": "Dan"}}})
        with pytest.raises(ValidationError):
            parse_response_body(body)

    def test_request_body_allows_missing_id(self):
        """Requests may omit resource ids"""
        body = json.dumps({"data": {"type": "people", "attributes": {"name": "Dan"}}})
        document = parse_request_body(body)
        assert document.has_path("data.id") is False
        assert document.get_path("data.attributes.name") == "Dan"

    def test_request_body_leaves_manager_config(self):
        """The caller's manager config is untouched"""
        manager = create_manager()
        body = json.dumps({"data": {"type": "people"}})
        parse_request_body(body, manager)
        assert manager.config.optional_item_id is False


class TestIsValid:
    """Test yes/no validation"""

    @pytest.mark.parametrize(
        "body,expected",
        [
            ('{"meta": {}}', True),
            ('{"data": []}', True),
            ("{}", False),
            ("[]", False),
            ("not json", False),
            ('{"data": {"type": "people"}}', False),
        ],
    )
    def test_response_body(self, body, expected):
        """Test response body"""
        assert is_valid_response_body(body) is expected

    def test_request_body(self):
        """Test request body"""
        assert is_valid_request_body('{"data": {"type": "people"}}') is True
        assert is_valid_request_body('{"data": {"id": "1"}}') is False
