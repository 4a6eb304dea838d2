"""Tests for JsonPropertySourceLoader."""

import json

import pytest

from propbind.errors import LoadError
from propbind.sources import (
    InMemoryResource,
    JsonPropertySourceLoader,
    PropertySourceLoader,
    Resource,
)
from propbind.testing import PropertySourceLoaderContractTests


class TestJsonLoaderContract(PropertySourceLoaderContractTests):
    """Run the loader contract tests against the JSON loader."""

    @pytest.fixture
    def loader(self) -> PropertySourceLoader:
        return JsonPropertySourceLoader()

    @pytest.fixture
    def valid_resource(self) -> Resource:
        return InMemoryResource('{"server": {"port": 8080}}', "application.json")

    @pytest.fixture
    def malformed_resource(self) -> Resource:
        return InMemoryResource('{"server": ', "application.json")


class TestJsonLoader:
    """Test suite for JSON specific behaviour."""

    def test_flattens_nested_objects(self) -> None:
        """Verify nested objects and arrays become dotted and indexed names."""
        content = json.dumps({"db": {"url": "jdbc:x", "replicas": ["r1", "r2"]}})

        [source] = JsonPropertySourceLoader().load(
            "app", InMemoryResource(content, "app.json")
        )

        assert dict(source) == {
            "db.url": "jdbc:x",
            "db.replicas[0]": "r1",
            "db.replicas[1]": "r2",
        }

    def test_parse_error_is_wrapped(self) -> None:
        """Verify the JSON decode error is kept as the cause."""
        with pytest.raises(LoadError) as exc_info:
            JsonPropertySourceLoader().load(
                "app", InMemoryResource("{nope}", "app.json")
            )

        assert isinstance(exc_info.value.cause, json.JSONDecodeError)

    def test_top_level_array_is_rejected(self) -> None:
        """Verify a JSON array is not a valid property document."""
        with pytest.raises(LoadError, match="must be a mapping"):
            JsonPropertySourceLoader().load("app", InMemoryResource("[1]", "app.json"))
