"""Testing utilities for propbind.

Provides contract tests that every PropertySourceLoader implementation must
pass, so third-party loaders can verify themselves against the same rules as
the bundled ones.
"""

import pytest

from propbind.errors import LoadError
from propbind.sources import PropertySource, PropertySourceLoader, Resource


class PropertySourceLoaderContractTests:
    """Abstract contract tests that all PropertySourceLoader implementations must pass.

    Required Fixtures:
        loader: PropertySourceLoader instance to test
        valid_resource: Resource holding one valid document
        malformed_resource: Resource the loader cannot parse

    Contract Requirements:
        1. supported_extensions() returns non-empty extensions without a dot
        2. load() returns a non-empty list of PropertySource
        3. A single-document resource gives one source named exactly as requested
        4. Each call returns fresh sources
        5. Malformed content raises LoadError carrying the cause

    Usage Pattern:
        class TestMyLoader(PropertySourceLoaderContractTests):
            @pytest.fixture
            def loader(self) -> PropertySourceLoader:
                return MyLoader()

            @pytest.fixture
            def valid_resource(self) -> Resource:
                return InMemoryResource("key = value", "app.ini")

            @pytest.fixture
            def malformed_resource(self) -> Resource:
                return InMemoryResource("[broken", "app.ini")

    """

    @pytest.fixture
    def loader(self) -> PropertySourceLoader:
        """Provide the loader under test."""
        raise NotImplementedError(
            "Subclass must provide 'loader' fixture with PropertySourceLoader instance"
        )

    @pytest.fixture
    def valid_resource(self) -> Resource:
        """Provide a resource holding exactly one valid document."""
        raise NotImplementedError(
            "Subclass must provide 'valid_resource' fixture with a single-document Resource"
        )

    @pytest.fixture
    def malformed_resource(self) -> Resource:
        """Provide a resource the loader must reject."""
        raise NotImplementedError(
            "Subclass must provide 'malformed_resource' fixture with an unparseable Resource"
        )

    # CONTRACT TEST 1
    def test_supported_extensions_are_declared_without_dot(
        self, loader: PropertySourceLoader
    ) -> None:
        """Verify the loader declares at least one extension, none with a leading dot."""
        extensions = loader.supported_extensions()

        assert extensions, "Loader must support at least one extension"
        assert all(ext and not ext.startswith(".") for ext in extensions), (
            f"Extensions must not start with '.': {sorted(extensions)}"
        )

    # CONTRACT TEST 2
    def test_load_returns_non_empty_list_of_property_sources(
        self, loader: PropertySourceLoader, valid_resource: Resource
    ) -> None:
        """Verify load() returns at least one PropertySource."""
        sources = loader.load("contract", valid_resource)

        assert isinstance(sources, list)
        assert len(sources) >= 1
        assert all(isinstance(source, PropertySource) for source in sources)

    # CONTRACT TEST 3
    def test_single_document_source_keeps_requested_name(
        self, loader: PropertySourceLoader, valid_resource: Resource
    ) -> None:
        """Verify a single-document resource yields one source with the requested name."""
        sources = loader.load("contract", valid_resource)

        assert [source.name for source in sources] == ["contract"]

    # CONTRACT TEST 4
    def test_load_returns_fresh_sources_each_call(
        self, loader: PropertySourceLoader, valid_resource: Resource
    ) -> None:
        """Verify repeated loads return equal but distinct source objects."""
        first = loader.load("contract", valid_resource)
        second = loader.load("contract", valid_resource)

        assert first == second
        assert all(a is not b for a, b in zip(first, second, strict=True))

    # CONTRACT TEST 5
    def test_malformed_resource_raises_load_error_with_cause(
        self, loader: PropertySourceLoader, malformed_resource: Resource
    ) -> None:
        """Verify malformed content fails the whole call with LoadError."""
        with pytest.raises(LoadError) as exc_info:
            loader.load("contract", malformed_resource)

        assert exc_info.value.cause is not None
