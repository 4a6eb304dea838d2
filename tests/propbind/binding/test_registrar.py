"""Tests for ConfigurationRegistrar - infrastructure and type registration."""

from unittest.mock import MagicMock

import pytest

from propbind.binding import (
    BINDING_POST_PROCESSOR_NAME,
    BOUND_PROPERTIES_NAME,
    METHOD_VALIDATION_EXCLUDE_FILTER_NAME,
    NO_TYPE,
    AnnotationView,
    ConfigurationRegistrar,
    EnableConfigurationProperties,
    MethodValidationExcludeFilter,
    get_types,
)
from propbind.errors import MetadataExtractionError, RegistrationDelegationError
from propbind.services import ComponentRegistry, ComponentRole

from .conftest import (
    CacheProperties,
    ExtendedServerProperties,
    PlainService,
    RecordingTypeRegistrar,
    ServerProperties,
)

INFRASTRUCTURE_NAMES = {
    BINDING_POST_PROCESSOR_NAME,
    BOUND_PROPERTIES_NAME,
    METHOD_VALIDATION_EXCLUDE_FILTER_NAME,
}


def recording_registrar() -> tuple[ConfigurationRegistrar, RecordingTypeRegistrar]:
    recorder = RecordingTypeRegistrar()
    return ConfigurationRegistrar(lambda registry: recorder), recorder


# =============================================================================
# Type Extraction
# =============================================================================


class TestGetTypes:
    """Test suite for extracting declared configuration types."""

    def test_duplicates_are_removed(self) -> None:
        """Verify {A, B, A} yields A and B once each."""
        metadata = AnnotationView.of(
            EnableConfigurationProperties(ServerProperties, CacheProperties, ServerProperties)
        )

        assert get_types(metadata) == [ServerProperties, CacheProperties]

    def test_no_type_sentinel_is_filtered(self) -> None:
        """Verify {A, NO_TYPE, B} yields exactly {A, B}."""
        metadata = AnnotationView.of(
            EnableConfigurationProperties(ServerProperties, NO_TYPE, CacheProperties)
        )

        assert set(get_types(metadata)) == {ServerProperties, CacheProperties}

    def test_types_merged_across_declarations(self) -> None:
        """Verify several declarations contribute to one deduplicated set."""
        metadata = AnnotationView.of(
            EnableConfigurationProperties(ServerProperties),
            "unrelated declaration",
            EnableConfigurationProperties(CacheProperties, ServerProperties),
        )

        assert get_types(metadata) == [ServerProperties, CacheProperties]

    def test_empty_declaration_yields_no_types(self) -> None:
        """Verify a declaration without types is valid."""
        assert get_types(AnnotationView.of(EnableConfigurationProperties())) == []

    def test_non_class_value_raises(self) -> None:
        """Verify a value that is not a class is malformed metadata."""
        metadata = AnnotationView.of(
            EnableConfigurationProperties(ServerProperties, "CacheProperties"),
            source="bootstrap.App",
        )

        with pytest.raises(MetadataExtractionError, match="bootstrap.App"):
            get_types(metadata)

    def test_unreadable_metadata_raises(self) -> None:
        """Verify errors raised while reading the view are wrapped."""
        metadata = MagicMock(spec=AnnotationView)
        metadata.source = "broken"
        metadata.declarations_of.side_effect = RuntimeError("cannot read")

        with pytest.raises(MetadataExtractionError) as exc_info:
            get_types(metadata)

        assert isinstance(exc_info.value.__cause__, RuntimeError)


# =============================================================================
# Registration
# =============================================================================


class TestConfigurationRegistrar:
    """Test suite for ConfigurationRegistrar.register_all."""

    def test_registers_infrastructure_components(
        self, registry: ComponentRegistry
    ) -> None:
        """Verify all three infrastructure slots are filled with the infrastructure role."""
        registrar, _ = recording_registrar()

        registrar.register_all(AnnotationView.of(), registry)

        assert set(registry.definitions_of_role(ComponentRole.INFRASTRUCTURE)) == (
            INFRASTRUCTURE_NAMES
        )

    def test_register_all_is_idempotent(self, registry: ComponentRegistry) -> None:
        """Verify running twice keeps exactly one component per infrastructure slot."""
        # Arrange
        metadata = AnnotationView.of(EnableConfigurationProperties(ServerProperties))
        registrar = ConfigurationRegistrar()

        # Act
        registrar.register_all(metadata, registry)
        registrar.register_all(metadata, registry)

        # Assert
        names = registry.names()
        for name in INFRASTRUCTURE_NAMES:
            assert names.count(name) == 1
        assert len(names) == len(INFRASTRUCTURE_NAMES) + 1

    def test_existing_infrastructure_is_left_untouched(
        self, registry: ComponentRegistry
    ) -> None:
        """Verify a pre-registered slot is not replaced."""
        # Arrange
        registrar, _ = recording_registrar()
        registrar.register_all(AnnotationView.of(), registry)
        before = {name: registry.get_definition(name) for name in INFRASTRUCTURE_NAMES}

        # Act - a second bootstrap entry point
        other, _ = recording_registrar()
        other.register_all(AnnotationView.of(), registry)

        # Assert
        for name, definition in before.items():
            assert registry.get_definition(name) is definition

    def test_delegates_once_per_distinct_type(
        self, registry: ComponentRegistry
    ) -> None:
        """Verify {A, B, A} results in exactly two register calls."""
        registrar, recorder = recording_registrar()
        metadata = AnnotationView.of(
            EnableConfigurationProperties(ServerProperties, CacheProperties, ServerProperties)
        )

        registrar.register_all(metadata, registry)

        assert recorder.registered == [ServerProperties, CacheProperties]

    def test_sentinel_never_reaches_type_registrar(
        self, registry: ComponentRegistry
    ) -> None:
        """Verify NO_TYPE is not forwarded."""
        registrar, recorder = recording_registrar()
        metadata = AnnotationView.of(
            EnableConfigurationProperties(ServerProperties, NO_TYPE, CacheProperties)
        )

        registrar.register_all(metadata, registry)

        assert set(recorder.registered) == {ServerProperties, CacheProperties}

    def test_extraction_failure_leaves_registry_untouched(
        self, registry: ComponentRegistry
    ) -> None:
        """Verify malformed metadata aborts before any registration."""
        registrar, recorder = recording_registrar()
        metadata = AnnotationView.of(EnableConfigurationProperties(ServerProperties, 42))

        with pytest.raises(MetadataExtractionError):
            registrar.register_all(metadata, registry)

        assert registry.names() == []
        assert recorder.registered == []

    def test_type_registrar_failure_propagates_and_stops(
        self, registry: ComponentRegistry
    ) -> None:
        """Verify the first delegation failure aborts the remaining registrations."""
        # Arrange
        type_registrar = MagicMock()
        type_registrar.register.side_effect = [
            RegistrationDelegationError("boom"),
            None,
        ]
        registrar = ConfigurationRegistrar(lambda registry: type_registrar)
        metadata = AnnotationView.of(
            EnableConfigurationProperties(ServerProperties, CacheProperties)
        )

        # Act & Assert
        with pytest.raises(RegistrationDelegationError, match="boom"):
            registrar.register_all(metadata, registry)

        assert type_registrar.register.call_count == 1
        # Infrastructure registered before the failure is not rolled back
        assert INFRASTRUCTURE_NAMES <= set(registry.names())

    def test_default_type_registrar_rejects_unmarked_type(
        self, registry: ComponentRegistry
    ) -> None:
        """Verify the bundled type registrar surfaces RegistrationDelegationError."""
        metadata = AnnotationView.of(EnableConfigurationProperties(PlainService))

        with pytest.raises(RegistrationDelegationError, match="PlainService"):
            ConfigurationRegistrar().register_all(metadata, registry)

    def test_exclude_filter_excludes_configuration_types(
        self, registry: ComponentRegistry
    ) -> None:
        """Verify the registered filter only excludes marked types."""
        registrar, _ = recording_registrar()
        registrar.register_all(AnnotationView.of(), registry)

        exclude_filter = registry.get_component(METHOD_VALIDATION_EXCLUDE_FILTER_NAME)

        assert isinstance(exclude_filter, MethodValidationExcludeFilter)
        assert exclude_filter.is_excluded(ServerProperties)
        assert not exclude_filter.is_excluded(PlainService)

    def test_exclude_filter_ignores_undecorated_subclass(
        self, registry: ComponentRegistry
    ) -> None:
        registrar, _ = recording_registrar()
        registrar.register_all(AnnotationView.of(), registry)

        exclude_filter = registry.get_component(METHOD_VALIDATION_EXCLUDE_FILTER_NAME)

        assert not exclude_filter.is_excluded(ExtendedServerProperties)

    def test_exclude_filter_name_is_namespaced(self) -> None:
        """Verify the filter name combines the registrar namespace and attribute name."""
        assert METHOD_VALIDATION_EXCLUDE_FILTER_NAME == (
            "propbind.binding.registrar.ConfigurationRegistrar"
            ".methodValidationExcludeFilter"
        )
