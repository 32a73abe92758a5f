"""Unit tests for host publication and locator models."""

from reader_telemetry.domain.models.publication import (
    Locations,
    Locator,
    Publication,
    PublicationMetadata,
)


class TestPublication:
    def test_title_and_identifier(self) -> None:
        publication = Publication(
            metadata=PublicationMetadata(title="Moby Dick", identifier="urn:isbn:123")
        )
        assert publication.title == "Moby Dick"
        assert publication.identifier == "urn:isbn:123"


class TestLocator:
    def test_defaults(self) -> None:
        locator = Locator(href="chapter1.xhtml")
        assert locator.locations == Locations()
        assert locator.display_info is None
