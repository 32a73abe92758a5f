"""Host-side publication and locator models.

The reader owns these objects; telemetry only reads them. Only the
fields telemetry needs are modeled here.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PublicationMetadata:
    """Descriptive metadata of an open publication.

    Attributes:
        title: Human-readable title.
        identifier: Stable identifier (e.g. "urn:isbn:...").
    """

    title: str
    identifier: str


@dataclass(frozen=True)
class Publication:
    """The host's in-memory representation of an open document."""

    metadata: PublicationMetadata

    @property
    def title(self) -> str:
        return str(self.metadata.title)

    @property
    def identifier(self) -> str:
        return self.metadata.identifier


@dataclass(frozen=True)
class Locations:
    """Position of a locator inside its resource and the publication."""

    progression: float | None = None
    position: int | None = None
    total_progression: float | None = None


@dataclass(frozen=True)
class Locator:
    """Reference to a specific reading position within a publication.

    Attributes:
        href: Resource the position belongs to.
        type: Media type of the resource.
        title: Optional chapter or section title.
        locations: Position details.
        display_info: Optional human-readable description of the position.
    """

    href: str
    type: str = ""
    title: str | None = None
    locations: Locations = field(default_factory=Locations)
    display_info: str | None = None
