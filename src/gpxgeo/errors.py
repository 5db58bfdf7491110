"""Exceptions raised while reading GPX documents."""

from __future__ import annotations


class GPXError(Exception):
    """Base class for gpxgeo errors."""


class MalformedDocumentError(GPXError):
    """The input could not be parsed into an XML element tree."""


class MissingRequiredAttributeError(GPXError):
    """A point element has a missing or non-numeric lat/lon attribute.

    Only raised when parsing with ``strict_coordinates=True``.
    """

    def __init__(self, tag: str, attribute: str, value: str | None) -> None:
        self.tag = tag
        self.attribute = attribute
        self.value = value
        super().__init__(
            f"<{tag}> has invalid required attribute {attribute}={value!r}"
        )
